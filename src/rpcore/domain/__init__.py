"""Domain models for racial traits and their collaborators."""
