"""Exceptions raised while loading race definition files."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when a definition file is missing, unreadable or not JSON."""


class DataValidationError(DataError):
    """Raised when definition content has the wrong structure."""
