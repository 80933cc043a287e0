"""Core helpers shared by the domain and data layers."""

from .rng import RNG

__all__ = ["RNG"]
