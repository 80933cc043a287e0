"""Repository exports."""

from .races_repo import RacesRepository

__all__ = [
    "RacesRepository",
]
