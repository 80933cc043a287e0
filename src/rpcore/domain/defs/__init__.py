"""Domain definition exports."""

from .racial_traits import RacialTraits, Size

__all__ = [
    "RacialTraits",
    "Size",
]
