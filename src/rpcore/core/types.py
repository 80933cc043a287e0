"""Shared type aliases for the core, domain and data layers."""
from typing import Callable, Mapping

TraitBag = Mapping[str, object]
MissingTraitSink = Callable[[str], None]

__all__ = ["MissingTraitSink", "TraitBag"]
