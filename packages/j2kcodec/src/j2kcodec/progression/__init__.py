from __future__ import annotations

# Tuple de progression
from .data import ProgressionData

# Contrat + helpers
from .api import PrecinctCountFn, ProgressionIterator, IteratorBase, drain

# Itérateurs
from .lrcp import LayerResolutionLevelComponentPositionIterator, LRCP
from .rlcp import ResolutionLevelLayerComponentPositionIterator, RLCP

# Ordres (SGcod) + fabrique
from .orders import (
    ProgressionOrder, SUPPORTED_ORDERS,
    parse_progression_order, make_progression_iterator,
)

__all__ = [
    "ProgressionData",
    "PrecinctCountFn", "ProgressionIterator", "IteratorBase", "drain",
    "LayerResolutionLevelComponentPositionIterator", "LRCP",
    "ResolutionLevelLayerComponentPositionIterator", "RLCP",
    "ProgressionOrder", "SUPPORTED_ORDERS",
    "parse_progression_order", "make_progression_iterator",
]
