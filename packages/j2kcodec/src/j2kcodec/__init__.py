# packages/j2kcodec/src/j2kcodec/__init__.py
from __future__ import annotations

"""j2kcodec - séquencement des paquets JPEG 2000 (public surface).

Expose la config, le tuple de progression et les itérateurs LRCP/RLCP.
"""

__version__ = "0.1.0"

# API publique (stable)
from .config import ProgressionConfig
from .errors import (
    ProgressionPreconditionError,
    UnknownProgressionOrderError,
    UnsupportedProgressionOrderError,
)
from .progression import (
    ProgressionData,
    ProgressionOrder,
    LayerResolutionLevelComponentPositionIterator,
    ResolutionLevelLayerComponentPositionIterator,
    make_progression_iterator,
    parse_progression_order,
)
from .precincts import PrecinctTable, constant_precincts

__all__ = [
    "__version__",
    "ProgressionConfig",
    "ProgressionPreconditionError",
    "UnknownProgressionOrderError", "UnsupportedProgressionOrderError",
    "ProgressionData", "ProgressionOrder",
    "LayerResolutionLevelComponentPositionIterator",
    "ResolutionLevelLayerComponentPositionIterator",
    "make_progression_iterator", "parse_progression_order",
    "PrecinctTable", "constant_precincts",
]
