# packages/j2kwf/src/j2kwf/__init__.py
from __future__ import annotations

from .api import atomic_write, packet_rows

__all__ = [
    "atomic_write",
    "packet_rows",
    # on n’importe PAS le sous-module cli ici
]

__version__ = "0.1.0"
