# packages/j2kcodec/src/j2kcodec/progression/orders.py
# -----------------------------------------------------------------------------
# Ordres de progression (SGcod du marqueur COD, T.800 Table A.16)
# et fabrique d'itérateurs pour les ordres supportés (LRCP, RLCP).

from __future__ import annotations
import logging
import operator
from enum import IntEnum
from typing import Union

from .api import IteratorBase, PrecinctCountFn
from .lrcp import LayerResolutionLevelComponentPositionIterator
from .rlcp import ResolutionLevelLayerComponentPositionIterator
from ..config import ProgressionConfig
from ..errors import UnknownProgressionOrderError, UnsupportedProgressionOrderError

__all__ = [
    "ProgressionOrder",
    "SUPPORTED_ORDERS",
    "parse_progression_order",
    "make_progression_iterator",
]

log = logging.getLogger("j2kcodec.progression")


class ProgressionOrder(IntEnum):
    LRCP = 0  # layer-resolution level-component-position
    RLCP = 1  # resolution level-layer-component-position
    RPCL = 2
    PCRL = 3
    CPRL = 4


SUPPORTED_ORDERS: tuple[ProgressionOrder, ...] = (ProgressionOrder.LRCP, ProgressionOrder.RLCP)

_ITERATORS = {
    ProgressionOrder.LRCP: LayerResolutionLevelComponentPositionIterator,
    ProgressionOrder.RLCP: ResolutionLevelLayerComponentPositionIterator,
}


def parse_progression_order(value: Union[int, str, ProgressionOrder]) -> ProgressionOrder:
    """
    Convertit un code SGcod (0..4), un nom ("rlcp", "LRCP"...) ou un
    `ProgressionOrder` en `ProgressionOrder`.

    Exceptions
    ----------
    UnknownProgressionOrderError si la valeur ne correspond à aucun ordre.
    """
    if isinstance(value, ProgressionOrder):
        return value
    if isinstance(value, str):
        try:
            return ProgressionOrder[value.strip().upper()]
        except KeyError as exc:
            raise UnknownProgressionOrderError(f"unknown progression order: {value!r}") from exc
    if isinstance(value, bool):
        raise UnknownProgressionOrderError(f"unknown progression order: {value!r}")
    try:
        return ProgressionOrder(operator.index(value))
    except (TypeError, ValueError) as exc:
        raise UnknownProgressionOrderError(f"unknown progression order: {value!r}") from exc


def make_progression_iterator(
    order: Union[int, str, ProgressionOrder],
    config: ProgressionConfig,
    precinct_count: PrecinctCountFn,
) -> IteratorBase:
    """
    Construit l'itérateur de paquets pour `order` à partir des bornes de `config`.

    Les ordres pilotés par la position (RPCL, PCRL, CPRL) ne sont pas pris en
    charge et lèvent `UnsupportedProgressionOrderError`.
    """
    po = parse_progression_order(order)
    cls = _ITERATORS.get(po)
    if cls is None:
        raise UnsupportedProgressionOrderError(po, tuple(o.name for o in SUPPORTED_ORDERS))
    log.debug("progression %s: L=%d Nmax=%d C=%d", po.name, config.layer_count,
              config.max_decomposition_levels, config.component_count)
    return cls(config.layer_count, config.max_decomposition_levels,
               config.component_count, precinct_count)
