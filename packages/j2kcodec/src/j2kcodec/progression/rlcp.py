from __future__ import annotations
import logging

from .api import IteratorBase, PrecinctCountFn
from .data import ProgressionData
from ..errors import check_non_negative

log = logging.getLogger("j2kcodec.progression")

class ResolutionLevelLayerComponentPositionIterator(IteratorBase):
    """Progression RLCP (T.800 B.12.1.2).

        for r in [0, Nmax]
          for l in [0, L)
            for i in [0, Csiz)
              for k in [0, numprecincts(r, i))
                  paquet (l, r, i, k)

    Compteur "odomètre" explicite (pas de générateur). La borne de précinct est
    mise en cache pour le couple (r, i) courant et recalculée à chaque changement
    d'axe. La fin est la sentinelle (0, Nmax + 1, 0, 0), atteinte dans un seul état
    car chaque retenue remet les axes inférieurs à 0.

    Après chaque avance l'état est "posé" : tant qu'il ne désigne pas un paquet
    valide (couple à 0 précinct, L == 0, Csiz == 0), on continue d'avancer. La
    sortie est donc exactement celle de LRCP, réordonnée.
    """

    def __init__(self, layer_count: int, max_decomposition_levels: int,
                 component_count: int, precinct_count: PrecinctCountFn) -> None:
        check_non_negative(layer_count=layer_count,
                           max_decomposition_levels=max_decomposition_levels,
                           component_count=component_count)
        self._layer_count = layer_count
        self._component_count = component_count
        self._precinct_count = precinct_count
        self._end = ProgressionData(0, max_decomposition_levels + 1, 0, 0)

        self._layer = 0
        self._resolution_level = 0
        self._component = 0
        self._precinct = 0
        self._end_precinct = 0
        self._refresh_precinct_bound()
        self._settle()

    @property
    def end(self) -> ProgressionData:
        return self._end

    def _pending(self) -> tuple[int, int, int, int]:
        return (self._layer, self._resolution_level, self._component, self._precinct)

    def has_next(self) -> bool:
        return self._pending() != self._end.as_tuple()

    def _refresh_precinct_bound(self) -> None:
        # Jamais d'appel au provider hors des axes (composante >= Csiz, L == 0).
        if self._layer < self._layer_count and self._component < self._component_count:
            self._end_precinct = self._precinct_count(self._resolution_level, self._component)
        else:
            self._end_precinct = 0

    def _is_packet(self) -> bool:
        return (self._layer < self._layer_count
                and self._component < self._component_count
                and self._precinct < self._end_precinct)

    def _advance(self) -> None:
        self._precinct += 1
        if self._precinct < self._end_precinct:
            return

        self._precinct = 0
        self._component += 1
        if self._component < self._component_count:
            self._refresh_precinct_bound()
            return

        self._component = 0
        self._layer += 1
        if self._layer < self._layer_count:
            self._refresh_precinct_bound()
            return

        self._layer = 0
        self._resolution_level += 1
        if self.has_next():
            self._refresh_precinct_bound()
        else:
            log.debug("RLCP progression exhausted at %s", self._end)

    def _settle(self) -> None:
        while self.has_next() and not self._is_packet():
            self._advance()

    def take_next(self) -> ProgressionData:
        self._require_next()
        current = ProgressionData(*self._pending())
        self._advance()
        self._settle()
        return current

RLCP = ResolutionLevelLayerComponentPositionIterator

__all__ = ["ResolutionLevelLayerComponentPositionIterator", "RLCP"]
