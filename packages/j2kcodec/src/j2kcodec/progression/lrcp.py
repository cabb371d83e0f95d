from __future__ import annotations
import logging
from typing import Iterator, Optional

from .api import IteratorBase, PrecinctCountFn
from .data import ProgressionData
from ..errors import check_non_negative

log = logging.getLogger("j2kcodec.progression")

class LayerResolutionLevelComponentPositionIterator(IteratorBase):
    """Progression LRCP (T.800 B.12.1.1).

        for l in [0, L)
          for r in [0, Nmax]
            for i in [0, Csiz)
              for k in [0, numprecincts(r, i))
                  paquet (l, r, i, k)

    Nmax est le maximum de niveaux de décomposition *de la tuile* : une composante
    avec moins de niveaux renvoie 0 précinct au-delà de son N_L (itérations vides,
    pas de paquet faux).

    Générateur Python + un slot tampon : `has_next()` indique si un tuple est
    tamponné, `take_next()` le rend et relance le générateur jusqu'au suivant.
    """

    def __init__(self, layer_count: int, max_decomposition_levels: int,
                 component_count: int, precinct_count: PrecinctCountFn) -> None:
        check_non_negative(layer_count=layer_count,
                           max_decomposition_levels=max_decomposition_levels,
                           component_count=component_count)
        self._layer_count = layer_count
        self._max_decomposition_levels = max_decomposition_levels
        self._component_count = component_count
        self._precinct_count = precinct_count
        self._generator = self._generate()
        self._next: Optional[ProgressionData] = next(self._generator, None)

    def _generate(self) -> Iterator[ProgressionData]:
        # r va jusqu'à Nmax tuile, pas jusqu'au N_L de chaque composante.
        for l in range(self._layer_count):
            for r in range(self._max_decomposition_levels + 1):
                for i in range(self._component_count):
                    for k in range(self._precinct_count(r, i)):
                        yield ProgressionData(l, r, i, k)
        log.debug("LRCP progression exhausted (L=%d, Nmax=%d, C=%d)",
                  self._layer_count, self._max_decomposition_levels, self._component_count)

    def has_next(self) -> bool:
        return self._next is not None

    def take_next(self) -> ProgressionData:
        self._require_next()
        result = self._next
        self._next = next(self._generator, None)
        return result

LRCP = LayerResolutionLevelComponentPositionIterator

__all__ = ["LayerResolutionLevelComponentPositionIterator", "LRCP"]
