# packages/j2kcodec/src/j2kcodec/precincts.py
# -----------------------------------------------------------------------------
# Fournisseurs de nombre de précincts (resolution_level, component) -> int.
# Les itérateurs de progression ne dépendent que du callable ; ce module en
# fournit des implémentations concrètes (constante, table numpy, géométrie T.800).

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from .config import ProgressionConfig
from .progression.api import PrecinctCountFn

__all__ = [
    "constant_precincts",
    "PrecinctTable",
    "ComponentGeometry",
    "precincts_from_geometry",
]


def constant_precincts(n: int) -> PrecinctCountFn:
    """Même nombre de précincts `n` pour tous les couples (r, i)."""
    if n < 0:
        raise ValueError("precinct count must be >= 0")
    n = int(n)

    def count(resolution_level: int, component: int) -> int:
        return n

    return count


class PrecinctTable:
    """
    Table [resolution_level, component] -> nombre de précincts (int64).

    Appelable comme un `PrecinctCountFn`. Hors table → 0 : c'est le cas des
    niveaux r > N_L d'une composante quand la tuile itère jusqu'à Nmax.
    """

    def __init__(self, counts) -> None:
        try:
            arr = np.array(counts, dtype=np.int64)
        except (TypeError, ValueError) as exc:
            raise ValueError("precinct table must be a 2-D integer array [r, c]") from exc
        if arr.ndim != 2:
            raise ValueError(f"precinct table must be 2-D [r, c] (got ndim={arr.ndim})")
        if (arr < 0).any():
            raise ValueError("precinct counts must be >= 0")
        arr.setflags(write=False)
        self._counts = arr

    @property
    def counts(self) -> np.ndarray:
        return self._counts

    @property
    def shape(self) -> Tuple[int, int]:
        return (int(self._counts.shape[0]), int(self._counts.shape[1]))

    @property
    def max_resolution_level(self) -> int:
        return self.shape[0] - 1

    @property
    def component_count(self) -> int:
        return self.shape[1]

    def __call__(self, resolution_level: int, component: int) -> int:
        R, C = self.shape
        if 0 <= resolution_level < R and 0 <= component < C:
            return int(self._counts[resolution_level, component])
        return 0

    def total(self) -> int:
        """Paquets par couche (somme de la table)."""
        return int(self._counts.sum())

    def progression_config(self, layer_count: int) -> ProgressionConfig:
        return ProgressionConfig(layer_count=layer_count,
                                 max_decomposition_levels=self.max_resolution_level,
                                 component_count=self.component_count)


@dataclass(frozen=True)
class ComponentGeometry:
    """Paramètres d'une composante utiles au découpage en précincts.

    decomposition_levels : N_L (COD/COC)
    subsampling : (XRsiz, YRsiz) (SIZ)
    precinct_exponents : [(PPx, PPy)] pour r = 0..N_L ; None => 15/15 partout
    """
    decomposition_levels: int
    subsampling: Tuple[int, int] = (1, 1)
    precinct_exponents: Optional[Sequence[Tuple[int, int]]] = None

    def __post_init__(self):
        # tuples uniquement : instance hashable
        object.__setattr__(self, "subsampling", tuple(int(v) for v in self.subsampling))
        if self.precinct_exponents is not None:
            object.__setattr__(self, "precinct_exponents",
                               tuple((int(ppx), int(ppy)) for ppx, ppy in self.precinct_exponents))
        if self.decomposition_levels < 0:
            raise ValueError("decomposition_levels must be >= 0")
        if len(self.subsampling) != 2 or self.subsampling[0] <= 0 or self.subsampling[1] <= 0:
            raise ValueError("subsampling must be > 0")
        if self.precinct_exponents is not None:
            if len(self.precinct_exponents) != self.decomposition_levels + 1:
                raise ValueError("precinct_exponents needs one (PPx, PPy) per resolution level")

    def exponents(self, r: int) -> Tuple[int, int]:
        if self.precinct_exponents is None:
            return (15, 15)
        return self.precinct_exponents[r]


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def _precincts_1d(t0: int, t1: int, pp: int) -> int:
    if t1 <= t0:
        return 0
    return _ceil_div(t1, 1 << pp) - (t0 >> pp)


def precincts_from_geometry(tile_rect: Tuple[int, int, int, int],
                            components: Sequence[ComponentGeometry]) -> PrecinctTable:
    """
    Nombre de précincts par (r, i) d'après la géométrie de la tuile (T.800 B.5/B.6).

    tile_rect = (tx0, ty0, tx1, ty1) sur la grille de référence.
    Pour chaque composante i (N_L niveaux, sous-échantillonnage XRsiz/YRsiz) :
        tcx0 = ceil(tx0 / XRsiz), tcx1 = ceil(tx1 / XRsiz)         (idem y)
        trx0 = ceil(tcx0 / 2^(N_L - r)), trx1 = ceil(tcx1 / 2^(N_L - r))
        numprecincts = (ceil(trx1 / 2^PPx) - floor(trx0 / 2^PPx))
                     * (ceil(try1 / 2^PPy) - floor(try0 / 2^PPy))
    La table couvre r = 0..Nmax (Nmax = max des N_L) ; r > N_L donne 0.
    """
    tx0, ty0, tx1, ty1 = (int(v) for v in tile_rect)
    if tx0 < 0 or ty0 < 0 or tx1 <= tx0 or ty1 <= ty0:
        raise ValueError(f"invalid tile rectangle: {tile_rect}")
    n_max = max((c.decomposition_levels for c in components), default=0)
    table = np.zeros((n_max + 1, len(components)), dtype=np.int64)

    for i, comp in enumerate(components):
        xr, yr = comp.subsampling
        tcx0, tcx1 = _ceil_div(tx0, xr), _ceil_div(tx1, xr)
        tcy0, tcy1 = _ceil_div(ty0, yr), _ceil_div(ty1, yr)
        n_l = comp.decomposition_levels
        for r in range(n_l + 1):
            scale = 1 << (n_l - r)
            trx0, trx1 = _ceil_div(tcx0, scale), _ceil_div(tcx1, scale)
            try0, try1 = _ceil_div(tcy0, scale), _ceil_div(tcy1, scale)
            ppx, ppy = comp.exponents(r)
            table[r, i] = _precincts_1d(trx0, trx1, ppx) * _precincts_1d(try0, try1, ppy)

    return PrecinctTable(table)
