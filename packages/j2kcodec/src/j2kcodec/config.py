# packages/j2kcodec/src/j2kcodec/config.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .errors import check_non_negative

__all__ = ["ProgressionConfig"]


@dataclass(frozen=True, slots=True)
class ProgressionConfig:
    """
    Bornes **fixes** d'une progression de paquets pour une tuile.

    Cette config est consommée par `j2kcodec.progression.make_progression_iterator`.

    Champs
    ------
    layer_count : int, default=1
        Nombre de couches de qualité (L). Doit être >= 0.
    max_decomposition_levels : int, default=0
        Nmax : maximum des niveaux de décomposition *sur toute la tuile*
        (toutes composantes confondues). Les niveaux de résolution vont de 0 à Nmax.
    component_count : int, default=1
        Nombre de composantes (Csiz). Doit être >= 0.

    Notes
    -----
    - Immuable (`frozen=True`) : les bornes ne changent pas après construction.
    - Validation légère uniquement (`ValueError` si négatif / non entier).
      Aucune vérification de cohérence avec le codestream.
    """

    layer_count: int = 1
    max_decomposition_levels: int = 0
    component_count: int = 1

    def __post_init__(self) -> None:
        check_non_negative(**{
            f"ProgressionConfig.{name}": getattr(self, name)
            for name in ("layer_count", "max_decomposition_levels", "component_count")
        })

    @property
    def resolution_level_count(self) -> int:
        return self.max_decomposition_levels + 1

    def bounds(self) -> Tuple[int, int, int]:
        """(L, Nmax + 1, C) : bornes exclusives des trois axes hors précinct."""
        return (self.layer_count, self.resolution_level_count, self.component_count)
