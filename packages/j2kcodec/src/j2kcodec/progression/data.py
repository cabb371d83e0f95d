from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any, Tuple

@dataclass(frozen=True, slots=True)
class ProgressionData:
    """Identifiant de paquet : (couche, niveau de résolution, composante, précinct).
    Une instance neuve est produite à chaque pas ; l'itérateur n'en garde aucune.
    """
    layer: int
    resolution_level: int
    component: int
    precinct: int

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.layer, self.resolution_level, self.component, self.precinct)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "layer": int(self.layer),
            "resolution_level": int(self.resolution_level),
            "component": int(self.component),
            "precinct": int(self.precinct),
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "ProgressionData":
        return ProgressionData(
            layer=int(d["layer"]),
            resolution_level=int(d["resolution_level"]),
            component=int(d["component"]),
            precinct=int(d["precinct"]),
        )

FIELDS: Tuple[str, ...] = ("layer", "resolution_level", "component", "precinct")
