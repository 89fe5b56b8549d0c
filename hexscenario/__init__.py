"""
hexscenario - mapy hexagonalne i walidacja grafu kafli scenariusza.

Moduły:
- core: współrzędne axial, promień mapy, HexagonalMap
- scenario: pliki zapisu, ScenarioGraphLoader, ScenarioStore
- events: log zdarzeń wczytywania (JSON)
- game: stany ekranu i sesja gry
"""

from .core import (
    AxialCoordinate,
    Direction,
    HexagonalMap,
    InvalidTileAmount,
    Radius,
    coordinate_to_index,
    index_to_coordinate,
)
from .scenario import ScenarioGraph, ScenarioGraphLoader, ScenarioStore, parse_save_file

__version__ = "1.0.0"

__all__ = [
    "AxialCoordinate", "Direction", "HexagonalMap", "InvalidTileAmount", "Radius",
    "coordinate_to_index", "index_to_coordinate",
    "ScenarioGraph", "ScenarioGraphLoader", "ScenarioStore", "parse_save_file",
]
