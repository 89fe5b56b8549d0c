"""
Core module - geometria mapy hexagonalnej.

Zawiera:
- AxialCoordinate, Direction: System współrzędnych hexagonalnych
- Radius, InvalidTileAmount: Promień mapy i walidacja liczby kafli
- HexagonalMap: Gęsta mapa z bijekcją współrzędna <-> indeks
"""

from .hex_coord import AxialCoordinate, Direction, ORIGIN
from .radius import Radius, InvalidTileAmount, MAX_RADIUS
from .hex_map import (
    HexagonalMap,
    coordinate_to_index,
    index_to_coordinate,
    coordinates_in_radius,
)

__all__ = [
    "AxialCoordinate", "Direction", "ORIGIN",
    "Radius", "InvalidTileAmount", "MAX_RADIUS",
    "HexagonalMap", "coordinate_to_index", "index_to_coordinate",
    "coordinates_in_radius",
]
