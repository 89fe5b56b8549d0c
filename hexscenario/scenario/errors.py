"""
Błędy wczytywania scenariusza.

Każdy błąd przerywa całe wczytywanie - nie ma częściowego grafu.
Pola błędu są dostępne jako atrybuty, a komunikat nadaje się do logu.
"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.hex_coord import AxialCoordinate, Direction


class ScenarioError(Exception):
    """Base class for scenario loading errors."""

    kind = "scenario_error"


class ScenarioParseError(ScenarioError):
    """Payload is not valid YAML or does not describe a save file."""

    kind = "parse_error"

    def __init__(self, message: str, original: Optional[BaseException] = None):
        self.message = message
        self.original = original
        super().__init__(message)


class OutOfBoundsTileIndex(ScenarioError):
    """A connection references a tile index beyond the tile list."""

    kind = "out_of_bounds_tile_index"

    def __init__(self, tile_index: int, connection_index: int, tile_count: int):
        self.tile_index = tile_index
        self.connection_index = connection_index
        self.tile_count = tile_count
        super().__init__(
            f"Connection {connection_index} references tile {tile_index}, "
            f"but there are only {tile_count} tiles"
        )


class NonAdjacentConnection(ScenarioError):
    """A connection links two tiles that are not geometric neighbors."""

    kind = "non_adjacent_connection"

    def __init__(self, connection_index: int, tile_a: int, tile_b: int):
        self.connection_index = connection_index
        self.tile_a = tile_a
        self.tile_b = tile_b
        super().__init__(
            f"Connection {connection_index} links tiles {tile_a} and {tile_b}, "
            f"which do not neighbor each other"
        )


class DuplicateConnection(ScenarioError):
    """Two connections claim the same directional slot of one tile."""

    kind = "duplicate_connection"

    def __init__(
        self,
        tile_index: int,
        direction: Direction,
        connection_index: int,
        existing_connection: int,
    ):
        self.tile_index = tile_index
        self.direction = direction
        self.connection_index = connection_index
        self.existing_connection = existing_connection
        super().__init__(
            f"Connection {connection_index} wants the {direction.slot_name} slot of tile "
            f"{tile_index}, which is already taken by connection {existing_connection}"
        )


class DuplicateCoordinate(ScenarioError):
    """Two tiles share the same coordinates."""

    kind = "duplicate_coordinate"

    def __init__(self, coordinates: AxialCoordinate, first_tile: int, second_tile: int):
        self.coordinates = coordinates
        self.first_tile = first_tile
        self.second_tile = second_tile
        super().__init__(
            f"Tiles {first_tile} and {second_tile} are both placed at {coordinates}"
        )


class MissingConnection(ScenarioError):
    """Two neighboring tiles have no connection between them."""

    kind = "missing_connection"

    def __init__(
        self,
        coordinates: AxialCoordinate,
        direction: Direction,
        neighbor: AxialCoordinate,
    ):
        self.coordinates = coordinates
        self.direction = direction
        self.neighbor = neighbor
        super().__init__(
            f"Tile at {coordinates} has no {direction.slot_name} connection "
            f"to its neighbor at {neighbor}"
        )
