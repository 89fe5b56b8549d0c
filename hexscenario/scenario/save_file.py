"""
Format pliku zapisu scenariusza (game_state.yaml).

Plik zawiera dwie uporządkowane listy:

    tiles:
      - tile_type: grass
        coordinates: [0, 0]        # opcjonalne: [q, r] albo cube [q, r, s]
      - tile_type: forest
        coordinates: [1, 0]
    tile_connections:
      - connected_tiles: [0, 1]    # indeksy (od 0) w liście `tiles`

Zasady:
    - `tile_connections` można pominąć (brak połączeń)
    - kafel bez `coordinates` dostaje współrzędną z kolejności na liście
      (wtedy liczba kafli musi być liczbą heksagonalną - patrz HexagonalMap)
    - nieznane klucze są ignorowane

Parser sprawdza tylko STRUKTURĘ (typy, wymagane klucze). Spójność grafu
sprawdza ScenarioGraphLoader.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple, Union
import yaml

from ..core.hex_coord import AxialCoordinate
from .errors import ScenarioParseError


@dataclass(frozen=True)
class ScenarioTile:
    """
    Pojedynczy kafel z pliku zapisu.

    Attributes:
        tile_type (str): Identyfikator typu kafla (np. "grass")
        coordinates (Optional[AxialCoordinate]): Jawna pozycja albo None
    """
    tile_type: str
    coordinates: Optional[AxialCoordinate] = None


@dataclass(frozen=True)
class TileConnection:
    """
    Nieskierowane połączenie dwóch kafli (indeksy w liście tiles).

    Attributes:
        tile_a (int): Indeks pierwszego kafla
        tile_b (int): Indeks drugiego kafla
    """
    tile_a: int
    tile_b: int

    @property
    def connected_tiles(self) -> Tuple[int, int]:
        return (self.tile_a, self.tile_b)


@dataclass
class SaveFile:
    """Sparsowany plik zapisu: kafle + połączenia."""
    tiles: List[ScenarioTile] = field(default_factory=list)
    tile_connections: List[TileConnection] = field(default_factory=list)


# ─────────────────────────────────────────────────────────────────────────────
# PARSOWANIE
# ─────────────────────────────────────────────────────────────────────────────

def parse_save_file(payload: Union[bytes, str]) -> SaveFile:
    """
    Parsuje zawartość game_state.yaml.

    Args:
        payload: Surowe bajty (UTF-8) albo tekst

    Returns:
        SaveFile: Kafle i połączenia w kolejności z pliku

    Raises:
        ScenarioParseError: Jeśli YAML jest niepoprawny albo struktura
            nie pasuje do formatu (przyczyna w atrybucie `original`)
    """
    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ScenarioParseError(f"Save file is not valid UTF-8: {e}", e) from e

    try:
        data = yaml.safe_load(payload)
    except yaml.YAMLError as e:
        raise ScenarioParseError(f"Could not parse YAML: {e}", e) from e

    if not isinstance(data, dict):
        raise ScenarioParseError("Save file must be a mapping with a `tiles` list")

    raw_tiles = data.get("tiles")
    if not isinstance(raw_tiles, list):
        raise ScenarioParseError("`tiles` must be a list")

    raw_connections = data.get("tile_connections") or []
    if not isinstance(raw_connections, list):
        raise ScenarioParseError("`tile_connections` must be a list")

    tiles = [_parse_tile(i, raw) for i, raw in enumerate(raw_tiles)]
    connections = [_parse_connection(i, raw) for i, raw in enumerate(raw_connections)]

    return SaveFile(tiles=tiles, tile_connections=connections)


def _parse_tile(index: int, raw: Any) -> ScenarioTile:
    """Parsuje wpis z listy `tiles`."""
    if not isinstance(raw, dict):
        raise ScenarioParseError(f"Tile {index} must be a mapping")

    tile_type = raw.get("tile_type")
    if not isinstance(tile_type, str) or not tile_type:
        raise ScenarioParseError(f"Tile {index} needs a non-empty string `tile_type`")

    raw_coordinates = raw.get("coordinates")
    if raw_coordinates is None:
        return ScenarioTile(tile_type=tile_type)

    if not isinstance(raw_coordinates, list) or not all(_is_int(v) for v in raw_coordinates):
        raise ScenarioParseError(f"Tile {index} has malformed `coordinates`: {raw_coordinates!r}")

    if len(raw_coordinates) == 2:
        coordinates = AxialCoordinate(*raw_coordinates)
    elif len(raw_coordinates) == 3:
        try:
            coordinates = AxialCoordinate.from_cube(*raw_coordinates)
        except ValueError as e:
            raise ScenarioParseError(f"Tile {index}: {e}", e) from e
    else:
        raise ScenarioParseError(
            f"Tile {index} `coordinates` must be [q, r] or [q, r, s], got {raw_coordinates!r}"
        )

    return ScenarioTile(tile_type=tile_type, coordinates=coordinates)


def _parse_connection(index: int, raw: Any) -> TileConnection:
    """Parsuje wpis z listy `tile_connections`."""
    if not isinstance(raw, dict):
        raise ScenarioParseError(f"Tile connection {index} must be a mapping")

    pair = raw.get("connected_tiles")
    if not isinstance(pair, list) or len(pair) != 2 or not all(_is_int(v) for v in pair):
        raise ScenarioParseError(
            f"Tile connection {index} needs `connected_tiles: [a, b]`, got {pair!r}"
        )

    tile_a, tile_b = pair
    if tile_a < 0 or tile_b < 0:
        raise ScenarioParseError(f"Tile connection {index} has a negative tile index")

    return TileConnection(tile_a=tile_a, tile_b=tile_b)


def _is_int(value: Any) -> bool:
    # bool jest podklasą int w Pythonie - YAML `true` to nie indeks
    return isinstance(value, int) and not isinstance(value, bool)
