"""
Scenario module - pliki zapisu i walidacja grafu kafli.

Zawiera:
- SaveFile, ScenarioTile, TileConnection, parse_save_file: Format pliku zapisu
- ScenarioGraphLoader, ScenarioGraph: Walidacja i budowa grafu
- ScenarioStore: Scenariusze i typy kafli na dysku
- errors: Błędy wczytywania
"""

from .errors import (
    ScenarioError,
    ScenarioParseError,
    OutOfBoundsTileIndex,
    NonAdjacentConnection,
    DuplicateConnection,
    DuplicateCoordinate,
    MissingConnection,
)
from .save_file import SaveFile, ScenarioTile, TileConnection, parse_save_file
from .loader import (
    ScenarioGraphLoader,
    ScenarioGraph,
    TileRecord,
    ConnectionRecord,
    NeighborSlots,
)
from .store import ScenarioStore

__all__ = [
    "ScenarioError", "ScenarioParseError", "OutOfBoundsTileIndex",
    "NonAdjacentConnection", "DuplicateConnection", "DuplicateCoordinate",
    "MissingConnection",
    "SaveFile", "ScenarioTile", "TileConnection", "parse_save_file",
    "ScenarioGraphLoader", "ScenarioGraph", "TileRecord", "ConnectionRecord",
    "NeighborSlots", "ScenarioStore",
]
