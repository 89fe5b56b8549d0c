"""
Sesja gry - wczytywanie scenariusza i przełączanie ekranów.

Sesja jest "zewnętrznym współpracownikiem" rdzenia: czyta plik zapisu
z dysku, oddaje bajty do ScenarioGraphLoader, a wynik (albo błąd)
zamienia na zmianę stanu gry i linię w logu.

PRZEBIEG:
═══════════════════════════════════════════════════════════════════

    load_from_file(scenario)
        MAIN_MENU -> GAMEPLAY/LOADING_SCREEN
        odczyt -> parsowanie -> walidacja grafu
        zlecenie zasobów dla każdego typu kafla
        błąd: log + powrót do MAIN_MENU

    check_if_loaded()
        wczytuje dane typów kafli
        błąd: log + powrót do MAIN_MENU
        sukces: GAMEPLAY/IN_GAME
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, List, Optional, Union
import logging

import yaml

from ..core.hex_coord import AxialCoordinate
from ..core.radius import InvalidTileAmount
from ..events.event_logger import LoadEventLogger, LoadEventType
from ..scenario.errors import ScenarioError
from ..scenario.loader import ScenarioGraph, ScenarioGraphLoader, TileRecord
from ..scenario.save_file import parse_save_file
from ..scenario.store import ScenarioStore, describe_asset
from .states import GameState, GameStateMachine, GameplayState


logger = logging.getLogger(__name__)

# Błędy, które kończą wczytywanie powrotem do menu
LOAD_ERRORS = (OSError, KeyError, InvalidTileAmount, ScenarioError, yaml.YAMLError)


class GameSession:
    """
    Sesja gry z jednym wczytywanym scenariuszem.

    Attributes:
        store (ScenarioStore): Dostęp do plików scenariuszy
        events (LoadEventLogger): Log zdarzeń wczytywania
        states (GameStateMachine): Aktualny ekran
        scenario (Optional[str]): Wczytywany scenariusz
        graph (Optional[ScenarioGraph]): Zwalidowany graf (po sukcesie)
        assets_to_load (List[Path]): Zasoby zlecone dla typów kafli
        tile_types (Dict[str, Dict]): Wczytane dane typów kafli

    Example:
        >>> session = GameSession(ScenarioStore("data/"))
        >>> session.load_from_file("test_map") is not None
        True
        >>> session.check_if_loaded()
        'GAMEPLAY/IN_GAME'
    """

    def __init__(
        self,
        store: ScenarioStore,
        events: Optional[LoadEventLogger] = None,
        loader: Optional[ScenarioGraphLoader] = None,
    ):
        self.store = store
        self.events = events or LoadEventLogger()
        self.loader = loader or ScenarioGraphLoader()
        self.states = GameStateMachine(listener=self.events.log_state_change)

        self.scenario: Optional[str] = None
        self.graph: Optional[ScenarioGraph] = None
        self.assets_to_load: List[Path] = []
        self.tile_types: Dict[str, Dict] = {}

    # ─────────────────────────────────────────────────────────────────────────
    # WCZYTYWANIE
    # ─────────────────────────────────────────────────────────────────────────

    def load_from_file(self, scenario: str) -> Optional[ScenarioGraph]:
        """
        Wczytuje i waliduje plik zapisu scenariusza.

        Args:
            scenario: Nazwa scenariusza w katalogu danych

        Returns:
            Optional[ScenarioGraph]: Graf, albo None gdy wczytywanie
                się nie powiodło (gra wraca wtedy do MAIN_MENU)
        """
        self._reset(scenario)
        if not self.states.transition_to(GameState.GAMEPLAY):
            self.states.set_gameplay(GameplayState.LOADING_SCREEN)

        path = str(self.store.data_path)
        try:
            path = str(self.store.scenarios_path / scenario)
            self.events.log_load_start(scenario, path)

            path = str(self.store.game_state_path(scenario))
            payload = self.store.read_game_state(scenario)
            self.events.log_event(LoadEventType.SAVE_FILE_READ, path=path, size=len(payload))

            save_file = parse_save_file(payload)
            self.events.log_event(
                LoadEventType.SAVE_FILE_PARSED,
                tiles=len(save_file.tiles),
                connections=len(save_file.tile_connections),
            )

            graph = self.loader.load(save_file)
        except LOAD_ERRORS as err:
            self._handle_error(path, err)
            return None

        self.events.log_event(
            LoadEventType.GRAPH_VALIDATED,
            tiles=len(graph.tiles),
            connections=len(graph.connections),
            tile_types=graph.tile_types(),
        )

        self.graph = graph
        self.assets_to_load = self.store.asset_paths(scenario, graph.tile_types())
        for asset in self.assets_to_load:
            self.events.log_event(LoadEventType.ASSET_REQUESTED, **describe_asset(asset))

        return graph

    def check_if_loaded(self) -> str:
        """
        Wczytuje dane typów kafli i kończy ekran ładowania.

        Returns:
            str: Stan gry po sprawdzeniu (np. "GAMEPLAY/IN_GAME")
        """
        if self.graph is None or self.states.gameplay != GameplayState.LOADING_SCREEN:
            return self.states.label

        for tile_type in self.graph.tile_types():
            path = f"{self.scenario}/{tile_type}"
            try:
                path = str(self.store.tile_type_path(self.scenario, tile_type))
                self.tile_types[tile_type] = self.store.load_tile_type(self.scenario, tile_type)
            except LOAD_ERRORS as err:
                self._handle_error(path, err)
                return self.states.label
            self.events.log_event(LoadEventType.ASSET_LOADED, path=path, tile_type=tile_type)

        self.states.set_gameplay(GameplayState.IN_GAME)
        self.events.log_load_end(
            success=True,
            tiles=len(self.graph.tiles),
            connections=len(self.graph.connections),
        )
        return self.states.label

    def return_to_main_menu(self) -> None:
        """Wychodzi z rozgrywki i czyści wczytany scenariusz."""
        self.states.transition_to(GameState.MAIN_MENU)
        self._reset(None)

    # ─────────────────────────────────────────────────────────────────────────
    # ZAPYTANIA
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_in_game(self) -> bool:
        return self.states.gameplay == GameplayState.IN_GAME

    def tile_at(self, coordinates: AxialCoordinate) -> Optional[TileRecord]:
        """Kafel na pozycji (None bez wczytanego grafu)."""
        if self.graph is None:
            return None
        return self.graph.tile_at(coordinates)

    def tile_at_pixel(self, x: float, y: float) -> Optional[TileRecord]:
        """Kafel pod punktem ekranu."""
        return self.tile_at(AxialCoordinate.from_pixel(x, y))

    def combat_width(self, coordinates: AxialCoordinate) -> Optional[int]:
        """combat_width typu kafla na pozycji (po check_if_loaded)."""
        tile = self.tile_at(coordinates)
        if tile is None or tile.tile_type not in self.tile_types:
            return None
        return self.tile_types[tile.tile_type].get("combat_width")

    # ─────────────────────────────────────────────────────────────────────────
    # HELPERY
    # ─────────────────────────────────────────────────────────────────────────

    def _handle_error(self, path: Union[str, Path], err: BaseException) -> None:
        """Loguje błąd i wraca do menu głównego."""
        logger.error("Failed to load save file at %s: %s", path, err)
        self.events.log_load_failed(err, str(path))
        self.states.transition_to(GameState.MAIN_MENU)
        self.graph = None
        self.assets_to_load = []
        self.tile_types = {}

    def _reset(self, scenario: Optional[str]) -> None:
        self.scenario = scenario
        self.graph = None
        self.assets_to_load = []
        self.tile_types = {}
