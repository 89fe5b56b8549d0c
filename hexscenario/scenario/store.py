"""
Magazyn scenariuszy - pliki zapisu i dane typów kafli.

Układ katalogu danych:

    data/
    ├── defaults.yaml                      # ustawienia + domyślne dane typów
    └── scenarios/
        └── test_map/
            ├── game_state.yaml            # plik zapisu (kafle + połączenia)
            └── tile_types/
                └── grass/
                    ├── tile_type.yaml     # dane typu kafla
                    └── texture.png        # tekstura (tylko ścieżka)

Logika merge (uzupełniania defaults) dla typów kafli:
    1. Wczytaj defaults.yaml -> sekcja tile_type_defaults
    2. Wczytaj tile_types/<typ>/tile_type.yaml
    3. Definicja typu nadpisuje defaults (głęboki merge)

Przykład:
    defaults.yaml:
        tile_type_defaults:
            combat_width: 1

    tile_types/grass/tile_type.yaml:
        combat_width: 2      # nadpisuje default

Użycie:
    >>> store = ScenarioStore("data/")
    >>> store.list_scenarios()
    ['island', 'test_map']
    >>> store.load_tile_type("test_map", "grass")["combat_width"]
    2
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
import copy
import yaml

from .errors import ScenarioParseError


DEFAULT_LOADING = {
    "scenarios_dir": "scenarios",
    "game_state_file": "game_state.yaml",
    "tile_types_dir": "tile_types",
    "tile_type_file": "tile_type.yaml",
    "texture_file": "texture.png",
}


class ScenarioStore:
    """
    Dostęp do scenariuszy na dysku z automatycznym merge defaults.

    Attributes:
        data_path (Path): Ścieżka do folderu data/
        _defaults (Dict): Cache wczytanych defaults
        _tile_types (Dict): Cache wczytanych typów kafli, klucz (scenariusz, typ)

    Example:
        >>> store = ScenarioStore("data/")
        >>> payload = store.read_game_state("test_map")
    """

    def __init__(self, data_path: str = "data/"):
        """
        Inicjalizuje magazyn ze ścieżką do danych.

        Args:
            data_path: Ścieżka do folderu z defaults.yaml i scenarios/
        """
        self.data_path = Path(data_path)
        self._defaults: Optional[Dict] = None
        self._tile_types: Dict[tuple, Dict] = {}

    # ─────────────────────────────────────────────────────────────────────────
    # WCZYTYWANIE PLIKÓW
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def _load_yaml(filepath: Path) -> Dict:
        """
        Wczytuje plik YAML z mappingiem na górnym poziomie.

        Raises:
            FileNotFoundError: Jeśli plik nie istnieje
            ScenarioParseError: Jeśli YAML jest niepoprawny albo nie jest mappingiem
        """
        with open(filepath, 'r', encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ScenarioParseError(f"Could not parse {filepath}: {e}", e) from e

        return _require_mapping(data or {}, str(filepath))

    def get_defaults(self) -> Dict:
        """
        Zwraca zawartość defaults.yaml (pusty słownik jeśli pliku brak).

        Cache'uje wczytany plik - kolejne wywołania są szybkie.
        """
        if self._defaults is None:
            path = self.data_path / "defaults.yaml"
            self._defaults = self._load_yaml(path) if path.exists() else {}
        return self._defaults

    def get_loading_config(self) -> Dict[str, str]:
        """
        Nazwy katalogów i plików scenariusza.

        Returns:
            Dict: DEFAULT_LOADING nadpisane sekcją `loading` z defaults.yaml
        """
        return self._deep_merge(DEFAULT_LOADING, self._defaults_section("loading"))

    def get_tile_type_defaults(self) -> Dict:
        """Sekcja tile_type_defaults z defaults.yaml."""
        return self._defaults_section("tile_type_defaults")

    def _defaults_section(self, name: str) -> Dict:
        section = self.get_defaults().get(name) or {}
        return _require_mapping(section, f"defaults.yaml `{name}`")

    # ─────────────────────────────────────────────────────────────────────────
    # ŚCIEŻKI
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def scenarios_path(self) -> Path:
        return self.data_path / self.get_loading_config()["scenarios_dir"]

    def scenario_path(self, scenario: str) -> Path:
        """
        Katalog scenariusza.

        Raises:
            KeyError: Jeśli scenariusz nie istnieje
        """
        path = self.scenarios_path / scenario
        if not path.is_dir():
            raise KeyError(f"Scenario '{scenario}' not found in {self.scenarios_path}")
        return path

    def game_state_path(self, scenario: str) -> Path:
        """Ścieżka do pliku zapisu scenariusza."""
        return self.scenario_path(scenario) / self.get_loading_config()["game_state_file"]

    def tile_type_dir(self, scenario: str, tile_type: str) -> Path:
        loading = self.get_loading_config()
        return self.scenario_path(scenario) / loading["tile_types_dir"] / tile_type

    def tile_type_path(self, scenario: str, tile_type: str) -> Path:
        """Ścieżka do danych typu kafla."""
        return self.tile_type_dir(scenario, tile_type) / self.get_loading_config()["tile_type_file"]

    def texture_path(self, scenario: str, tile_type: str) -> Path:
        """Ścieżka do tekstury typu kafla (plik nie jest czytany)."""
        return self.tile_type_dir(scenario, tile_type) / self.get_loading_config()["texture_file"]

    def asset_paths(self, scenario: str, tile_types: Iterable[str]) -> List[Path]:
        """
        Wszystkie zasoby potrzebne dla danych typów kafli.

        Returns:
            List[Path]: Dla każdego typu: dane typu, potem tekstura
        """
        paths = []
        for tile_type in dict.fromkeys(tile_types):
            paths.append(self.tile_type_path(scenario, tile_type))
            paths.append(self.texture_path(scenario, tile_type))
        return paths

    # ─────────────────────────────────────────────────────────────────────────
    # SCENARIUSZE
    # ─────────────────────────────────────────────────────────────────────────

    def list_scenarios(self) -> List[str]:
        """
        Zwraca posortowaną listę scenariuszy z plikiem zapisu.

        Returns:
            List[str]: Nazwy katalogów scenariuszy
        """
        if not self.scenarios_path.is_dir():
            return []
        game_state_file = self.get_loading_config()["game_state_file"]
        return sorted(
            path.name for path in self.scenarios_path.iterdir()
            if (path / game_state_file).is_file()
        )

    def read_game_state(self, scenario: str) -> bytes:
        """
        Czyta surowe bajty pliku zapisu.

        Raises:
            KeyError: Jeśli scenariusz nie istnieje
            OSError: Jeśli pliku nie da się przeczytać
        """
        return self.game_state_path(scenario).read_bytes()

    # ─────────────────────────────────────────────────────────────────────────
    # TYPY KAFLI
    # ─────────────────────────────────────────────────────────────────────────

    def load_tile_type(self, scenario: str, tile_type: str) -> Dict:
        """
        Wczytuje dane typu kafla z uzupełnionymi defaults.

        Args:
            scenario: Nazwa scenariusza
            tile_type: Typ kafla (nazwa katalogu w tile_types/)

        Returns:
            Dict: Pełne dane typu (z kluczem "id")

        Raises:
            KeyError: Jeśli scenariusz nie istnieje
            FileNotFoundError: Jeśli typ kafla nie ma pliku danych
            ScenarioParseError: Jeśli plik typu kafla nie jest mappingiem
        """
        key = (scenario, tile_type)
        if key not in self._tile_types:
            raw = self._load_yaml(self.tile_type_path(scenario, tile_type))
            result = self._deep_merge(self.get_tile_type_defaults(), raw)
            result["id"] = tile_type
            self._tile_types[key] = result
        return copy.deepcopy(self._tile_types[key])

    # ─────────────────────────────────────────────────────────────────────────
    # HELPERY
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def _deep_merge(base: Dict, override: Dict) -> Dict:
        """
        Głęboko łączy dwa słowniki.

        Override nadpisuje wartości w base.
        Nested dicts są merge'owane rekurencyjnie.
        """
        result = copy.deepcopy(base)

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = ScenarioStore._deep_merge(result[key], value)
            else:
                result[key] = copy.deepcopy(value)

        return result

    def reload(self) -> None:
        """
        Czyści cache i wymusza ponowne wczytanie plików.

        Przydatne podczas edycji plików YAML w runtime.
        """
        self._defaults = None
        self._tile_types = {}


def describe_asset(path: Path) -> Dict[str, Any]:
    """Krótki opis zasobu do logu zdarzeń."""
    return {"path": str(path), "kind": path.suffix.lstrip(".") or "dir"}


def _require_mapping(data: Any, source: str) -> Dict:
    """Zwraca data, jeśli to słownik - inaczej ScenarioParseError."""
    if not isinstance(data, dict):
        raise ScenarioParseError(
            f"{source} must be a mapping, got {type(data).__name__}"
        )
    return data
