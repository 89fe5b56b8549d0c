"""
Testy dla ScenarioStore - pliki scenariuszy i merge defaults.

Testuje:
- Listę scenariuszy i odczyt pliku zapisu
- Dane typów kafli z uzupełnionymi defaults
- Nadpisywanie nazw plików sekcją `loading`
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hexscenario.scenario.errors import ScenarioParseError
from hexscenario.scenario.store import ScenarioStore, describe_asset


DATA_PATH = Path(__file__).parent.parent / "data"


@pytest.fixture
def store():
    """Magazyn z data/ projektu."""
    return ScenarioStore(str(DATA_PATH))


def write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


# ═══════════════════════════════════════════════════════════════════════════
# TEST: SCENARIOS
# ═══════════════════════════════════════════════════════════════════════════

def test_list_scenarios(store):
    """Scenariusze posortowane po nazwie."""
    assert store.list_scenarios() == ["island", "test_map"]


def test_read_game_state(store):
    """Plik zapisu czytany jako bajty."""
    payload = store.read_game_state("test_map")

    assert isinstance(payload, bytes)
    assert b"tile_connections" in payload


def test_unknown_scenario(store):
    """Nieznany scenariusz -> KeyError."""
    with pytest.raises(KeyError):
        store.read_game_state("does_not_exist")


def test_list_skips_dirs_without_game_state(tmp_path):
    """Katalog bez game_state.yaml nie jest scenariuszem."""
    write(tmp_path / "scenarios" / "real" / "game_state.yaml", "tiles: []\n")
    (tmp_path / "scenarios" / "empty").mkdir()

    assert ScenarioStore(str(tmp_path)).list_scenarios() == ["real"]


def test_list_without_scenarios_dir(tmp_path):
    """Brak katalogu scenarios/ -> pusta lista."""
    assert ScenarioStore(str(tmp_path)).list_scenarios() == []


# ═══════════════════════════════════════════════════════════════════════════
# TEST: TILE TYPES
# ═══════════════════════════════════════════════════════════════════════════

def test_tile_type_overrides_defaults(store):
    """Wartość z tile_type.yaml nadpisuje default."""
    grass = store.load_tile_type("test_map", "grass")

    assert grass["id"] == "grass"
    assert grass["name"] == "Grass"
    assert grass["combat_width"] == 2


def test_tile_type_uses_defaults(store):
    """Brakująca wartość pochodzi z tile_type_defaults."""
    water = store.load_tile_type("test_map", "water")
    assert water["combat_width"] == 1


def test_tile_type_is_copied(store):
    """Zmiana zwróconego słownika nie psuje cache."""
    grass = store.load_tile_type("test_map", "grass")
    grass["combat_width"] = 99

    assert store.load_tile_type("test_map", "grass")["combat_width"] == 2


def test_missing_tile_type(store):
    """Typ bez pliku danych -> FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        store.load_tile_type("test_map", "lava")


def test_reload_clears_cache(tmp_path):
    """reload() wczytuje zmienione pliki."""
    tile_type = tmp_path / "scenarios" / "s" / "tile_types" / "sand" / "tile_type.yaml"
    write(tmp_path / "scenarios" / "s" / "game_state.yaml", "tiles: []\n")
    write(tile_type, "combat_width: 3\n")
    store = ScenarioStore(str(tmp_path))
    assert store.load_tile_type("s", "sand")["combat_width"] == 3

    write(tile_type, "combat_width: 4\n")
    assert store.load_tile_type("s", "sand")["combat_width"] == 3

    store.reload()
    assert store.load_tile_type("s", "sand")["combat_width"] == 4


def test_deep_merge_nested():
    """Zagnieżdżone słowniki są łączone, nie podmieniane."""
    base = {"render": {"layer": 1, "tint": "none"}, "combat_width": 1}
    override = {"render": {"tint": "blue"}}

    result = ScenarioStore._deep_merge(base, override)

    assert result == {"render": {"layer": 1, "tint": "blue"}, "combat_width": 1}
    assert base["render"]["tint"] == "none"


# ═══════════════════════════════════════════════════════════════════════════
# TEST: PATHS / LOADING CONFIG
# ═══════════════════════════════════════════════════════════════════════════

def test_loading_config_defaults_without_file(tmp_path):
    """Bez defaults.yaml obowiązują wbudowane nazwy."""
    store = ScenarioStore(str(tmp_path))

    assert store.get_defaults() == {}
    assert store.get_loading_config()["game_state_file"] == "game_state.yaml"


def test_loading_config_override(tmp_path):
    """Sekcja `loading` zmienia nazwy plików."""
    write(tmp_path / "defaults.yaml", "loading:\n  game_state_file: save.yaml\n")
    write(tmp_path / "scenarios" / "s" / "save.yaml", "tiles: []\n")
    store = ScenarioStore(str(tmp_path))

    assert store.list_scenarios() == ["s"]
    assert store.read_game_state("s") == b"tiles: []\n"
    assert store.get_loading_config()["tile_types_dir"] == "tile_types"


def test_asset_paths(store):
    """Dla każdego typu: dane, potem tekstura, bez powtórzeń."""
    paths = store.asset_paths("test_map", ["water", "grass", "water"])
    base = DATA_PATH / "scenarios" / "test_map" / "tile_types"

    assert paths == [
        base / "water" / "tile_type.yaml",
        base / "water" / "texture.png",
        base / "grass" / "tile_type.yaml",
        base / "grass" / "texture.png",
    ]


def test_describe_asset():
    """Opis zasobu: ścieżka + rodzaj z rozszerzenia."""
    assert describe_asset(Path("a/texture.png")) == {"path": str(Path("a/texture.png")), "kind": "png"}
    assert describe_asset(Path("a/tile_type.yaml"))["kind"] == "yaml"


# ═══════════════════════════════════════════════════════════════════════════
# TEST: MALFORMED YAML
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("text", ["- 1\n- 2\n", "42\n", "name: [\n"])
def test_tile_type_must_be_mapping(tmp_path, text):
    """Typ kafla musi być mappingiem YAML."""
    write(tmp_path / "scenarios" / "s" / "game_state.yaml", "tiles: []\n")
    write(tmp_path / "scenarios" / "s" / "tile_types" / "sand" / "tile_type.yaml", text)

    with pytest.raises(ScenarioParseError):
        ScenarioStore(str(tmp_path)).load_tile_type("s", "sand")


def test_defaults_sections_must_be_mappings(tmp_path):
    """Sekcje loading / tile_type_defaults muszą być mappingami."""
    write(tmp_path / "defaults.yaml", "loading: [a, b]\ntile_type_defaults: 3\n")
    store = ScenarioStore(str(tmp_path))

    with pytest.raises(ScenarioParseError):
        store.get_loading_config()
    with pytest.raises(ScenarioParseError):
        store.get_tile_type_defaults()


def test_empty_tile_type_uses_defaults(tmp_path):
    """Pusty plik typu kafla = same defaults."""
    write(tmp_path / "defaults.yaml", "tile_type_defaults:\n  combat_width: 1\n")
    write(tmp_path / "scenarios" / "s" / "game_state.yaml", "tiles: []\n")
    write(tmp_path / "scenarios" / "s" / "tile_types" / "sand" / "tile_type.yaml", "")

    assert ScenarioStore(str(tmp_path)).load_tile_type("s", "sand") == {"combat_width": 1, "id": "sand"}
