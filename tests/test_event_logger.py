"""
Testy dla LoadEventLogger - log wczytywania w JSON.
"""

import json
import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hexscenario.core.hex_coord import AxialCoordinate, Direction
from hexscenario.events.event_logger import LoadEvent, LoadEventLogger, LoadEventType
from hexscenario.scenario.errors import MissingConnection


@pytest.fixture
def events():
    return LoadEventLogger(scenario="test_map")


def test_steps_are_sequential(events):
    """Każde zdarzenie dostaje kolejny numer."""
    events.log_load_start("test_map", "data/scenarios/test_map")
    events.log_event(LoadEventType.SAVE_FILE_READ, path="game_state.yaml", size=10)

    assert [e.step for e in events.events] == [0, 1]
    assert events.get_event_count() == 2


def test_event_to_dict_skips_empty_data():
    """Zdarzenie bez danych nie ma klucza data."""
    assert LoadEvent(0, LoadEventType.LOAD_START).to_dict() == {"step": 0, "type": "LOAD_START"}
    assert LoadEvent(1, LoadEventType.LOAD_END, {"success": True}).to_dict()["data"] == {"success": True}


def test_load_failed_uses_error_kind(events):
    """LOAD_FAILED niesie rodzaj błędu i kończy log porażką."""
    error = MissingConnection(AxialCoordinate(0, 0), Direction.RIGHT, AxialCoordinate(1, 0))
    events.log_load_failed(error, "game_state.yaml")

    failed = events.get_events_by_type(LoadEventType.LOAD_FAILED)[0]
    assert failed.data["kind"] == "missing_connection"
    assert failed.data["error"] == str(error)
    assert events.result["success"] is False
    assert events.events[-1].event_type == LoadEventType.LOAD_END


def test_state_change(events):
    """Zmiana stanu zapisana jako from/to."""
    events.log_state_change("MAIN_MENU", "GAMEPLAY/LOADING_SCREEN")

    data = events.events[0].data
    assert data == {"from_state": "MAIN_MENU", "to_state": "GAMEPLAY/LOADING_SCREEN"}


def test_to_json_format(events):
    """Log w JSON: metadata, events, result."""
    events.log_load_start("test_map", "data/scenarios/test_map")
    events.log_load_end(success=True, tiles=7)

    log = json.loads(events.to_json())
    assert log["metadata"]["scenario"] == "test_map"
    assert log["events"][0]["type"] == "LOAD_START"
    assert log["result"] == {"success": True, "tiles": 7}


def test_save_creates_directories(events, tmp_path):
    """save() tworzy brakujące katalogi."""
    events.log_load_end(success=True)
    output = tmp_path / "output" / "load_test_map.json"

    events.save(str(output))

    assert json.loads(output.read_text(encoding="utf-8"))["result"]["success"] is True
