"""
System logowania zdarzeń wczytywania scenariusza do formatu JSON.

Każdy krok wczytywania (odczyt pliku, parsowanie, walidacja, zasoby,
zmiany stanu gry) jest zapisywany z kontekstem. Log pozwala później
sprawdzić, dlaczego scenariusz nie wczytał się, bez uruchamiania gry.

TYPY ZDARZEŃ:
═══════════════════════════════════════════════════════════════════

    LOAD_START
    ─────────────────────────────────────────────────────────────
    Początek wczytywania.
    Data: scenario, path

    SAVE_FILE_READ
    ─────────────────────────────────────────────────────────────
    Plik zapisu przeczytany.
    Data: path, size

    SAVE_FILE_PARSED
    ─────────────────────────────────────────────────────────────
    Plik zapisu sparsowany.
    Data: tiles, connections

    GRAPH_VALIDATED
    ─────────────────────────────────────────────────────────────
    Graf kafli przeszedł walidację.
    Data: tiles, connections, tile_types

    ASSET_REQUESTED / ASSET_LOADED
    ─────────────────────────────────────────────────────────────
    Zasób typu kafla zlecony / wczytany.
    Data: path, kind

    LOAD_FAILED
    ─────────────────────────────────────────────────────────────
    Wczytywanie przerwane.
    Data: error, kind, path

    STATE_CHANGE
    ─────────────────────────────────────────────────────────────
    Zmiana stanu gry.
    Data: from_state, to_state

    LOAD_END
    ─────────────────────────────────────────────────────────────
    Koniec wczytywania.
    Data: success

FORMAT LOGU:
═══════════════════════════════════════════════════════════════════

{
    "metadata": {
        "version": "1.0",
        "scenario": "test_map",
        "timestamp": "2024-01-01T12:00:00"
    },
    "events": [
        {"step": 0, "type": "LOAD_START", "data": {...}},
        {"step": 1, "type": "SAVE_FILE_READ", "data": {...}},
        ...
    ],
    "result": {
        "success": true,
        "tiles": 7,
        "connections": 6
    }
}
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional
from datetime import datetime
import json
from pathlib import Path


class LoadEventType(Enum):
    """Typ zdarzenia wczytywania."""

    LOAD_START = auto()
    LOAD_END = auto()

    # Plik zapisu
    SAVE_FILE_READ = auto()
    SAVE_FILE_PARSED = auto()
    GRAPH_VALIDATED = auto()

    # Zasoby
    ASSET_REQUESTED = auto()
    ASSET_LOADED = auto()

    # Błędy / stan
    LOAD_FAILED = auto()
    STATE_CHANGE = auto()


@dataclass
class LoadEvent:
    """
    Pojedyncze zdarzenie wczytywania.

    Attributes:
        step (int): Numer kolejny zdarzenia
        event_type (LoadEventType): Typ zdarzenia
        data (Dict): Dodatkowe dane specyficzne dla typu zdarzenia
    """
    step: int
    event_type: LoadEventType
    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serializuje zdarzenie do słownika."""
        result = {
            "step": self.step,
            "type": self.event_type.name,
        }

        if self.data:
            result["data"] = self.data

        return result


class LoadEventLogger:
    """
    Logger zdarzeń wczytywania.

    Zbiera wszystkie zdarzenia i może je zapisać do pliku JSON.

    Attributes:
        events (List[LoadEvent]): Lista wszystkich zdarzeń
        metadata (Dict): Metadane (scenariusz, czas)
        result (Dict): Podsumowanie po zakończeniu

    Example:
        >>> logger = LoadEventLogger(scenario="test_map")
        >>> logger.log_event(LoadEventType.LOAD_START, path="data/scenarios/test_map")
        >>> logger.save("output/load_test_map.json")
    """

    def __init__(self, scenario: Optional[str] = None):
        """
        Inicjalizuje logger.

        Args:
            scenario: Nazwa wczytywanego scenariusza
        """
        self.events: List[LoadEvent] = []
        self.metadata: Dict[str, Any] = {
            "version": "1.0",
            "scenario": scenario,
            "timestamp": datetime.now().isoformat(),
        }
        self.result: Dict[str, Any] = {}

    # ─────────────────────────────────────────────────────────────────────────
    # LOGOWANIE OGÓLNE
    # ─────────────────────────────────────────────────────────────────────────

    def log(self, event: LoadEvent) -> None:
        """Dodaje zdarzenie do logu."""
        self.events.append(event)

    def log_event(self, event_type: LoadEventType, **data: Any) -> LoadEvent:
        """
        Tworzy i loguje zdarzenie z kolejnym numerem.

        Args:
            event_type: Typ zdarzenia
            **data: Dodatkowe dane

        Returns:
            LoadEvent: Utworzone zdarzenie
        """
        event = LoadEvent(step=len(self.events), event_type=event_type, data=dict(data))
        self.log(event)
        return event

    # ─────────────────────────────────────────────────────────────────────────
    # POMOCNICZE METODY LOGOWANIA
    # ─────────────────────────────────────────────────────────────────────────

    def log_load_start(self, scenario: str, path: str) -> None:
        """Loguje start wczytywania."""
        self.metadata["scenario"] = scenario
        self.log_event(LoadEventType.LOAD_START, scenario=scenario, path=path)

    def log_load_failed(self, error: BaseException, path: str) -> None:
        """Loguje przerwanie wczytywania."""
        kind = getattr(error, "kind", type(error).__name__)
        self.log_event(LoadEventType.LOAD_FAILED, error=str(error), kind=kind, path=path)
        self.log_load_end(success=False, error=str(error))

    def log_state_change(self, from_state: str, to_state: str) -> None:
        """Loguje zmianę stanu gry."""
        self.log_event(LoadEventType.STATE_CHANGE, from_state=from_state, to_state=to_state)

    def log_load_end(self, success: bool, **summary: Any) -> None:
        """Loguje koniec wczytywania i zapamiętuje podsumowanie."""
        self.result = {"success": success, **summary}
        self.log_event(LoadEventType.LOAD_END, success=success)

    # ─────────────────────────────────────────────────────────────────────────
    # SERIALIZACJA
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        """
        Serializuje cały log do słownika.

        Returns:
            Dict: Pełny log w formacie dla JSON
        """
        return {
            "metadata": self.metadata,
            "events": [e.to_dict() for e in self.events],
            "result": self.result,
        }

    def save(self, filepath: str) -> None:
        """
        Zapisuje log do pliku JSON.

        Args:
            filepath: Ścieżka do pliku
        """
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    def to_json(self, indent: Optional[int] = 2) -> str:
        """
        Zwraca log jako string JSON.

        Args:
            indent: Wcięcie (None = compact)
        """
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    # ─────────────────────────────────────────────────────────────────────────
    # STATYSTYKI
    # ─────────────────────────────────────────────────────────────────────────

    def get_event_count(self) -> int:
        """Zwraca liczbę zdarzeń."""
        return len(self.events)

    def get_events_by_type(self, event_type: LoadEventType) -> List[LoadEvent]:
        """Filtruje zdarzenia po typie."""
        return [e for e in self.events if e.event_type == event_type]
