"""
Events module - logowanie zdarzeń wczytywania do formatu JSON.

Zawiera:
- LoadEvent: Dataclass reprezentująca zdarzenie
- LoadEventType: Enum typów zdarzeń
- LoadEventLogger: Klasa logująca zdarzenia
"""

from .event_logger import LoadEvent, LoadEventType, LoadEventLogger

__all__ = ["LoadEvent", "LoadEventType", "LoadEventLogger"]
