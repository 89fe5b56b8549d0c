"""
Game module - stany ekranu i sesja wczytywania scenariusza.

Zawiera:
- GameState, GameplayState: Enumy stanów ekranu
- GameStateMachine: Tranzycje między stanami
- GameSession: Wczytywanie scenariusza z obsługą błędów
"""

from .states import GameState, GameplayState, GameStateMachine
from .session import GameSession

__all__ = ["GameState", "GameplayState", "GameStateMachine", "GameSession"]
