"""
Stany gry - który ekran jest aktywny.

Gra ma JEDEN aktualny stan główny. Stan GAMEPLAY ma dodatkowo
podstan, który istnieje tylko dopóki gra jest w GAMEPLAY.

STANY:
═══════════════════════════════════════════════════════════════════

    MAIN_MENU (Menu główne)
    ─────────────────────────────────────────────────────────────
    Stan początkowy. Tu wracamy po KAŻDYM błędzie wczytywania.

    Wyjście:
        -> GAMEPLAY (wybrano scenariusz)

    GAMEPLAY (Rozgrywka)
    ─────────────────────────────────────────────────────────────
    Podstany:
        LOADING_SCREEN  - plik zapisu i zasoby są wczytywane
        IN_GAME         - graf zwalidowany, zasoby gotowe

    Wyjście:
        -> MAIN_MENU (błąd wczytywania albo wyjście do menu)

DIAGRAM TRANZYCJI:
═══════════════════════════════════════════════════════════════════

    ┌─────────────┐   wybór scenariusza   ┌──────────────────────────────┐
    │  MAIN_MENU  │ ────────────────────► │ GAMEPLAY                     │
    └─────────────┘                       │   LOADING_SCREEN ──► IN_GAME │
           ▲                              └──────────────┬───────────────┘
           │              błąd / wyjście                 │
           └─────────────────────────────────────────────┘
"""

from __future__ import annotations
from enum import Enum, auto
from typing import Callable, List, Optional, Tuple


class GameState(Enum):
    """Stan główny gry."""

    MAIN_MENU = auto()
    GAMEPLAY = auto()

    def __str__(self) -> str:
        return self.name


class GameplayState(Enum):
    """Podstan stanu GAMEPLAY."""

    LOADING_SCREEN = auto()
    IN_GAME = auto()

    def __str__(self) -> str:
        return self.name


StateListener = Callable[[str, str], None]


class GameStateMachine:
    """
    Maszyna stanów ekranu gry.

    Pamięta historię tranzycji (do testów i logu) i powiadamia
    opcjonalnego słuchacza o każdej zmianie.

    Attributes:
        current (GameState): Aktualny stan główny
        gameplay (Optional[GameplayState]): Podstan (None poza GAMEPLAY)
        history (List[Tuple[str, str]]): Wykonane tranzycje (z, do)

    Example:
        >>> fsm = GameStateMachine()
        >>> fsm.transition_to(GameState.GAMEPLAY)
        True
        >>> fsm.gameplay
        <GameplayState.LOADING_SCREEN: 1>
    """

    def __init__(
        self,
        initial: GameState = GameState.MAIN_MENU,
        listener: Optional[StateListener] = None,
    ):
        self.current: GameState = initial
        self.gameplay: Optional[GameplayState] = (
            GameplayState.LOADING_SCREEN if initial == GameState.GAMEPLAY else None
        )
        self.history: List[Tuple[str, str]] = []
        self.listener = listener

    @property
    def label(self) -> str:
        """Stan jako tekst, np. "GAMEPLAY/IN_GAME"."""
        if self.gameplay is None:
            return str(self.current)
        return f"{self.current}/{self.gameplay}"

    def transition_to(self, new_state: GameState) -> bool:
        """
        Przechodzi do nowego stanu głównego.

        Wejście do GAMEPLAY zawsze zaczyna od LOADING_SCREEN.

        Returns:
            bool: False jeśli gra już jest w tym stanie
        """
        if new_state == self.current:
            return False

        before = self.label
        self.current = new_state
        self.gameplay = GameplayState.LOADING_SCREEN if new_state == GameState.GAMEPLAY else None
        self._record(before)
        return True

    def set_gameplay(self, new_state: GameplayState) -> bool:
        """
        Zmienia podstan GAMEPLAY.

        Returns:
            bool: False poza GAMEPLAY albo gdy podstan się nie zmienia
        """
        if self.current != GameState.GAMEPLAY or self.gameplay == new_state:
            return False

        before = self.label
        self.gameplay = new_state
        self._record(before)
        return True

    def _record(self, before: str) -> None:
        after = self.label
        self.history.append((before, after))
        if self.listener is not None:
            self.listener(before, after)
