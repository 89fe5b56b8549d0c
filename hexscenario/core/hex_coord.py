"""
System współrzędnych hexagonalnych (Axial Coordinates) dla map scenariuszy.

Używamy Axial Coordinates (q, r) gdzie:
- q = kolumna (oś pozioma)
- r = wiersz (oś ukośna, rośnie "w dół" ekranu)

Konwersja do Cube Coordinates (tylko wyliczana, nigdy nie przechowywana):
    s = -q - r
    Cube: (q, r, s) gdzie q + r + s = 0

Układ sąsiadów (zgodnie z zegarem od prawej):
    Kierunek        (dq, dr)
    ──────────────────────────
    RIGHT       (→)  (+1,  0)
    LOWER_RIGHT (↘)  ( 0, +1)
    LOWER_LEFT  (↙)  (-1, +1)
    LEFT        (←)  (-1,  0)
    UPPER_LEFT  (↖)  ( 0, -1)
    UPPER_RIGHT (↗)  (+1, -1)

Odległość od środka mapy:
    distance_to_origin = (|q| + |r| + |s|) / 2

Rzutowanie na płaszczyznę ekranu (stały rozmiar kafla):
    x = q * 32 + r * 16
    y = r * -21

Przykład użycia:
    >>> a = AxialCoordinate(0, 0)
    >>> a.next_right()
    AxialCoordinate(q=1, r=0)
    >>> a.neighboring(AxialCoordinate(0, 1))
    <Direction.LOWER_RIGHT: (0, 1)>
    >>> AxialCoordinate(2, -1).distance_to_origin()
    2
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


# Rozmiar kafla w pikselach - musi zgadzać się z warstwą wyświetlania
TILE_WIDTH = 32
TILE_HALF_WIDTH = 16
ROW_HEIGHT = -21


class Direction(Enum):
    """
    Jeden z sześciu kierunków sąsiedztwa.

    Wartość to wektor (dq, dr) w układzie axial.
    Kolejność członków: RIGHT, LOWER_RIGHT, LOWER_LEFT, LEFT, UPPER_LEFT, UPPER_RIGHT.
    """

    RIGHT = (1, 0)
    LOWER_RIGHT = (0, 1)
    LOWER_LEFT = (-1, 1)
    LEFT = (-1, 0)
    UPPER_LEFT = (0, -1)
    UPPER_RIGHT = (1, -1)

    @property
    def offset(self) -> AxialCoordinate:
        """
        Wektor jednostkowy kierunku.

        Returns:
            AxialCoordinate: (dq, dr) jako współrzędna
        """
        dq, dr = self.value
        return AxialCoordinate(dq, dr)

    @property
    def opposite(self) -> Direction:
        """
        Kierunek przeciwny (RIGHT <-> LEFT, LOWER_RIGHT <-> UPPER_LEFT, ...).

        Returns:
            Direction: Kierunek widziany od strony sąsiada
        """
        dq, dr = self.value
        return Direction((-dq, -dr))

    @property
    def slot_name(self) -> str:
        """Nazwa slotu sąsiada, np. "lower_right"."""
        return self.name.lower()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class AxialCoordinate:
    """
    Współrzędna hexagonalna w systemie axial (q, r).

    Klasa jest niemutowalna (frozen=True), więc może być kluczem w słowniku.
    Każda para liczb całkowitych jest poprawną współrzędną - czy leży
    na mapie, rozstrzyga dopiero HexagonalMap.

    Attributes:
        q (int): Współrzędna kolumny
        r (int): Współrzędna wiersza
    """
    q: int
    r: int

    # ─────────────────────────────────────────────────────────────────────────
    # WŁAŚCIWOŚCI
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def s(self) -> int:
        """Trzecia współrzędna w systemie cube (q + r + s = 0)."""
        return -self.q - self.r

    @property
    def cube(self) -> Tuple[int, int, int]:
        """Konwersja do współrzędnych cube (q, r, s)."""
        return (self.q, self.r, self.s)

    @property
    def axial(self) -> Tuple[int, int]:
        """Współrzędne axial jako krotka (q, r)."""
        return (self.q, self.r)

    # ─────────────────────────────────────────────────────────────────────────
    # ODLEGŁOŚĆ
    # ─────────────────────────────────────────────────────────────────────────

    def distance_to_origin(self) -> int:
        """
        Odległość (w krokach) od środka mapy (0, 0).

        Wzór (cube distance):
            (|q| + |r| + |s|) / 2

        Returns:
            int: Nieujemna liczba kroków

        Example:
            >>> AxialCoordinate(2, 0).distance_to_origin()
            2
        """
        return (abs(self.q) + abs(self.r) + abs(self.s)) // 2

    def distance(self, other: AxialCoordinate) -> int:
        """
        Odległość między dwoma hexami.

        Args:
            other: Druga współrzędna

        Returns:
            int: Liczba kroków
        """
        return (other - self).distance_to_origin()

    # ─────────────────────────────────────────────────────────────────────────
    # SĄSIEDZI
    # ─────────────────────────────────────────────────────────────────────────

    def next(self, direction: Direction) -> AxialCoordinate:
        """
        Zwraca sąsiada w określonym kierunku.

        Args:
            direction: Kierunek

        Returns:
            AxialCoordinate: self + wektor kierunku
        """
        return self + direction.offset

    def next_right(self) -> AxialCoordinate:
        return self.next(Direction.RIGHT)

    def next_lower_right(self) -> AxialCoordinate:
        return self.next(Direction.LOWER_RIGHT)

    def next_lower_left(self) -> AxialCoordinate:
        return self.next(Direction.LOWER_LEFT)

    def next_left(self) -> AxialCoordinate:
        return self.next(Direction.LEFT)

    def next_upper_left(self) -> AxialCoordinate:
        return self.next(Direction.UPPER_LEFT)

    def next_upper_right(self) -> AxialCoordinate:
        return self.next(Direction.UPPER_RIGHT)

    def neighbors(self) -> List[AxialCoordinate]:
        """
        Zwraca listę 6 sąsiednich hexów w kolejności Direction.

        Returns:
            List[AxialCoordinate]: Lista 6 sąsiadów
        """
        return [self.next(direction) for direction in Direction]

    def neighboring(self, other: AxialCoordinate) -> Optional[Direction]:
        """
        Sprawdza czy `other` jest bezpośrednim sąsiadem.

        Relacja jest symetryczna: jeśli B leży na RIGHT od A,
        to A leży na LEFT od B.

        Args:
            other: Sprawdzana współrzędna

        Returns:
            Optional[Direction]: Kierunek od self do other,
                albo None jeśli hexy nie sąsiadują (także gdy other == self)

        Example:
            >>> AxialCoordinate(0, 0).neighboring(AxialCoordinate(1, -1))
            <Direction.UPPER_RIGHT: (1, -1)>
            >>> AxialCoordinate(0, 0).neighboring(AxialCoordinate(2, 0)) is None
            True
        """
        delta = other - self
        try:
            return Direction(delta.axial)
        except ValueError:
            return None

    # ─────────────────────────────────────────────────────────────────────────
    # RZUTOWANIE NA EKRAN
    # ─────────────────────────────────────────────────────────────────────────

    def to_pixel(self) -> Tuple[float, float]:
        """
        Pozycja środka hexa na płaszczyźnie ekranu.

        Returns:
            Tuple[float, float]: (x, y) = (32q + 16r, -21r)
        """
        x = self.q * float(TILE_WIDTH) + self.r * float(TILE_HALF_WIDTH)
        y = self.r * float(ROW_HEIGHT)
        return (x, y)

    @classmethod
    def from_pixel(cls, x: float, y: float) -> AxialCoordinate:
        """
        Odwrotność to_pixel dla warstwy wyświetlania.

        Note:
            Wartości są obcinane w stronę zera (jak rzutowanie na int),
            więc punkty pomiędzy środkami hexów nie są zaokrąglane
            do najbliższego hexa.

        Args:
            x, y: Pozycja na ekranie

        Returns:
            AxialCoordinate: Współrzędna hexa
        """
        r = int(y / ROW_HEIGHT)
        q = int((x - r * TILE_HALF_WIDTH) / TILE_WIDTH)
        return cls(q, r)

    @classmethod
    def from_cube(cls, q: int, r: int, s: int) -> AxialCoordinate:
        """
        Tworzy współrzędną z trójki cube.

        Raises:
            ValueError: Jeśli q + r + s != 0
        """
        if q + r + s != 0:
            raise ValueError(f"Invalid cube coordinates: {q} + {r} + {s} != 0")
        return cls(q, r)

    # ─────────────────────────────────────────────────────────────────────────
    # OPERATORY ARYTMETYCZNE
    # ─────────────────────────────────────────────────────────────────────────

    def __add__(self, other: AxialCoordinate) -> AxialCoordinate:
        """Dodawanie współrzędnych."""
        return AxialCoordinate(self.q + other.q, self.r + other.r)

    def __sub__(self, other: AxialCoordinate) -> AxialCoordinate:
        """Odejmowanie współrzędnych."""
        return AxialCoordinate(self.q - other.q, self.r - other.r)

    def __neg__(self) -> AxialCoordinate:
        """Negacja (punkt przeciwny względem origin)."""
        return AxialCoordinate(-self.q, -self.r)

    # ─────────────────────────────────────────────────────────────────────────
    # REPREZENTACJA
    # ─────────────────────────────────────────────────────────────────────────

    def __repr__(self) -> str:
        return f"AxialCoordinate(q={self.q}, r={self.r})"

    def __str__(self) -> str:
        return f"({self.q}, {self.r})"


ORIGIN = AxialCoordinate(0, 0)
