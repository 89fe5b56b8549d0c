"""
Mapa hexagonalna (HexagonalMap) z gęstym przechowywaniem kafli.

Kafle trzymamy w płaskiej liście bez dziur. Współrzędna axial jest
zamieniana na indeks w liście (i z powrotem) wzorem zamkniętym, w O(1),
bez słowników i bez przeszukiwania.

Kolejność w liście (przykład dla ρ = 2):
═══════════════════════════════════════════════════════════════════

    r =  2:          (-2, 2) (-1, 2) ( 0, 2)                 0..2
    r =  1:      (-2, 1) (-1, 1) ( 0, 1) ( 1, 1)             3..6
    r =  0:  (-2, 0) (-1, 0) ( 0, 0) ( 1, 0) ( 2, 0)         7..11
    r = -1:      (-1,-1) ( 0,-1) ( 1,-1) ( 2,-1)            12..15
    r = -2:          ( 0,-2) ( 1,-2) ( 2,-2)                16..18

    - wiersze od r = ρ do r = -ρ (malejące r)
    - w wierszu rosnące q, zaczynając od q_min(r) = -ρ - min(0, r)

Liczba kafli przed wierszem r:
═══════════════════════════════════════════════════════════════════

    Dzielimy mapę na dwie części:

    "Dolne" wiersze (r > 0), liczone od najkrótszego wiersza r = ρ.
    Mają po ρ+1, ρ+2, ..., ρ+k kafli, więc k takich wierszy to:

        k·ρ + (1 + 2 + ... + k) = k·ρ + k(k+1)/2        (wzór Gaussa)

    "Górne" wiersze (r <= 0), liczone od najdłuższego wiersza r = 0.
    Mają po 2ρ+1, 2ρ, ..., 2ρ+2-u kafli, więc u takich wierszy to:

        u·(2ρ+2) - (1 + 2 + ... + u) = u·(2ρ+2) - u(u+1)/2

    Dla wiersza r:
        k = ρ - max(0, r)     (0..ρ, wiersz środkowy ma komplet dolnych)
        u = |min(0, r)|       (0..ρ, wiersz środkowy nie liczy się do górnych)

Odwrotność (indeks -> współrzędna):
═══════════════════════════════════════════════════════════════════

    Rozwiązujemy oba wzory względem k i u wzorem kwadratowym,
    na liczbach całkowitych (math.isqrt):

        k² + (2ρ+1)·k - 2i <= 0        =>  k = ⌊(√((2ρ+1)² + 8i) - (2ρ+1)) / 2⌋
        u² - (4ρ+3)·u + 2j >= 0        =>  u = ⌊((4ρ+3) - √((4ρ+3)² - 8j)) / 2⌋

    gdzie j = i - (liczba kafli we wszystkich dolnych wierszach).

Przykład użycia:
    >>> hex_map = HexagonalMap.from_sequence(list("abcdefg"))
    >>> hex_map.radius
    Radius(1)
    >>> hex_map.get(AxialCoordinate(0, 0))
    'd'
    >>> hex_map.get(AxialCoordinate(2, 0)) is None
    True
"""

from __future__ import annotations
from typing import Callable, Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar
import math

from .hex_coord import AxialCoordinate
from .radius import Radius


T = TypeVar("T")
U = TypeVar("U")


# ─────────────────────────────────────────────────────────────────────────────
# ARYTMETYKA WIERSZY
# ─────────────────────────────────────────────────────────────────────────────

def tiles_lower_rows(radius: int, lower_rows: int) -> int:
    """
    Liczba kafli w pierwszych `lower_rows` wierszach z r > 0.

    Args:
        radius: Promień mapy
        lower_rows: Liczba wierszy (0..ρ) licząc od r = ρ

    Returns:
        int: k·ρ + k(k+1)/2
    """
    return lower_rows * radius + lower_rows * (lower_rows + 1) // 2


def tiles_upper_rows(radius: int, upper_rows: int) -> int:
    """
    Liczba kafli w pierwszych `upper_rows` wierszach z r <= 0.

    Zaczynamy od najdłuższego wiersza (r = 0, 2ρ+1 kafli) - prostokąt
    u·(2ρ+2) minus brakujący trójkąt u(u+1)/2.

    Args:
        radius: Promień mapy
        upper_rows: Liczba wierszy (0..ρ+1) licząc od r = 0

    Returns:
        int: u·(2ρ+2) - u(u+1)/2
    """
    diameter = 2 * radius + 1
    return upper_rows * (diameter + 1) - upper_rows * (upper_rows + 1) // 2


def tiles_till_row(radius: int, r: int) -> int:
    """Liczba kafli przechowywanych przed pierwszym kaflem wiersza r."""
    lower_rows = radius - max(0, r)
    upper_rows = abs(min(0, r))
    return tiles_lower_rows(radius, lower_rows) + tiles_upper_rows(radius, upper_rows)


def row_start_q(radius: int, r: int) -> int:
    """Najmniejsze q w wierszu r (pierwszy kafel wiersza)."""
    return -radius - min(0, r)


def coordinate_to_index(radius: Radius | int, coordinates: AxialCoordinate) -> int:
    """
    Zamienia współrzędną na indeks w liście kafli.

    Args:
        radius: Promień mapy
        coordinates: Współrzędna (musi leżeć na mapie!)

    Returns:
        int: Indeks 0..N(ρ)-1

    Note:
        Brak sprawdzania granic - dla współrzędnej spoza promienia
        wynik jest nieokreślony (może być ujemny, za duży albo wskazywać
        inny kafel). Granice sprawdza HexagonalMap.get().
    """
    radius = int(radius)
    offset = coordinates.q - row_start_q(radius, coordinates.r)
    return tiles_till_row(radius, coordinates.r) + offset


def index_to_coordinate(radius: Radius | int, index: int) -> AxialCoordinate:
    """
    Zamienia indeks w liście kafli na współrzędną.

    Dokładna odwrotność coordinate_to_index dla 0 <= index < N(ρ).

    Args:
        radius: Promień mapy
        index: Indeks kafla

    Returns:
        AxialCoordinate: Współrzędna kafla o tym indeksie
    """
    radius = int(radius)
    all_tiles_lower_rows = tiles_lower_rows(radius, radius)

    if index < all_tiles_lower_rows:
        # Odwrotność tiles_lower_rows: największe k z k·ρ + k(k+1)/2 <= index
        b = 2 * radius + 1
        lower_rows = (math.isqrt(b * b + 8 * index) - b) // 2
        r = radius - lower_rows
        row_start = tiles_lower_rows(radius, lower_rows)
    else:
        # Odwrotność tiles_upper_rows: największe u z u·(2ρ+2) - u(u+1)/2 <= j
        upper_index = index - all_tiles_lower_rows
        b = 4 * radius + 3
        discriminant = b * b - 8 * upper_index
        root = math.isqrt(discriminant)
        if root * root < discriminant:
            root += 1
        upper_rows = (b - root) // 2
        r = -upper_rows
        row_start = all_tiles_lower_rows + tiles_upper_rows(radius, upper_rows)

    q = row_start_q(radius, r) + (index - row_start)
    return AxialCoordinate(q, r)


def coordinates_in_radius(radius: Radius | int) -> List[AxialCoordinate]:
    """Wszystkie współrzędne mapy w kolejności przechowywania."""
    radius = Radius(int(radius))
    return [index_to_coordinate(radius, i) for i in range(radius.tile_amount())]


# ─────────────────────────────────────────────────────────────────────────────
# HEXAGONAL MAP
# ─────────────────────────────────────────────────────────────────────────────

class _CoordinateView(Generic[T]):
    """Leniwy, wielokrotnie iterowalny widok par (kafel, współrzędna)."""

    def __init__(self, hex_map: HexagonalMap[T]):
        self._hex_map = hex_map

    def __iter__(self) -> Iterator[Tuple[T, AxialCoordinate]]:
        radius = self._hex_map.radius
        for index, tile in enumerate(self._hex_map.tiles):
            yield tile, index_to_coordinate(radius, index)

    def __len__(self) -> int:
        return len(self._hex_map)


class HexagonalMap(Generic[T]):
    """
    Gęsta mapa hexagonalna: lista N(ρ) kafli + promień.

    Niezmiennik: len(tiles) == N(ρ) zawsze. Kafle można podmieniać
    przez indeks, ale nie można ich dodawać ani usuwać.

    Attributes:
        radius (Radius): Promień mapy
        tiles (Tuple[T, ...]): Kafle w kolejności przechowywania (kopia tylko do odczytu)

    Example:
        >>> hex_map = HexagonalMap.from_sequence(range(7))
        >>> hex_map[hex_map.index_of(AxialCoordinate(0, -1))] = 42
        >>> hex_map.get(AxialCoordinate(0, -1))
        42
    """

    def __init__(self, tiles: List[T], radius: Radius):
        """
        Zwykle przez from_sequence() - tu promień podaje wywołujący.

        Args:
            tiles: Lista o długości radius.tile_amount()
            radius: Promień

        Raises:
            ValueError: Jeśli len(tiles) != radius.tile_amount()
        """
        if len(tiles) != radius.tile_amount():
            raise ValueError(
                f"Radius {radius.value} needs {radius.tile_amount()} tiles, got {len(tiles)}"
            )
        self._tiles = tiles
        self._radius = radius

    @classmethod
    def from_sequence(cls, items: Sequence[T]) -> HexagonalMap[T]:
        """
        Tworzy mapę z sekwencji kafli.

        Kafle NIE są przestawiane - wywołujący odpowiada za to, żeby były
        w kolejności przechowywania (malejące r, rosnące q).

        Args:
            items: Kafle

        Returns:
            HexagonalMap: Mapa o promieniu wynikającym z liczby kafli

        Raises:
            InvalidTileAmount: Jeśli len(items) nie jest liczbą heksagonalną
        """
        tiles = list(items)
        radius = Radius.from_tile_amount(len(tiles))
        return cls(tiles, radius)

    # ─────────────────────────────────────────────────────────────────────────
    # WŁAŚCIWOŚCI
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def radius(self) -> Radius:
        return self._radius

    @property
    def tiles(self) -> Tuple[T, ...]:
        return tuple(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    # ─────────────────────────────────────────────────────────────────────────
    # DOSTĘP PRZEZ WSPÓŁRZĘDNE
    # ─────────────────────────────────────────────────────────────────────────

    def contains(self, coordinates: AxialCoordinate) -> bool:
        """Czy współrzędna leży na mapie (odległość od środka <= ρ)."""
        return coordinates.distance_to_origin() <= self._radius.value

    def index_of(self, coordinates: AxialCoordinate) -> int:
        """
        Indeks kafla o danej współrzędnej.

        Raises:
            KeyError: Jeśli współrzędna leży poza mapą
        """
        if not self.contains(coordinates):
            raise KeyError(f"{coordinates!r} is outside radius {self._radius.value}")
        return coordinate_to_index(self._radius, coordinates)

    def get(self, coordinates: AxialCoordinate) -> Optional[T]:
        """
        Pobiera kafel po współrzędnej, w O(1).

        Args:
            coordinates: Współrzędna axial

        Returns:
            Optional[T]: Kafel, albo None jeśli odległość współrzędnej
                od środka jest większa niż promień mapy
        """
        if not self.contains(coordinates):
            return None
        return self.get_unchecked(coordinates)

    def get_unchecked(self, coordinates: AxialCoordinate) -> T:
        """
        Pobiera kafel po współrzędnej bez sprawdzania granic.

        Warunek wstępny:
            coordinates.distance_to_origin() <= radius - wywołujący musi to
            wiedzieć wcześniej (np. z get() albo contains()).

        Note:
            Dla współrzędnej spoza mapy wynik jest nieokreślony:
            można dostać INNY kafel albo IndexError. Nie polegać na tym.
        """
        return self._tiles[coordinate_to_index(self._radius, coordinates)]

    # ─────────────────────────────────────────────────────────────────────────
    # DOSTĘP PRZEZ INDEKS
    # ─────────────────────────────────────────────────────────────────────────

    def __getitem__(self, index: int) -> T:
        return self._tiles[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._tiles[index] = value

    def coordinate_at(self, index: int) -> AxialCoordinate:
        """
        Współrzędna kafla o danym indeksie.

        Raises:
            IndexError: Jeśli indeks jest poza 0..N(ρ)-1
        """
        if not 0 <= index < len(self._tiles):
            raise IndexError(f"Tile index {index} out of range for {len(self._tiles)} tiles")
        return index_to_coordinate(self._radius, index)

    # ─────────────────────────────────────────────────────────────────────────
    # ITERACJA / KONWERSJA
    # ─────────────────────────────────────────────────────────────────────────

    def iter_with_coordinates(self) -> _CoordinateView[T]:
        """
        Pary (kafel, współrzędna) w kolejności przechowywania.

        Widok jest leniwy i można go iterować wielokrotnie.
        """
        return _CoordinateView(self)

    def coordinates(self) -> List[AxialCoordinate]:
        """Wszystkie współrzędne mapy w kolejności przechowywania."""
        return [index_to_coordinate(self._radius, i) for i in range(len(self._tiles))]

    def map(self, fn: Callable[[T], U]) -> HexagonalMap[U]:
        """Nowa mapa o tym samym promieniu z fn zastosowaną do każdego kafla."""
        return HexagonalMap([fn(tile) for tile in self._tiles], self._radius)

    def into_list(self) -> List[T]:
        """Kopia listy kafli."""
        return list(self._tiles)

    def __iter__(self) -> Iterator[T]:
        return iter(self._tiles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HexagonalMap):
            return NotImplemented
        return self._radius == other._radius and self._tiles == other._tiles

    def __repr__(self) -> str:
        return f"HexagonalMap(radius={self._radius.value}, tiles={self._tiles!r})"
