"""
Testy dla HexagonalMap i konwersji współrzędna <-> indeks.

Testuje:
- Bijekcję coordinate_to_index / index_to_coordinate
- Kolejność przechowywania (malejące r, rosnące q)
- Dostęp z granicami (get) i bez (get_unchecked)
- Tworzenie mapy z sekwencji kafli
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hexscenario.core.hex_coord import AxialCoordinate, ORIGIN
from hexscenario.core.hex_map import (
    HexagonalMap, coordinate_to_index, coordinates_in_radius, index_to_coordinate,
    tiles_till_row,
)
from hexscenario.core.radius import InvalidTileAmount, Radius


def all_coordinates(radius):
    """Wszystkie współrzędne w odległości <= radius (bez kolejności)."""
    return {
        AxialCoordinate(q, r)
        for q in range(-radius, radius + 1)
        for r in range(-radius, radius + 1)
        if AxialCoordinate(q, r).distance_to_origin() <= radius
    }


# ═══════════════════════════════════════════════════════════════════════════
# TEST: INDEXING
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("radius", range(6))
def test_coordinate_to_index_is_bijection(radius):
    """Każdy hex dostaje inny indeks z zakresu 0..N(ρ)-1."""
    amount = Radius(radius).tile_amount()
    indices = sorted(coordinate_to_index(radius, c) for c in all_coordinates(radius))

    assert indices == list(range(amount))


@pytest.mark.parametrize("radius", range(6))
def test_index_to_coordinate_inverts(radius):
    """index_to_coordinate jest dokładną odwrotnością."""
    for index in range(Radius(radius).tile_amount()):
        coord = index_to_coordinate(radius, index)
        assert coord.distance_to_origin() <= radius
        assert coordinate_to_index(radius, coord) == index


def test_index_to_coordinate_large_radius():
    """Odwrotność działa na liczbach całkowitych także dla ρ = 255."""
    radius = Radius(255)
    last = radius.tile_amount() - 1

    assert index_to_coordinate(radius, 0) == AxialCoordinate(-255, 255)
    assert index_to_coordinate(radius, last) == AxialCoordinate(255, -255)
    for index in (1, 254, 255, 256, 40000, 97920, 97921, last - 256, last - 255):
        assert coordinate_to_index(radius, index_to_coordinate(radius, index)) == index


def test_storage_order_radius_1():
    """Wiersze od r = 1 do r = -1, w wierszu rosnące q."""
    assert coordinates_in_radius(1) == [
        AxialCoordinate(-1, 1), AxialCoordinate(0, 1),
        AxialCoordinate(-1, 0), AxialCoordinate(0, 0), AxialCoordinate(1, 0),
        AxialCoordinate(0, -1), AxialCoordinate(1, -1),
    ]


@pytest.mark.parametrize("radius", range(1, 5))
def test_storage_order_rows(radius):
    """r nigdy nie rośnie, a w wierszu q rośnie o 1."""
    coords = coordinates_in_radius(radius)
    for before, after in zip(coords, coords[1:]):
        if after.r == before.r:
            assert after.q == before.q + 1
        else:
            assert after.r == before.r - 1


def test_center_is_middle_index():
    """Środek mapy leży w połowie listy."""
    for radius in range(6):
        amount = Radius(radius).tile_amount()
        assert coordinate_to_index(radius, ORIGIN) == amount // 2


def test_tiles_till_row_radius_2():
    """Początki wierszy dla ρ = 2: 0, 3, 7, 12, 16."""
    assert [tiles_till_row(2, r) for r in (2, 1, 0, -1, -2)] == [0, 3, 7, 12, 16]


# ═══════════════════════════════════════════════════════════════════════════
# TEST: HEXAGONAL MAP
# ═══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def small_map():
    """Mapa o promieniu 1 z literami a..g."""
    return HexagonalMap.from_sequence(list("abcdefg"))


def test_from_sequence_radius(small_map):
    """7 kafli = promień 1."""
    assert small_map.radius == Radius(1)
    assert len(small_map) == 7


@pytest.mark.parametrize("amount", [0, 2, 6, 8, 20])
def test_from_sequence_invalid_amount(amount):
    """Zła liczba kafli -> InvalidTileAmount."""
    with pytest.raises(InvalidTileAmount):
        HexagonalMap.from_sequence(range(amount))


def test_constructor_checks_tile_count():
    """Konstruktor odrzuca listę o długości innej niż N(ρ)."""
    with pytest.raises(ValueError):
        HexagonalMap([1, 2], Radius(1))
    with pytest.raises(ValueError):
        HexagonalMap(list(range(7)), Radius(2))

    hex_map = HexagonalMap(list(range(7)), Radius(1))
    assert hex_map.get(ORIGIN) == 3


def test_get_by_coordinates(small_map):
    """get zwraca kafel z indeksu wyliczonego ze współrzędnej."""
    assert small_map.get(ORIGIN) == "d"
    assert small_map.get(AxialCoordinate(-1, 1)) == "a"
    assert small_map.get(AxialCoordinate(1, 0)) == "e"
    assert small_map.get(AxialCoordinate(1, -1)) == "g"


def test_get_outside_radius_is_none(small_map):
    """Współrzędne dalej niż promień dają None."""
    assert small_map.get(AxialCoordinate(2, 0)) is None
    assert small_map.get(AxialCoordinate(1, 1)) is None
    assert small_map.get(AxialCoordinate(-5, 3)) is None


def test_get_unchecked_inside_radius(small_map):
    """get_unchecked daje to samo co get na mapie."""
    for coord in small_map.coordinates():
        assert small_map.get_unchecked(coord) == small_map.get(coord)


def test_contains_and_index_of(small_map):
    """index_of rzuca KeyError poza mapą."""
    assert small_map.contains(AxialCoordinate(0, -1))
    assert not small_map.contains(AxialCoordinate(0, -2))
    assert small_map.index_of(AxialCoordinate(0, -1)) == 5

    with pytest.raises(KeyError):
        small_map.index_of(AxialCoordinate(0, -2))


def test_setitem_replaces_tile(small_map):
    """Kafel można podmienić, liczba kafli się nie zmienia."""
    small_map[small_map.index_of(ORIGIN)] = "center"

    assert small_map.get(ORIGIN) == "center"
    assert len(small_map) == 7


def test_coordinate_at(small_map):
    """coordinate_at sprawdza zakres indeksu."""
    assert small_map.coordinate_at(3) == ORIGIN

    with pytest.raises(IndexError):
        small_map.coordinate_at(7)


def test_iter_with_coordinates_restartable(small_map):
    """Widok (kafel, współrzędna) można iterować wielokrotnie."""
    view = small_map.iter_with_coordinates()
    first = list(view)
    second = list(view)

    assert first == second
    assert len(view) == 7
    assert first[0] == ("a", AxialCoordinate(-1, 1))
    assert all(small_map.get(coord) == tile for tile, coord in first)


def test_map_keeps_radius(small_map):
    """map() przekształca kafle, promień zostaje."""
    upper = small_map.map(str.upper)

    assert upper.radius == small_map.radius
    assert upper.into_list() == list("ABCDEFG")
    assert small_map.into_list() == list("abcdefg")


def test_equality():
    """Mapy są równe przy równych kaflach."""
    assert HexagonalMap.from_sequence([1]) == HexagonalMap.from_sequence([1])
    assert HexagonalMap.from_sequence(range(7)) != HexagonalMap.from_sequence(range(1, 8))
