"""
Testy dla promienia mapy i walidacji liczby kafli.

Testuje:
- N(ρ) = 3ρ² + 3ρ + 1
- Odwrotność N -> ρ (tylko liczby heksagonalne)
- Górną granicę promienia (255)
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hexscenario.core.radius import (
    InvalidTileAmount, MAX_RADIUS, Radius, tile_amount_for_radius,
)


# ═══════════════════════════════════════════════════════════════════════════
# TEST: TILE AMOUNT
# ═══════════════════════════════════════════════════════════════════════════

def test_tile_amount_first_radii():
    """Kolejne liczby heksagonalne: 1, 7, 19, 37, 61."""
    assert [Radius(r).tile_amount() for r in range(5)] == [1, 7, 19, 37, 61]


@pytest.mark.parametrize("amount,expected", [(1, 0), (7, 1), (19, 2), (37, 3), (61, 4)])
def test_from_tile_amount_valid(amount, expected):
    """Liczba heksagonalna daje dokładny promień."""
    assert Radius.from_tile_amount(amount) == Radius(expected)


def test_from_tile_amount_inverts_every_radius():
    """from_tile_amount(N(ρ)) == ρ dla całego zakresu."""
    for r in range(MAX_RADIUS + 1):
        assert Radius.from_tile_amount(tile_amount_for_radius(r)).value == r


@pytest.mark.parametrize("amount", [0, -7, 2, 6, 8, 18, 20, 36, 38])
def test_from_tile_amount_invalid(amount):
    """Liczby spoza ciągu są odrzucane."""
    with pytest.raises(InvalidTileAmount) as exc_info:
        Radius.from_tile_amount(amount)

    assert exc_info.value.amount == amount


def test_from_tile_amount_above_max_radius():
    """Liczba heksagonalna dla ρ = 256 jest odrzucana."""
    assert Radius.from_tile_amount(tile_amount_for_radius(MAX_RADIUS)).value == MAX_RADIUS

    with pytest.raises(InvalidTileAmount):
        Radius.from_tile_amount(tile_amount_for_radius(MAX_RADIUS + 1))


def test_invalid_tile_amount_is_value_error():
    """InvalidTileAmount można łapać jako ValueError."""
    with pytest.raises(ValueError):
        Radius.from_tile_amount(6)

    assert InvalidTileAmount(6) == InvalidTileAmount(6)
    assert InvalidTileAmount(6) != InvalidTileAmount(8)


# ═══════════════════════════════════════════════════════════════════════════
# TEST: RADIUS VALUE
# ═══════════════════════════════════════════════════════════════════════════

def test_radius_range_checked():
    """Promień musi mieścić się w 0..255."""
    Radius(0)
    Radius(MAX_RADIUS)

    with pytest.raises(ValueError):
        Radius(-1)
    with pytest.raises(ValueError):
        Radius(MAX_RADIUS + 1)


def test_radius_diameter_and_int():
    """Średnica = 2ρ + 1, Radius działa jak int."""
    radius = Radius(3)
    assert radius.diameter == 7
    assert int(radius) == 3
    assert list(range(radius)) == [0, 1, 2]
