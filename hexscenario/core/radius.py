"""
Promień mapy hexagonalnej i liczba kafli.

Mapa o promieniu ρ składa się z pierścieni 0..ρ wokół środka
i zawiera dokładnie:

    N(ρ) = 3ρ² + 3ρ + 1

kafli (centered hexagonal numbers):

    ρ:    0   1   2   3   4   ...
    N:    1   7  19  37  61   ...

Odwrotność (dla danego N szukamy ρ):

    3ρ² + 3ρ + (1 - N) = 0
    ρ = (-3 + √(12N - 3)) / 6

Liczymy ją na liczbach całkowitych (math.isqrt) i sprawdzamy
wynik podstawieniem - bez błędów zaokrągleń floatów.
"""

from __future__ import annotations
from dataclasses import dataclass
import math


MAX_RADIUS = 255


class InvalidTileAmount(ValueError):
    """
    Liczba kafli nie jest liczbą heksagonalną dla promienia 0..MAX_RADIUS.

    Attributes:
        amount (int): Odrzucona liczba kafli
    """

    def __init__(self, amount: int):
        self.amount = amount
        super().__init__(
            f"{amount} tiles do not form a hexagonal map "
            f"(expected 3r^2 + 3r + 1 tiles for a radius r in 0..{MAX_RADIUS})"
        )

    def __eq__(self, other: object) -> bool:
        return isinstance(other, InvalidTileAmount) and other.amount == self.amount

    def __hash__(self) -> int:
        return hash((InvalidTileAmount, self.amount))


def tile_amount_for_radius(radius: int) -> int:
    """Liczba kafli mapy o promieniu `radius`: 3r² + 3r + 1."""
    return 3 * radius * radius + 3 * radius + 1


@dataclass(frozen=True, order=True)
class Radius:
    """
    Liczba pierścieni mapy hexagonalnej (0..255).

    Wyznaczany raz, z liczby kafli, i niezmienny potem.

    Attributes:
        value (int): Promień ρ

    Example:
        >>> Radius.from_tile_amount(7)
        Radius(1)
        >>> Radius(2).tile_amount()
        19
    """
    value: int

    def __post_init__(self):
        if not 0 <= self.value <= MAX_RADIUS:
            raise ValueError(f"Radius {self.value} is outside 0..{MAX_RADIUS}")

    @classmethod
    def from_tile_amount(cls, amount: int) -> Radius:
        """
        Wyznacza promień z liczby kafli.

        Args:
            amount: Liczba kafli

        Returns:
            Radius: Promień ρ taki, że 3ρ² + 3ρ + 1 == amount

        Raises:
            InvalidTileAmount: Jeśli amount nie jest liczbą heksagonalną
                albo wymagałby promienia większego niż MAX_RADIUS
        """
        if amount < 1:
            raise InvalidTileAmount(amount)

        root = math.isqrt(12 * amount - 3)
        radius = (root - 3) // 6

        if radius > MAX_RADIUS or tile_amount_for_radius(radius) != amount:
            raise InvalidTileAmount(amount)

        return cls(radius)

    def tile_amount(self) -> int:
        """
        Liczba kafli mapy o tym promieniu.

        Returns:
            int: 3ρ² + 3ρ + 1
        """
        return tile_amount_for_radius(self.value)

    @property
    def diameter(self) -> int:
        """Liczba wierszy (i kafli w środkowym wierszu): 2ρ + 1."""
        return 2 * self.value + 1

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"Radius({self.value})"
