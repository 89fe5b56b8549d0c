"""
Wczytywanie i walidacja grafu kafli scenariusza.

ScenarioGraphLoader zamienia plik zapisu (kafle + połączenia) w zwalidowany
graf: każdy kafel zna swoją pozycję i połączenia w 6 kierunkach.

ALGORYTM:
═══════════════════════════════════════════════════════════════════

    1. Parsowanie          bytes -> SaveFile
    2. Współrzędne         jawne z pliku, brakujące z kolejności
                           (HexagonalMap, waliduje liczbę kafli)
    3. Identyfikatory      jeden tile_id na kafel, jeden connection_id
                           na połączenie (kolejność z pliku)
    4. Połączenia          dla każdego (i, j):
                             - indeksy w zakresie   -> OutOfBoundsTileIndex
                             - hexy sąsiadują       -> NonAdjacentConnection
    5. Sloty sąsiadów      kierunek d na kafelku i, d.opposite na j,
                           slot musi być pusty     -> DuplicateConnection
    6. Indeks pozycji      współrzędna -> tile_id,
                           bez powtórzeń           -> DuplicateCoordinate
    7. Kompletność         pusty slot + kafel na sąsiedniej pozycji
                                                   -> MissingConnection

    Każdy krok działa na lokalnych strukturach. Wynik (ScenarioGraph)
    powstaje dopiero po przejściu WSZYSTKICH sprawdzeń - błąd w dowolnym
    miejscu przerywa całe wczytywanie.

Przykład użycia:
    >>> loader = ScenarioGraphLoader()
    >>> graph = loader.load_bytes(Path("game_state.yaml").read_bytes())
    >>> graph.tile_at(AxialCoordinate(0, 0)).tile_type
    'grass'
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields
from itertools import count
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from ..core.hex_coord import AxialCoordinate, Direction
from ..core.hex_map import HexagonalMap
from .errors import (
    DuplicateConnection,
    DuplicateCoordinate,
    MissingConnection,
    NonAdjacentConnection,
    OutOfBoundsTileIndex,
)
from .save_file import SaveFile, ScenarioTile, TileConnection, parse_save_file


TileId = int
ConnectionId = int


@dataclass
class NeighborSlots:
    """
    Sześć slotów połączeń kafla - po jednym na kierunek.

    Każdy slot trzyma co najwyżej jedno połączenie (connection_id)
    albo None, jeśli w tym kierunku nie ma połączenia.
    """
    right: Optional[ConnectionId] = None
    lower_right: Optional[ConnectionId] = None
    lower_left: Optional[ConnectionId] = None
    left: Optional[ConnectionId] = None
    upper_left: Optional[ConnectionId] = None
    upper_right: Optional[ConnectionId] = None

    def get(self, direction: Direction) -> Optional[ConnectionId]:
        return getattr(self, direction.slot_name)

    def set(self, direction: Direction, connection: ConnectionId) -> None:
        setattr(self, direction.slot_name, connection)

    def is_empty(self, direction: Direction) -> bool:
        return self.get(direction) is None

    def items(self) -> Iterator[Tuple[Direction, Optional[ConnectionId]]]:
        """Pary (kierunek, połączenie) w kolejności Direction."""
        for direction in Direction:
            yield direction, self.get(direction)

    def connected(self) -> Dict[Direction, ConnectionId]:
        """Tylko zajęte sloty."""
        return {d: c for d, c in self.items() if c is not None}

    def remap(self, ids: Sequence[ConnectionId]) -> NeighborSlots:
        """Kopia z numerami połączeń zamienionymi przez ids[numer]."""
        return NeighborSlots(**{
            f.name: (None if getattr(self, f.name) is None else ids[getattr(self, f.name)])
            for f in fields(self)
        })

    def to_dict(self) -> Dict[str, Optional[ConnectionId]]:
        return {direction.slot_name: connection for direction, connection in self.items()}


@dataclass
class TileRecord:
    """
    Zwalidowany kafel przekazywany do warstwy encji.

    Attributes:
        tile_id (TileId): Nieprzezroczysty identyfikator kafla
        tile_type (str): Typ kafla z pliku zapisu
        coordinates (AxialCoordinate): Pozycja na mapie
        neighbors (NeighborSlots): Połączenia w 6 kierunkach (connection_id)
        index (int): Pozycja kafla w pliku zapisu
    """
    tile_id: TileId
    tile_type: str
    coordinates: AxialCoordinate
    neighbors: NeighborSlots
    index: int

    @property
    def name(self) -> str:
        return self.tile_type


@dataclass
class ConnectionRecord:
    """
    Zwalidowane połączenie dwóch kafli.

    Attributes:
        connection_id (ConnectionId): Nieprzezroczysty identyfikator połączenia
        tile_ids (Tuple[TileId, TileId]): Połączone kafle
        tile_indices (Tuple[int, int]): Te same kafle jako indeksy w pliku zapisu
    """
    connection_id: ConnectionId
    tile_ids: Tuple[TileId, TileId]
    tile_indices: Tuple[int, int]

    @property
    def name(self) -> str:
        return f"tile_connection_{self.tile_indices[0]}_{self.tile_indices[1]}"


@dataclass
class ScenarioGraph:
    """
    Wynik wczytywania: kafle, połączenia i indeks pozycji.

    Attributes:
        tiles (List[TileRecord]): Kafle w kolejności z pliku
        connections (List[ConnectionRecord]): Połączenia w kolejności z pliku
        tiles_by_coordinates (Dict[AxialCoordinate, TileId]): Wyszukiwanie przestrzenne
    """
    tiles: List[TileRecord] = field(default_factory=list)
    connections: List[ConnectionRecord] = field(default_factory=list)
    tiles_by_coordinates: Dict[AxialCoordinate, TileId] = field(default_factory=dict)

    # Indeksy po identyfikatorze, budowane raz z list powyżej
    _tiles_by_id: Dict[TileId, TileRecord] = field(init=False, repr=False, compare=False)
    _connections_by_id: Dict[ConnectionId, ConnectionRecord] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self):
        self._tiles_by_id = {tile.tile_id: tile for tile in self.tiles}
        self._connections_by_id = {c.connection_id: c for c in self.connections}

    def tile(self, tile_id: TileId) -> TileRecord:
        """
        Kafel po identyfikatorze.

        Raises:
            KeyError: Jeśli nie ma takiego kafla
        """
        try:
            return self._tiles_by_id[tile_id]
        except KeyError:
            raise KeyError(f"Tile {tile_id} not found") from None

    def tile_at(self, coordinates: AxialCoordinate) -> Optional[TileRecord]:
        """Kafel na danej pozycji albo None."""
        tile_id = self.tiles_by_coordinates.get(coordinates)
        if tile_id is None:
            return None
        return self.tile(tile_id)

    def connection(self, connection_id: ConnectionId) -> ConnectionRecord:
        """
        Połączenie po identyfikatorze.

        Raises:
            KeyError: Jeśli nie ma takiego połączenia
        """
        try:
            return self._connections_by_id[connection_id]
        except KeyError:
            raise KeyError(f"Tile connection {connection_id} not found") from None

    def tile_types(self) -> List[str]:
        """Unikalne typy kafli w kolejności pierwszego wystąpienia."""
        return list(dict.fromkeys(tile.tile_type for tile in self.tiles))


class ScenarioGraphLoader:
    """
    Buduje i waliduje graf kafli z pliku zapisu.

    Loader nie loguje i nie zmienia niczego poza sobą - każdy błąd
    jest rzucany jako wyjątek, a wywołujący decyduje co dalej
    (np. powrót do menu głównego).

    Attributes:
        first_id (int): Pierwszy przydzielany identyfikator. Kafle dostają
            first_id.., połączenia kolejne numery po kaflach.

    Example:
        >>> loader = ScenarioGraphLoader(first_id=100)
        >>> graph = loader.load(save_file)
        >>> graph.tiles[0].tile_id
        100
    """

    def __init__(self, first_id: int = 0):
        self.first_id = first_id

    # ─────────────────────────────────────────────────────────────────────────
    # WEJŚCIE
    # ─────────────────────────────────────────────────────────────────────────

    def load_bytes(self, payload: Union[bytes, str]) -> ScenarioGraph:
        """
        Parsuje i waliduje zawartość game_state.yaml.

        Raises:
            ScenarioParseError: Niepoprawny YAML / struktura
            InvalidTileAmount: Brakujące współrzędne i zła liczba kafli
            ScenarioError: Każdy błąd spójności grafu
        """
        return self.load(parse_save_file(payload))

    def load(self, save_file: SaveFile) -> ScenarioGraph:
        """
        Waliduje sparsowany plik zapisu i buduje graf.

        Args:
            save_file: Kafle i połączenia

        Returns:
            ScenarioGraph: Zwalidowany graf
        """
        tiles = save_file.tiles
        connections = save_file.tile_connections

        coordinates = self.resolve_coordinates(tiles)

        ids = count(self.first_id)
        tile_ids = [next(ids) for _ in tiles]
        connection_ids = [next(ids) for _ in connections]

        slots = self._fill_neighbor_slots(coordinates, connections)
        tiles_by_coordinates = self._index_coordinates(coordinates)
        self._check_completeness(coordinates, slots, tiles_by_coordinates)

        tile_records = [
            TileRecord(
                tile_id=tile_ids[i],
                tile_type=tile.tile_type,
                coordinates=coordinates[i],
                neighbors=slots[i].remap(connection_ids),
                index=i,
            )
            for i, tile in enumerate(tiles)
        ]
        connection_records = [
            ConnectionRecord(
                connection_id=connection_ids[i],
                tile_ids=(tile_ids[connection.tile_a], tile_ids[connection.tile_b]),
                tile_indices=connection.connected_tiles,
            )
            for i, connection in enumerate(connections)
        ]

        return ScenarioGraph(
            tiles=tile_records,
            connections=connection_records,
            tiles_by_coordinates={
                coordinate: tile_ids[i] for coordinate, i in tiles_by_coordinates.items()
            },
        )

    # ─────────────────────────────────────────────────────────────────────────
    # KROKI WALIDACJI
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def resolve_coordinates(tiles: Sequence[ScenarioTile]) -> List[AxialCoordinate]:
        """
        Ustala pozycję każdego kafla.

        Jeśli wszystkie kafle mają jawne współrzędne - używamy ich.
        Jeśli któregoś brakuje - lista musi tworzyć pełną mapę hexagonalną,
        a brakujące pozycje wynikają z kolejności (index_to_coordinate).

        Raises:
            InvalidTileAmount: Brak współrzędnych i zła liczba kafli
        """
        if all(tile.coordinates is not None for tile in tiles):
            return [tile.coordinates for tile in tiles]

        hex_map = HexagonalMap.from_sequence(tiles)
        return [
            tile.coordinates if tile.coordinates is not None else derived
            for tile, derived in hex_map.iter_with_coordinates()
        ]

    @staticmethod
    def _fill_neighbor_slots(
        coordinates: Sequence[AxialCoordinate],
        connections: Sequence[TileConnection],
    ) -> List[NeighborSlots]:
        """
        Wypełnia sloty sąsiadów numerami połączeń (indeks na liście).

        Raises:
            OutOfBoundsTileIndex, NonAdjacentConnection, DuplicateConnection
        """
        slots = [NeighborSlots() for _ in coordinates]

        for connection_index, connection in enumerate(connections):
            for tile_index in connection.connected_tiles:
                if tile_index >= len(coordinates):
                    raise OutOfBoundsTileIndex(tile_index, connection_index, len(coordinates))

            tile_a, tile_b = connection.connected_tiles
            direction = coordinates[tile_a].neighboring(coordinates[tile_b])
            if direction is None:
                raise NonAdjacentConnection(connection_index, tile_a, tile_b)

            for tile_index, slot in ((tile_a, direction), (tile_b, direction.opposite)):
                existing = slots[tile_index].get(slot)
                if existing is not None:
                    raise DuplicateConnection(tile_index, slot, connection_index, existing)
                slots[tile_index].set(slot, connection_index)

        return slots

    @staticmethod
    def _index_coordinates(
        coordinates: Sequence[AxialCoordinate],
    ) -> Dict[AxialCoordinate, int]:
        """
        Buduje mapę współrzędna -> indeks kafla.

        Raises:
            DuplicateCoordinate: Dwa kafle na jednej pozycji
        """
        index: Dict[AxialCoordinate, int] = {}
        for tile_index, coordinate in enumerate(coordinates):
            if coordinate in index:
                raise DuplicateCoordinate(coordinate, index[coordinate], tile_index)
            index[coordinate] = tile_index
        return index

    @staticmethod
    def _check_completeness(
        coordinates: Sequence[AxialCoordinate],
        slots: Sequence[NeighborSlots],
        tiles_by_coordinates: Dict[AxialCoordinate, int],
    ) -> None:
        """
        Każda para sąsiadujących kafli musi mieć połączenie.

        Pusty slot jest w porządku tylko wtedy, gdy w tym kierunku
        nie ma żadnego kafla (krawędź mapy).

        Raises:
            MissingConnection: Sąsiedzi bez połączenia
        """
        for coordinate, tile_slots in zip(coordinates, slots):
            for direction, connection in tile_slots.items():
                if connection is not None:
                    continue
                neighbor = coordinate.next(direction)
                if neighbor in tiles_by_coordinates:
                    raise MissingConnection(coordinate, direction, neighbor)
