"""
Scenarios router - lista scenariuszy i walidacja grafu kafli.
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from typing import Dict, List, Optional
from pathlib import Path
import os

from hexscenario.core.radius import InvalidTileAmount
from hexscenario.scenario.errors import ScenarioError
from hexscenario.scenario.loader import ScenarioGraph, ScenarioGraphLoader
from hexscenario.scenario.store import ScenarioStore


router = APIRouter()

DATA_PATH = Path(os.environ.get(
    "HEXSCENARIO_DATA",
    Path(__file__).parent.parent.parent / "data",
))
_store = ScenarioStore(str(DATA_PATH))


def get_store() -> ScenarioStore:
    return _store


# ═══════════════════════════════════════════════════════════════════════════
# REQUEST/RESPONSE MODELS
# ═══════════════════════════════════════════════════════════════════════════

class TileModel(BaseModel):
    """Zwalidowany kafel."""
    tile_id: int
    tile_type: str
    coordinates: List[int]  # [q, r]
    pixel: List[float]      # [x, y]
    neighbors: Dict[str, Optional[int]]


class ConnectionModel(BaseModel):
    """Połączenie dwóch kafli."""
    connection_id: int
    name: str
    tile_ids: List[int]


class GraphModel(BaseModel):
    """Cały graf scenariusza."""
    scenario: Optional[str] = None
    tiles: List[TileModel]
    connections: List[ConnectionModel]
    tile_types: List[str]


class ValidateRequest(BaseModel):
    """Request do walidacji - treść game_state.yaml."""
    save_file: str


# ═══════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════

def graph_to_model(graph: ScenarioGraph, scenario: Optional[str] = None) -> GraphModel:
    """Zamienia ScenarioGraph na model odpowiedzi."""
    return GraphModel(
        scenario=scenario,
        tiles=[
            TileModel(
                tile_id=tile.tile_id,
                tile_type=tile.tile_type,
                coordinates=list(tile.coordinates.axial),
                pixel=list(tile.coordinates.to_pixel()),
                neighbors=tile.neighbors.to_dict(),
            )
            for tile in graph.tiles
        ],
        connections=[
            ConnectionModel(
                connection_id=connection.connection_id,
                name=connection.name,
                tile_ids=list(connection.tile_ids),
            )
            for connection in graph.connections
        ],
        tile_types=graph.tile_types(),
    )


def _load_or_422(payload: bytes | str) -> ScenarioGraph:
    try:
        return ScenarioGraphLoader().load_bytes(payload)
    except InvalidTileAmount as e:
        raise HTTPException(
            status_code=422, detail={"error": str(e), "kind": "invalid_tile_amount"}
        ) from e
    except ScenarioError as e:
        raise HTTPException(status_code=422, detail={"error": str(e), "kind": e.kind}) from e


# ═══════════════════════════════════════════════════════════════════════════
# ENDPOINTS
# ═══════════════════════════════════════════════════════════════════════════

@router.get("/scenarios")
async def get_scenarios(store: ScenarioStore = Depends(get_store)) -> List[str]:
    """
    Zwraca listę dostępnych scenariuszy.
    """
    return store.list_scenarios()


@router.get("/scenarios/{name}", response_model=GraphModel)
async def get_scenario(name: str, store: ScenarioStore = Depends(get_store)) -> GraphModel:
    """
    Wczytuje i waliduje scenariusz.

    Args:
        name: Nazwa scenariusza

    Returns:
        Zwalidowany graf kafli
    """
    try:
        payload = store.read_game_state(name)
    except (KeyError, FileNotFoundError) as e:
        raise HTTPException(status_code=404, detail=f"Scenario '{name}' not found") from e

    return graph_to_model(_load_or_422(payload), scenario=name)


@router.post("/scenarios/validate", response_model=GraphModel)
async def validate_scenario(request: ValidateRequest) -> GraphModel:
    """
    Waliduje przesłaną treść pliku zapisu.

    Returns:
        Zwalidowany graf albo 422 z rodzajem błędu
    """
    return graph_to_model(_load_or_422(request.save_file))
