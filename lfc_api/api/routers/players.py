"""
Player endpoints: /players plus the player's stats and current contract.

Example URLs:
- /api/v1/players?limit=20 - First 20 players
- /api/v1/players/7/stats - Statistics for player 7
- /api/v1/players/7/contract - Player 7's current contract
"""

from fastapi import Depends, Path, Response
from sqlalchemy.orm import Session

from ...database.connection import get_db
from ...services import player_service
from ..schemas import (
    ContractResponse,
    DataEnvelope,
    PlayerCreate,
    PlayerResponse,
    PlayerStatsResponse,
    PlayerUpdate,
)
from . import contracts, player_stats
from .crud import ResourceView, build_crud_router

view = ResourceView(
    "players",
    "Player",
    PlayerResponse,
    related={
        "current_contract": ("contracts", "current_contract_id"),
        "stats": ("player-stats", "stats_id"),
    },
)

router = build_crud_router(player_service, view, PlayerCreate, PlayerUpdate)


@router.get("/{player_id}/stats", response_model=DataEnvelope[PlayerStatsResponse])
async def get_player_stats(response: Response, player_id: int = Path(ge=1), db: Session = Depends(get_db)):
    """
    Get the statistics document linked to a player.

    Raises:
        404 if the player does not exist or has no statistics yet
    """
    stats = player_service.stats_for(db, player_id)
    response.headers["X-Resource-Type"] = player_stats.view.resource_type
    body = player_stats.view.envelope(stats)
    body["links"] = {**body["links"], "player": view.item_url(player_id)}
    return body


@router.get("/{player_id}/contract", response_model=DataEnvelope[ContractResponse])
async def get_player_contract(response: Response, player_id: int = Path(ge=1), db: Session = Depends(get_db)):
    """Get the player's current contract (404 if none is set)."""
    contract = player_service.contract_for(db, player_id)
    response.headers["X-Resource-Type"] = contracts.view.resource_type
    body = contracts.view.envelope(contract)
    body["links"] = {**body["links"], "player": view.item_url(player_id)}
    return body
