"""Player statistics endpoints: /player-stats."""

from ...services import player_stats_service
from ..schemas import PlayerStatsCreate, PlayerStatsResponse, PlayerStatsUpdate
from .crud import ResourceView, build_crud_router

view = ResourceView("player-stats", "PlayerStats", PlayerStatsResponse)

router = build_crud_router(player_stats_service, view, PlayerStatsCreate, PlayerStatsUpdate)
