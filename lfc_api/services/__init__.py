"""Service layer shared by the REST and GraphQL front ends.

Services are stateless, so one instance of each is created here and
imported wherever it is needed.
"""

from .contracts import ContractService
from .matches import MatchService
from .resources import (
    CompetitionService,
    ManagerService,
    PlayerService,
    PlayerStatsService,
    SeasonService,
    StadiumService,
    TrophyService,
)

competition_service = CompetitionService()
contract_service = ContractService()
manager_service = ManagerService()
match_service = MatchService()
player_service = PlayerService()
player_stats_service = PlayerStatsService()
season_service = SeasonService()
stadium_service = StadiumService()
trophy_service = TrophyService()

__all__ = [
    "competition_service",
    "contract_service",
    "manager_service",
    "match_service",
    "player_service",
    "player_stats_service",
    "season_service",
    "stadium_service",
    "trophy_service",
]
