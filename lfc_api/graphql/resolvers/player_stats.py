"""Player statistics queries and mutations."""

import strawberry
from strawberry.types import Info

from ...services import player_stats_service
from ..filters import player_stats_conditions
from ..inputs import PaginationInput, PlayerStatsFilter, PlayerStatsInput, SortInput
from ..types import PlayerStats
from .common import create_row, delete_row, get_row, list_rows, update_row


@strawberry.type
class PlayerStatsQuery:
    @strawberry.field
    def player_stats(
        self,
        info: Info,
        filter: PlayerStatsFilter | None = None,
        sort: SortInput | None = None,
        pagination: PaginationInput | None = None,
    ) -> list[PlayerStats]:
        rows = list_rows(
            info, player_stats_service, player_stats_conditions, filter, sort, pagination, "player stats"
        )
        return [PlayerStats.from_row(row) for row in rows]

    @strawberry.field
    def single_player_stats(self, info: Info, id: strawberry.ID) -> PlayerStats | None:
        row = get_row(info, player_stats_service, id, "player stats")
        return PlayerStats.from_row(row) if row else None


@strawberry.type
class PlayerStatsMutation:
    @strawberry.mutation
    def create_player_stats(self, info: Info, input: PlayerStatsInput) -> PlayerStats:
        return PlayerStats.from_row(create_row(info, player_stats_service, input, "player stats"))

    @strawberry.mutation
    def update_player_stats(self, info: Info, id: strawberry.ID, input: PlayerStatsInput) -> PlayerStats:
        return PlayerStats.from_row(update_row(info, player_stats_service, id, input, "player stats"))

    @strawberry.mutation
    def delete_player_stats(self, info: Info, id: strawberry.ID) -> bool:
        return delete_row(info, player_stats_service, id, "player stats")
