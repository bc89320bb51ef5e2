"""Player queries and mutations."""

import strawberry
from strawberry.types import Info

from ...services import player_service
from ..filters import player_conditions
from ..inputs import PaginationInput, PlayerFilter, PlayerInput, SortInput
from ..types import Player
from .common import create_row, delete_row, get_row, list_rows, update_row


@strawberry.type
class PlayerQuery:
    @strawberry.field(description="Players matching the filter, sorted and paginated")
    def players(
        self,
        info: Info,
        filter: PlayerFilter | None = None,
        sort: SortInput | None = None,
        pagination: PaginationInput | None = None,
    ) -> list[Player]:
        rows = list_rows(info, player_service, player_conditions, filter, sort, pagination, "players")
        return [Player.from_row(row) for row in rows]

    @strawberry.field
    def player(self, info: Info, id: strawberry.ID) -> Player | None:
        row = get_row(info, player_service, id, "player")
        return Player.from_row(row) if row else None


@strawberry.type
class PlayerMutation:
    @strawberry.mutation
    def create_player(self, info: Info, input: PlayerInput) -> Player:
        return Player.from_row(create_row(info, player_service, input, "player"))

    @strawberry.mutation
    def update_player(self, info: Info, id: strawberry.ID, input: PlayerInput) -> Player:
        return Player.from_row(update_row(info, player_service, id, input, "player"))

    @strawberry.mutation
    def delete_player(self, info: Info, id: strawberry.ID) -> bool:
        return delete_row(info, player_service, id, "player")
