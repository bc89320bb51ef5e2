"""Trophy queries and mutations."""

import strawberry
from strawberry.types import Info

from ...services import trophy_service
from ..filters import trophy_conditions
from ..inputs import PaginationInput, SortInput, TrophyFilter, TrophyInput
from ..types import Trophy
from .common import create_row, delete_row, get_row, list_rows, update_row


@strawberry.type
class TrophyQuery:
    @strawberry.field
    def trophies(
        self,
        info: Info,
        filter: TrophyFilter | None = None,
        sort: SortInput | None = None,
        pagination: PaginationInput | None = None,
    ) -> list[Trophy]:
        rows = list_rows(info, trophy_service, trophy_conditions, filter, sort, pagination, "trophies")
        return [Trophy.from_row(row) for row in rows]

    @strawberry.field
    def trophy(self, info: Info, id: strawberry.ID) -> Trophy | None:
        row = get_row(info, trophy_service, id, "trophy")
        return Trophy.from_row(row) if row else None


@strawberry.type
class TrophyMutation:
    @strawberry.mutation
    def create_trophy(self, info: Info, input: TrophyInput) -> Trophy:
        return Trophy.from_row(create_row(info, trophy_service, input, "trophy"))

    @strawberry.mutation
    def update_trophy(self, info: Info, id: strawberry.ID, input: TrophyInput) -> Trophy:
        return Trophy.from_row(update_row(info, trophy_service, id, input, "trophy"))

    @strawberry.mutation
    def delete_trophy(self, info: Info, id: strawberry.ID) -> bool:
        return delete_row(info, trophy_service, id, "trophy")
