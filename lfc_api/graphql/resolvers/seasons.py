"""Season queries and mutations."""

import strawberry
from strawberry.types import Info

from ...services import season_service
from ..filters import season_conditions
from ..inputs import PaginationInput, SeasonFilter, SeasonInput, SortInput
from ..types import Season
from .common import create_row, delete_row, get_row, list_rows, update_row


@strawberry.type
class SeasonQuery:
    @strawberry.field
    def seasons(
        self,
        info: Info,
        filter: SeasonFilter | None = None,
        sort: SortInput | None = None,
        pagination: PaginationInput | None = None,
    ) -> list[Season]:
        rows = list_rows(info, season_service, season_conditions, filter, sort, pagination, "seasons")
        return [Season.from_row(row) for row in rows]

    @strawberry.field
    def season(self, info: Info, id: strawberry.ID) -> Season | None:
        row = get_row(info, season_service, id, "season")
        return Season.from_row(row) if row else None


@strawberry.type
class SeasonMutation:
    @strawberry.mutation
    def create_season(self, info: Info, input: SeasonInput) -> Season:
        return Season.from_row(create_row(info, season_service, input, "season"))

    @strawberry.mutation
    def update_season(self, info: Info, id: strawberry.ID, input: SeasonInput) -> Season:
        return Season.from_row(update_row(info, season_service, id, input, "season"))

    @strawberry.mutation
    def delete_season(self, info: Info, id: strawberry.ID) -> bool:
        return delete_row(info, season_service, id, "season")
