"""Competition queries and mutations."""

import strawberry
from strawberry.types import Info

from ...services import competition_service
from ..filters import competition_conditions
from ..inputs import CompetitionFilter, CompetitionInput, PaginationInput, SortInput
from ..types import Competition
from .common import create_row, delete_row, get_row, list_rows, update_row


@strawberry.type
class CompetitionQuery:
    @strawberry.field
    def competitions(
        self,
        info: Info,
        filter: CompetitionFilter | None = None,
        sort: SortInput | None = None,
        pagination: PaginationInput | None = None,
    ) -> list[Competition]:
        rows = list_rows(info, competition_service, competition_conditions, filter, sort, pagination, "competitions")
        return [Competition.from_row(row) for row in rows]

    @strawberry.field
    def competition(self, info: Info, id: strawberry.ID) -> Competition | None:
        row = get_row(info, competition_service, id, "competition")
        return Competition.from_row(row) if row else None


@strawberry.type
class CompetitionMutation:
    @strawberry.mutation
    def create_competition(self, info: Info, input: CompetitionInput) -> Competition:
        return Competition.from_row(create_row(info, competition_service, input, "competition"))

    @strawberry.mutation
    def update_competition(self, info: Info, id: strawberry.ID, input: CompetitionInput) -> Competition:
        return Competition.from_row(update_row(info, competition_service, id, input, "competition"))

    @strawberry.mutation
    def delete_competition(self, info: Info, id: strawberry.ID) -> bool:
        return delete_row(info, competition_service, id, "competition")
