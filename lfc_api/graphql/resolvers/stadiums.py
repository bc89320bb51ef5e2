"""Stadium queries and mutations."""

import strawberry
from strawberry.types import Info

from ...services import stadium_service
from ..filters import stadium_conditions
from ..inputs import PaginationInput, SortInput, StadiumFilter, StadiumInput
from ..types import Stadium
from .common import create_row, delete_row, get_row, list_rows, update_row


@strawberry.type
class StadiumQuery:
    @strawberry.field
    def stadiums(
        self,
        info: Info,
        filter: StadiumFilter | None = None,
        sort: SortInput | None = None,
        pagination: PaginationInput | None = None,
    ) -> list[Stadium]:
        rows = list_rows(info, stadium_service, stadium_conditions, filter, sort, pagination, "stadiums")
        return [Stadium.from_row(row) for row in rows]

    @strawberry.field
    def stadium(self, info: Info, id: strawberry.ID) -> Stadium | None:
        row = get_row(info, stadium_service, id, "stadium")
        return Stadium.from_row(row) if row else None


@strawberry.type
class StadiumMutation:
    @strawberry.mutation
    def create_stadium(self, info: Info, input: StadiumInput) -> Stadium:
        return Stadium.from_row(create_row(info, stadium_service, input, "stadium"))

    @strawberry.mutation
    def update_stadium(self, info: Info, id: strawberry.ID, input: StadiumInput) -> Stadium:
        return Stadium.from_row(update_row(info, stadium_service, id, input, "stadium"))

    @strawberry.mutation
    def delete_stadium(self, info: Info, id: strawberry.ID) -> bool:
        return delete_row(info, stadium_service, id, "stadium")
