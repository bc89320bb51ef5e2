"""Manager queries and mutations."""

import strawberry
from strawberry.types import Info

from ...services import manager_service
from ..filters import manager_conditions
from ..inputs import ManagerFilter, ManagerInput, PaginationInput, SortInput
from ..types import Manager
from .common import create_row, delete_row, get_row, list_rows, update_row


@strawberry.type
class ManagerQuery:
    @strawberry.field
    def managers(
        self,
        info: Info,
        filter: ManagerFilter | None = None,
        sort: SortInput | None = None,
        pagination: PaginationInput | None = None,
    ) -> list[Manager]:
        rows = list_rows(info, manager_service, manager_conditions, filter, sort, pagination, "managers")
        return [Manager.from_row(row) for row in rows]

    @strawberry.field
    def manager(self, info: Info, id: strawberry.ID) -> Manager | None:
        row = get_row(info, manager_service, id, "manager")
        return Manager.from_row(row) if row else None


@strawberry.type
class ManagerMutation:
    @strawberry.mutation
    def create_manager(self, info: Info, input: ManagerInput) -> Manager:
        return Manager.from_row(create_row(info, manager_service, input, "manager"))

    @strawberry.mutation
    def update_manager(self, info: Info, id: strawberry.ID, input: ManagerInput) -> Manager:
        return Manager.from_row(update_row(info, manager_service, id, input, "manager"))

    @strawberry.mutation
    def delete_manager(self, info: Info, id: strawberry.ID) -> bool:
        return delete_row(info, manager_service, id, "manager")
