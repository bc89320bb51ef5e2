"""Contract queries and mutations."""

import strawberry
from strawberry.types import Info

from ...services import contract_service
from ..filters import contract_conditions
from ..inputs import ContractFilter, ContractInput, PaginationInput, SortInput
from ..types import Contract
from .common import create_row, delete_row, get_row, list_rows, update_row


@strawberry.type
class ContractQuery:
    @strawberry.field
    def contracts(
        self,
        info: Info,
        filter: ContractFilter | None = None,
        sort: SortInput | None = None,
        pagination: PaginationInput | None = None,
    ) -> list[Contract]:
        rows = list_rows(info, contract_service, contract_conditions, filter, sort, pagination, "contracts")
        return [Contract.from_row(row) for row in rows]

    @strawberry.field
    def contract(self, info: Info, id: strawberry.ID) -> Contract | None:
        row = get_row(info, contract_service, id, "contract")
        return Contract.from_row(row) if row else None


@strawberry.type
class ContractMutation:
    @strawberry.mutation
    def create_contract(self, info: Info, input: ContractInput) -> Contract:
        return Contract.from_row(create_row(info, contract_service, input, "contract"))

    @strawberry.mutation
    def update_contract(self, info: Info, id: strawberry.ID, input: ContractInput) -> Contract:
        return Contract.from_row(update_row(info, contract_service, id, input, "contract"))

    @strawberry.mutation
    def delete_contract(self, info: Info, id: strawberry.ID) -> bool:
        return delete_row(info, contract_service, id, "contract")
