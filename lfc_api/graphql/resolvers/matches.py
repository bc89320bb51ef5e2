"""Match queries and mutations.

createMatch takes fixture details only; the lineup and goals are sent with
updateMatch, which re-runs every match check before saving.
"""

import strawberry
from strawberry.types import Info

from ...services import match_service
from ..filters import match_conditions
from ..inputs import MatchFilter, MatchInput, MatchUpdateInput, PaginationInput, SortInput
from ..types import Match
from .common import create_row, delete_row, get_row, list_rows, update_row


@strawberry.type
class MatchQuery:
    @strawberry.field(description="Matches matching the filter, sorted and paginated")
    def matches(
        self,
        info: Info,
        filter: MatchFilter | None = None,
        sort: SortInput | None = None,
        pagination: PaginationInput | None = None,
    ) -> list[Match]:
        rows = list_rows(info, match_service, match_conditions, filter, sort, pagination, "matches")
        return [Match.from_row(row) for row in rows]

    @strawberry.field
    def match(self, info: Info, id: strawberry.ID) -> Match | None:
        row = get_row(info, match_service, id, "match")
        return Match.from_row(row) if row else None


@strawberry.type
class MatchMutation:
    @strawberry.mutation
    def create_match(self, info: Info, input: MatchInput) -> Match:
        return Match.from_row(create_row(info, match_service, input, "match"))

    @strawberry.mutation
    def update_match(self, info: Info, id: strawberry.ID, input: MatchUpdateInput) -> Match:
        return Match.from_row(update_row(info, match_service, id, input, "match"))

    @strawberry.mutation
    def delete_match(self, info: Info, id: strawberry.ID) -> bool:
        return delete_row(info, match_service, id, "match")
