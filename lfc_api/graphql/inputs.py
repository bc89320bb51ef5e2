"""GraphQL input types: comparison filters, sorting, pagination and write inputs.

Write inputs default every field to UNSET, so the same input serves both
create (missing required fields are reported by validation) and update
(only the fields that were sent are merged into the stored document).
"""

import datetime as dt
from datetime import date, datetime
from enum import Enum

import strawberry

from ..core import enums

UNSET = strawberry.UNSET

# The same enums validate REST bodies; registering them here exposes them to GraphQL
BonusType = strawberry.enum(enums.BonusType)
CompetitionType = strawberry.enum(enums.CompetitionType)
Currency = strawberry.enum(enums.Currency)
ManagerStatus = strawberry.enum(enums.ManagerStatus)
PlayerStatus = strawberry.enum(enums.PlayerStatus)
Position = strawberry.enum(enums.Position)
SeasonStatus = strawberry.enum(enums.SeasonStatus)


# ========== COMPARISON FILTERS ==========


@strawberry.input(description="String comparisons; contains is a case-insensitive substring match")
class StringFilter:
    eq: str | None = None
    ne: str | None = None
    contains: str | None = None
    not_contains: str | None = None


@strawberry.input
class NumberFilter:
    eq: float | None = None
    ne: float | None = None
    gt: float | None = None
    lt: float | None = None
    gte: float | None = None
    lte: float | None = None


@strawberry.input
class DateFilter:
    eq: datetime | None = None
    ne: datetime | None = None
    gt: datetime | None = None
    lt: datetime | None = None
    gte: datetime | None = None
    lte: datetime | None = None


@strawberry.enum
class SortDirection(Enum):
    ASC = "ASC"
    DESC = "DESC"


@strawberry.input
class SortInput:
    field: str
    direction: SortDirection = SortDirection.ASC


@strawberry.input
class PaginationInput:
    page: int = 1
    page_size: int | None = None


# ========== ENTITY FILTERS ==========


@strawberry.input
class MatchFilter:
    opponent_name: StringFilter | None = None
    date: DateFilter | None = None
    season: strawberry.ID | None = None
    competition: strawberry.ID | None = None
    stadium: strawberry.ID | None = None
    home: bool | None = None


@strawberry.input
class PlayerFilter:
    name: StringFilter | None = None  # First or last name
    position: StringFilter | None = None
    nationality: StringFilter | None = None
    status: StringFilter | None = None
    jersey_number: NumberFilter | None = None


@strawberry.input
class StadiumFilter:
    name: StringFilter | None = None
    capacity: NumberFilter | None = None
    location: StringFilter | None = None


@strawberry.input
class ManagerFilter:
    name: StringFilter | None = None
    nationality: StringFilter | None = None
    status: StringFilter | None = None


@strawberry.input
class CompetitionFilter:
    name: StringFilter | None = None
    type: StringFilter | None = None
    year_of_creation: NumberFilter | None = None


@strawberry.input
class SeasonFilter:
    years: StringFilter | None = None
    manager: strawberry.ID | None = None
    status: StringFilter | None = None


@strawberry.input
class TrophyFilter:
    competition: strawberry.ID | None = None
    won_date: DateFilter | None = None


@strawberry.input
class ContractFilter:
    start: DateFilter | None = None
    end: DateFilter | None = None
    salary_base: NumberFilter | None = None


@strawberry.input
class GoalCountsFilter:
    total: NumberFilter | None = None
    penalties: NumberFilter | None = None
    free_kicks: NumberFilter | None = None


@strawberry.input
class CardCountsFilter:
    yellow: NumberFilter | None = None
    red: NumberFilter | None = None


@strawberry.input
class PlayerStatsFilter:
    appearances: NumberFilter | None = None
    minutes_played: NumberFilter | None = None
    goals: GoalCountsFilter | None = None
    assists: NumberFilter | None = None
    tackles: NumberFilter | None = None
    interceptions: NumberFilter | None = None
    clearances: NumberFilter | None = None
    clean_sheets: NumberFilter | None = None
    saves: NumberFilter | None = None
    cards: CardCountsFilter | None = None


# ========== WRITE INPUTS ==========


@strawberry.input
class CompetitionInput:
    name: str | None = UNSET
    type: CompetitionType | None = UNSET
    year_of_creation: int | None = UNSET


@strawberry.input
class StadiumInput:
    name: str | None = UNSET
    capacity: int | None = UNSET
    location: str | None = UNSET


@strawberry.input
class ManagerInput:
    name: str | None = UNSET
    nationality: str | None = UNSET
    date_of_birth: date | None = UNSET
    status: ManagerStatus | None = UNSET


@strawberry.input
class SeasonInput:
    years: str | None = UNSET
    manager_id: strawberry.ID | None = UNSET
    trophy_ids: list[strawberry.ID] | None = UNSET
    status: SeasonStatus | None = UNSET


@strawberry.input
class PrizesInput:
    winner: float | None = UNSET
    runner_up: float | None = UNSET
    third_place: float | None = UNSET


@strawberry.input
class TrophyInput:
    competition_id: strawberry.ID | None = UNSET
    won_date: date | None = UNSET
    prizes: PrizesInput | None = UNSET


@strawberry.input
class SalaryInput:
    base: float | None = UNSET
    currency: Currency | None = UNSET


@strawberry.input
class BonusInput:
    type: BonusType
    amount: float


@strawberry.input
class ContractInput:
    start: date | None = UNSET
    end: date | None = UNSET
    salary: SalaryInput | None = UNSET
    bonuses: list[BonusInput] | None = UNSET
    season_ids: list[strawberry.ID] | None = UNSET


@strawberry.input
class GoalCountsInput:
    total: int | None = UNSET
    penalties: int | None = UNSET
    free_kicks: int | None = UNSET


@strawberry.input
class CardCountsInput:
    yellow: int | None = UNSET
    red: int | None = UNSET


@strawberry.input
class PlayerStatsInput:
    appearances: int | None = UNSET
    minutes_played: int | None = UNSET
    goals: GoalCountsInput | None = UNSET
    assists: int | None = UNSET
    tackles: int | None = UNSET
    interceptions: int | None = UNSET
    clearances: int | None = UNSET
    clean_sheets: int | None = UNSET
    saves: int | None = UNSET
    cards: CardCountsInput | None = UNSET


@strawberry.input
class PlayerNameInput:
    first: str | None = UNSET
    last: str | None = UNSET
    display_name: str | None = UNSET


@strawberry.input
class MarketValueInput:
    value: float | None = UNSET
    currency: Currency | None = UNSET
    date: dt.date | None = UNSET


@strawberry.input
class PlayerInput:
    name: PlayerNameInput | None = UNSET
    position: Position | None = UNSET
    nationality: str | None = UNSET
    date_of_birth: date | None = UNSET
    height: int | None = UNSET
    weight: int | None = UNSET
    status: PlayerStatus | None = UNSET
    jersey_number: int | None = UNSET
    current_contract_id: strawberry.ID | None = UNSET
    stats_id: strawberry.ID | None = UNSET
    contract_history_ids: list[strawberry.ID] | None = UNSET
    market_value: MarketValueInput | None = UNSET


@strawberry.input
class OpponentInput:
    name: str | None = UNSET
    manager: str | None = UNSET


@strawberry.input
class ScoreInput:
    home: int | None = UNSET
    away: int | None = UNSET


@strawberry.input
class RefereeInput:
    main: str | None = UNSET
    assistants: list[str] | None = UNSET
    fourth: str | None = UNSET


@strawberry.input
class SubstitutionInput:
    player_in_id: strawberry.ID
    player_out_id: strawberry.ID
    minute: int


@strawberry.input
class LineupInput:
    starting: list[strawberry.ID] | None = UNSET
    substitutes: list[strawberry.ID] | None = UNSET
    substitutions: list[SubstitutionInput] | None = UNSET


@strawberry.input
class GoalInput:
    scorer_id: strawberry.ID
    minute: int
    assistant_id: strawberry.ID | None = None
    is_penalty: bool = False
    description: str | None = None


@strawberry.input(description="Fixture details; lineup and goals are set with updateMatch")
class MatchInput:
    date: datetime | None = UNSET
    opponent: OpponentInput | None = UNSET
    home: bool | None = UNSET
    score: ScoreInput | None = UNSET
    stadium_id: strawberry.ID | None = UNSET
    season_id: strawberry.ID | None = UNSET
    competition_id: strawberry.ID | None = UNSET
    referee: RefereeInput | None = UNSET


@strawberry.input
class MatchUpdateInput(MatchInput):
    lineup: LineupInput | None = UNSET
    goals: list[GoalInput] | None = UNSET
