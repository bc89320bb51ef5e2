"""
Pydantic schemas for API request/response models.

This module defines all the data structures used for API communication using
Pydantic. Pydantic provides:

- Automatic data validation and type conversion
- JSON serialization/deserialization
- OpenAPI/Swagger documentation generation

Schema Organization (one group per resource):
- XCreate: the full document accepted by POST and PUT. These carry the
  declarative field rules (lengths, ranges, "not in the future", ages).
  The service layer also runs merged PATCH documents through them.
- XUpdate: every field optional, for PATCH. Nested objects are plain dicts
  because they are deep-merged into the stored document before validation.
- XResponse: what the API returns. No time-relative rules here, a match
  stored last season must still be readable next season.

Unknown fields are rejected everywhere (extra="forbid"), and strings are
trimmed before the length checks run.
"""

import datetime as dt
from datetime import date, datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..core.clock import age_in_years, to_naive_utc, utcnow
from ..core.enums import (
    BonusType,
    CompetitionType,
    Currency,
    ManagerStatus,
    PlayerStatus,
    Position,
    SeasonStatus,
)


class Document(BaseModel):
    """Base for every request document."""

    model_config = ConfigDict(
        extra="forbid",  # Reject fields that are not part of the document
        str_strip_whitespace=True,  # "  Anfield " -> "Anfield"
        use_enum_values=True,  # Store "GK" rather than Position.GK
    )


class PatchDocument(BaseModel):
    """Base for PATCH bodies: same rules, every field optional."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True, use_enum_values=True)


class ResourceResponse(BaseModel):
    """Fields shared by every stored document in API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int  # Database primary key
    created_at: datetime | None = None  # When record was first created
    updated_at: datetime | None = None  # When record was last modified
    links: dict[str, str | None] = Field(default_factory=dict, serialization_alias="_links")


def _not_in_future(value: date, label: str) -> date:
    if value > date.today():
        raise ValueError(f"{label} ({value.isoformat()}) cannot be in the future")
    return value


def _check_age(born: date, minimum: int, maximum: int, label: str) -> date:
    age = age_in_years(born)
    if not minimum <= age <= maximum:
        raise ValueError(f"{label} must be between {minimum} and {maximum} years old")
    return born


# ========== NESTED OBJECTS ==========


class PlayerName(Document):
    first: str = Field(min_length=2, max_length=50)
    last: str = Field(min_length=2, max_length=50)
    display_name: str | None = Field(None, max_length=100)  # "Mo Salah"


class MarketValue(Document):
    value: float = Field(ge=0)
    currency: Currency = Currency.EUR
    date: dt.date = Field(default_factory=dt.date.today)  # When the valuation was made


class Prizes(Document):
    """Prize money paid out for a trophy."""

    winner: float = Field(ge=0)
    runner_up: float | None = Field(None, ge=0)
    third_place: float | None = Field(None, ge=0)


class Salary(Document):
    base: float = Field(ge=0)
    currency: Currency = Currency.GBP


class Bonus(Document):
    type: BonusType
    amount: float = Field(ge=0)


class GoalCounts(Document):
    total: int = Field(0, ge=0)
    penalties: int = Field(0, ge=0)
    free_kicks: int = Field(0, ge=0)


class CardCounts(Document):
    yellow: int = Field(0, ge=0)
    red: int = Field(0, ge=0)


class Opponent(Document):
    name: str = Field(min_length=2, max_length=100)
    manager: str | None = Field(None, max_length=100)


class Score(Document):
    """Final score, seen from the home side of the fixture."""

    home: int = Field(0, ge=0)
    away: int = Field(0, ge=0)


class Referee(Document):
    main: str | None = Field(None, max_length=100)
    assistants: list[str] = Field(default_factory=list)
    fourth: str | None = Field(None, max_length=100)


class Substitution(Document):
    player_in_id: int
    player_out_id: int
    minute: int = Field(ge=1, le=120)


class Lineup(Document):
    starting: list[int] = Field(default_factory=list)  # Player ids, empty until announced
    substitutes: list[int] = Field(default_factory=list)
    substitutions: list[Substitution] = Field(default_factory=list)


class Goal(Document):
    scorer_id: int
    assistant_id: int | None = None
    minute: int = Field(ge=1, le=120)
    is_penalty: bool = False
    description: str | None = Field(None, max_length=200)


# ========== COMPETITION ==========


class CompetitionCreate(Document):
    name: str = Field(min_length=2, max_length=100)
    type: CompetitionType = CompetitionType.LEAGUE
    year_of_creation: int = Field(ge=1800)

    @field_validator("year_of_creation")
    @classmethod
    def not_after_this_year(cls, value: int) -> int:
        if value > date.today().year:
            raise ValueError("Year of creation cannot be in the future")
        return value


class CompetitionUpdate(PatchDocument):
    name: str | None = None
    type: CompetitionType | None = None
    year_of_creation: int | None = None


class CompetitionResponse(ResourceResponse):
    name: str
    type: CompetitionType
    year_of_creation: int


# ========== STADIUM ==========


class StadiumCreate(Document):
    name: str = Field(min_length=2, max_length=100)
    capacity: int = Field(ge=100)
    location: str = Field(min_length=2, max_length=100)


class StadiumUpdate(PatchDocument):
    name: str | None = None
    capacity: int | None = None
    location: str | None = None


class StadiumResponse(ResourceResponse):
    name: str
    capacity: int
    location: str


# ========== MANAGER ==========


class ManagerCreate(Document):
    name: str = Field(min_length=2, max_length=100)
    nationality: str = Field(min_length=2, max_length=100)
    date_of_birth: date
    status: ManagerStatus = ManagerStatus.ACTIVE

    @field_validator("date_of_birth")
    @classmethod
    def plausible_age(cls, value: date) -> date:
        return _check_age(value, 18, 100, "Manager")


class ManagerUpdate(PatchDocument):
    name: str | None = None
    nationality: str | None = None
    date_of_birth: date | None = None
    status: ManagerStatus | None = None


class ManagerResponse(ResourceResponse):
    name: str
    nationality: str
    date_of_birth: date
    status: ManagerStatus


# ========== SEASON ==========


class SeasonCreate(Document):
    years: str = Field(pattern=r"^\d{4}-\d{4}$")  # "2023-2024"
    manager_id: int
    trophy_ids: list[int] = Field(default_factory=list)
    status: SeasonStatus = SeasonStatus.UPCOMING

    @field_validator("years")
    @classmethod
    def consecutive_years(cls, value: str) -> str:
        start, end = (int(part) for part in value.split("-"))
        if end != start + 1:
            raise ValueError("Season years must be consecutive, e.g. 2023-2024")
        return value


class SeasonUpdate(PatchDocument):
    years: str | None = None
    manager_id: int | None = None
    trophy_ids: list[int] | None = None
    status: SeasonStatus | None = None


class SeasonResponse(ResourceResponse):
    years: str
    manager_id: int
    trophy_ids: list[int]
    status: SeasonStatus


# ========== TROPHY ==========


class TrophyCreate(Document):
    competition_id: int
    won_date: date
    prizes: Prizes

    @field_validator("won_date")
    @classmethod
    def won_in_the_past(cls, value: date) -> date:
        return _not_in_future(value, "Won date")


class TrophyUpdate(PatchDocument):
    competition_id: int | None = None
    won_date: date | None = None
    prizes: dict[str, Any] | None = None


class TrophyResponse(ResourceResponse):
    competition_id: int
    won_date: date
    prizes: Prizes


# ========== CONTRACT ==========


class ContractCreate(Document):
    start: date
    end: date
    salary: Salary
    bonuses: list[Bonus] = Field(default_factory=list)
    season_ids: list[int] = Field(default_factory=list)

    @field_validator("start")
    @classmethod
    def started_in_the_past(cls, value: date) -> date:
        return _not_in_future(value, "Contract start")

    @model_validator(mode="after")
    def ends_after_start(self):
        if self.end <= self.start:
            raise ValueError("Contract end must be after its start")
        return self


class ContractUpdate(PatchDocument):
    start: date | None = None
    end: date | None = None
    salary: dict[str, Any] | None = None
    bonuses: list[dict[str, Any]] | None = None
    season_ids: list[int] | None = None


class ContractResponse(ResourceResponse):
    start: date
    end: date
    salary: Salary
    bonuses: list[Bonus]
    season_ids: list[int]


# ========== PLAYER STATS ==========


class PlayerStatsCreate(Document):
    appearances: int = Field(0, ge=0)
    minutes_played: int = Field(0, ge=0)
    goals: GoalCounts = Field(default_factory=GoalCounts)
    assists: int = Field(0, ge=0)
    tackles: int = Field(0, ge=0)
    interceptions: int = Field(0, ge=0)
    clearances: int = Field(0, ge=0)
    clean_sheets: int = Field(0, ge=0)
    saves: int = Field(0, ge=0)
    cards: CardCounts = Field(default_factory=CardCounts)


class PlayerStatsUpdate(PatchDocument):
    appearances: int | None = None
    minutes_played: int | None = None
    goals: dict[str, Any] | None = None
    assists: int | None = None
    tackles: int | None = None
    interceptions: int | None = None
    clearances: int | None = None
    clean_sheets: int | None = None
    saves: int | None = None
    cards: dict[str, Any] | None = None


class PlayerStatsResponse(ResourceResponse):
    appearances: int
    minutes_played: int
    goals: GoalCounts
    assists: int
    tackles: int
    interceptions: int
    clearances: int
    clean_sheets: int
    saves: int
    cards: CardCounts


# ========== PLAYER ==========


class PlayerCreate(Document):
    name: PlayerName
    position: Position
    nationality: str = Field(min_length=2, max_length=100)
    date_of_birth: date
    height: int = Field(ge=150, le=220)  # centimetres
    weight: int = Field(ge=50, le=120)  # kilograms
    status: PlayerStatus = PlayerStatus.ACTIVE
    jersey_number: int | None = Field(None, ge=1, le=99)
    current_contract_id: int | None = None
    stats_id: int | None = None
    contract_history_ids: list[int] = Field(default_factory=list)
    market_value: MarketValue | None = None

    @field_validator("date_of_birth")
    @classmethod
    def playing_age(cls, value: date) -> date:
        return _check_age(value, 15, 45, "Player")


class PlayerUpdate(PatchDocument):
    name: dict[str, Any] | None = None
    position: Position | None = None
    nationality: str | None = None
    date_of_birth: date | None = None
    height: int | None = None
    weight: int | None = None
    status: PlayerStatus | None = None
    jersey_number: int | None = None
    current_contract_id: int | None = None
    stats_id: int | None = None
    contract_history_ids: list[int] | None = None
    market_value: dict[str, Any] | None = None


class PlayerResponse(ResourceResponse):
    name: PlayerName
    position: Position
    nationality: str
    date_of_birth: date
    height: int
    weight: int
    status: PlayerStatus
    jersey_number: int | None = None
    current_contract_id: int | None = None
    stats_id: int | None = None
    contract_history_ids: list[int]
    market_value: MarketValue | None = None


# ========== MATCH ==========


class MatchCreate(Document):
    """Fixture details. Lineup and goals are managed through sub-resources."""

    date: datetime  # Kick-off
    opponent: Opponent
    home: bool = True  # Did the club play at home?
    score: Score = Field(default_factory=Score)
    stadium_id: int | None = None
    season_id: int
    competition_id: int
    referee: Referee | None = None

    @field_validator("date")
    @classmethod
    def played_in_the_past(cls, value: datetime) -> datetime:
        value = to_naive_utc(value)
        if value > utcnow():
            raise ValueError(f"Match date ({value.isoformat()}) cannot be in the future")
        return value


class MatchDocument(MatchCreate):
    """A complete stored match, including lineup and goals."""

    lineup: Lineup = Field(default_factory=Lineup)
    goals: list[Goal] = Field(default_factory=list)


class MatchUpdate(PatchDocument):
    date: datetime | None = None
    opponent: dict[str, Any] | None = None
    home: bool | None = None
    score: dict[str, Any] | None = None
    stadium_id: int | None = None
    season_id: int | None = None
    competition_id: int | None = None
    referee: dict[str, Any] | None = None


class MatchResponse(ResourceResponse):
    date: datetime
    opponent: Opponent
    home: bool
    score: Score
    stadium_id: int | None = None
    season_id: int
    competition_id: int
    referee: Referee | None = None
    lineup: Lineup
    goals: list[Goal]


# ========== ENVELOPES ==========

T = TypeVar("T")


class DataEnvelope(BaseModel, Generic[T]):
    """Every successful response body: {"data": ..., "_links": {...}}."""

    data: T
    links: dict[str, str | None] = Field(default_factory=dict, serialization_alias="_links")

