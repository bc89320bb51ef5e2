"""GraphQL output types.

Each type is built from an ORM row with `from_row`. Scalar fields are copied
across; references to other documents are exposed both as ids and as
resolved objects, loaded from the request's session when asked for.
"""

import datetime as dt
from datetime import date, datetime

import strawberry
from strawberry.types import Info

from ..core.clock import utcnow
from ..database import models
from .inputs import BonusType, CompetitionType, Currency, ManagerStatus, PlayerStatus, Position, SeasonStatus
from .utils import get_session


def _load(info: Info, model, document_id):
    if document_id is None:
        return None
    return get_session(info).get(model, int(document_id))


def _load_many(info: Info, model, document_ids) -> list:
    ids = [int(value) for value in document_ids]
    if not ids:
        return []
    rows = {row.id: row for row in get_session(info).query(model).filter(model.id.in_(ids))}
    return [rows[value] for value in ids if value in rows]


def _id(value) -> strawberry.ID | None:
    return None if value is None else strawberry.ID(str(value))


# ========== CLUB STRUCTURE ==========


@strawberry.type
class Competition:
    id: strawberry.ID
    name: str
    type: CompetitionType
    year_of_creation: int

    @classmethod
    def from_row(cls, row: models.Competition) -> "Competition":
        return cls(
            id=_id(row.id),
            name=row.name,
            type=CompetitionType(row.type),
            year_of_creation=row.year_of_creation,
        )


@strawberry.type
class Stadium:
    id: strawberry.ID
    name: str
    capacity: int
    location: str

    @classmethod
    def from_row(cls, row: models.Stadium) -> "Stadium":
        return cls(id=_id(row.id), name=row.name, capacity=row.capacity, location=row.location)


@strawberry.type
class Manager:
    id: strawberry.ID
    name: str
    nationality: str
    date_of_birth: date
    status: ManagerStatus

    @classmethod
    def from_row(cls, row: models.Manager) -> "Manager":
        return cls(
            id=_id(row.id),
            name=row.name,
            nationality=row.nationality,
            date_of_birth=row.date_of_birth,
            status=ManagerStatus(row.status),
        )


@strawberry.type
class Prizes:
    winner: float
    runner_up: float | None = None
    third_place: float | None = None


@strawberry.type
class Trophy:
    id: strawberry.ID
    competition_id: strawberry.ID
    won_date: date
    prizes: Prizes

    @strawberry.field
    def competition(self, info: Info) -> Competition | None:
        row = _load(info, models.Competition, self.competition_id)
        return Competition.from_row(row) if row else None

    @classmethod
    def from_row(cls, row: models.Trophy) -> "Trophy":
        prizes = row.prizes or {}
        return cls(
            id=_id(row.id),
            competition_id=_id(row.competition_id),
            won_date=row.won_date,
            prizes=Prizes(
                winner=prizes.get("winner", 0),
                runner_up=prizes.get("runner_up"),
                third_place=prizes.get("third_place"),
            ),
        )


@strawberry.type
class Season:
    id: strawberry.ID
    years: str
    status: SeasonStatus
    manager_id: strawberry.ID
    trophy_ids: list[strawberry.ID]

    @strawberry.field
    def manager(self, info: Info) -> Manager | None:
        row = _load(info, models.Manager, self.manager_id)
        return Manager.from_row(row) if row else None

    @strawberry.field
    def trophies(self, info: Info) -> list[Trophy]:
        return [Trophy.from_row(row) for row in _load_many(info, models.Trophy, self.trophy_ids)]

    @classmethod
    def from_row(cls, row: models.Season) -> "Season":
        doc = row.to_document()
        return cls(
            id=_id(row.id),
            years=row.years,
            status=SeasonStatus(row.status),
            manager_id=_id(row.manager_id),
            trophy_ids=[_id(value) for value in doc["trophy_ids"]],
        )


# ========== PEOPLE AND MONEY ==========


@strawberry.type
class Salary:
    base: float
    currency: Currency


@strawberry.type
class Bonus:
    type: BonusType
    amount: float


@strawberry.type
class Contract:
    id: strawberry.ID
    start: date
    end: date
    salary: Salary
    bonuses: list[Bonus]
    season_ids: list[strawberry.ID]

    @strawberry.field
    def seasons(self, info: Info) -> list[Season]:
        return [Season.from_row(row) for row in _load_many(info, models.Season, self.season_ids)]

    @classmethod
    def from_row(cls, row: models.Contract) -> "Contract":
        doc = row.to_document()
        return cls(
            id=_id(row.id),
            start=row.start,
            end=row.end,
            salary=Salary(base=row.salary_base, currency=Currency(row.salary_currency)),
            bonuses=[Bonus(type=BonusType(bonus["type"]), amount=bonus["amount"]) for bonus in doc["bonuses"]],
            season_ids=[_id(value) for value in doc["season_ids"]],
        )


@strawberry.type
class GoalCounts:
    total: int
    penalties: int
    free_kicks: int


@strawberry.type
class CardCounts:
    yellow: int
    red: int


@strawberry.type
class PlayerStats:
    id: strawberry.ID
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

    @classmethod
    def from_row(cls, row: models.PlayerStats) -> "PlayerStats":
        doc = row.to_document()
        counters = {counter: doc[counter] for counter in models.PlayerStats.COUNTERS}
        return cls(
            id=_id(row.id),
            goals=GoalCounts(**doc["goals"]),
            cards=CardCounts(**doc["cards"]),
            **counters,
        )


@strawberry.type
class PlayerName:
    first: str
    last: str
    display_name: str | None = None


@strawberry.type
class MarketValue:
    value: float
    currency: Currency
    date: dt.date


@strawberry.type
class Player:
    id: strawberry.ID
    name: PlayerName
    position: Position
    nationality: str
    date_of_birth: date
    height: int
    weight: int
    status: PlayerStatus
    jersey_number: int | None
    current_contract_id: strawberry.ID | None
    stats_id: strawberry.ID | None
    contract_history_ids: list[strawberry.ID]
    market_value: MarketValue | None

    @strawberry.field
    def current_contract(self, info: Info) -> Contract | None:
        row = _load(info, models.Contract, self.current_contract_id)
        return Contract.from_row(row) if row else None

    @strawberry.field
    def stats(self, info: Info) -> PlayerStats | None:
        row = _load(info, models.PlayerStats, self.stats_id)
        return PlayerStats.from_row(row) if row else None

    @strawberry.field
    def contract_history(self, info: Info) -> list[Contract]:
        rows = _load_many(info, models.Contract, self.contract_history_ids)
        return [Contract.from_row(row) for row in rows]

    @classmethod
    def from_row(cls, row: models.Player) -> "Player":
        doc = row.to_document()
        market_value = None
        if doc["market_value"]:
            market_value = MarketValue(
                value=row.market_value_amount,
                currency=Currency(row.market_value_currency),
                date=row.market_value_date,
            )
        return cls(
            id=_id(row.id),
            name=PlayerName(**doc["name"]),
            position=Position(row.position),
            nationality=row.nationality,
            date_of_birth=row.date_of_birth,
            height=row.height,
            weight=row.weight,
            status=PlayerStatus(row.status),
            jersey_number=row.jersey_number,
            current_contract_id=_id(row.current_contract_id),
            stats_id=_id(row.stats_id),
            contract_history_ids=[_id(value) for value in doc["contract_history_ids"]],
            market_value=market_value,
        )


def _players(info: Info, player_ids) -> list[Player]:
    return [Player.from_row(row) for row in _load_many(info, models.Player, player_ids)]


# ========== FIXTURES ==========


@strawberry.type
class Opponent:
    name: str
    manager: str | None = None


@strawberry.type
class Score:
    home: int
    away: int


@strawberry.type
class Referee:
    main: str | None = None
    assistants: list[str] = strawberry.field(default_factory=list)
    fourth: str | None = None


@strawberry.type
class Substitution:
    player_in_id: strawberry.ID
    player_out_id: strawberry.ID
    minute: int

    @strawberry.field
    def player_in(self, info: Info) -> Player | None:
        row = _load(info, models.Player, self.player_in_id)
        return Player.from_row(row) if row else None

    @strawberry.field
    def player_out(self, info: Info) -> Player | None:
        row = _load(info, models.Player, self.player_out_id)
        return Player.from_row(row) if row else None


@strawberry.type
class Lineup:
    starting_ids: list[strawberry.ID]
    substitute_ids: list[strawberry.ID]
    substitutions: list[Substitution]

    @strawberry.field
    def starting(self, info: Info) -> list[Player]:
        return _players(info, self.starting_ids)

    @strawberry.field
    def substitutes(self, info: Info) -> list[Player]:
        return _players(info, self.substitute_ids)


@strawberry.type
class Goal:
    scorer_id: strawberry.ID
    assistant_id: strawberry.ID | None
    minute: int
    is_penalty: bool
    description: str | None

    @strawberry.field
    def scorer(self, info: Info) -> Player | None:
        row = _load(info, models.Player, self.scorer_id)
        return Player.from_row(row) if row else None

    @strawberry.field
    def assistant(self, info: Info) -> Player | None:
        row = _load(info, models.Player, self.assistant_id)
        return Player.from_row(row) if row else None


@strawberry.type
class Match:
    id: strawberry.ID
    date: datetime
    opponent: Opponent
    home: bool
    season_id: strawberry.ID
    competition_id: strawberry.ID
    stadium_id: strawberry.ID | None
    referee: Referee | None
    lineup: Lineup
    goals: list[Goal]
    score_value: strawberry.Private[Score]

    @strawberry.field(description="Null until the match has been played")
    def score(self) -> Score | None:
        if self.date > utcnow():
            return None
        return self.score_value

    @strawberry.field
    def season(self, info: Info) -> Season | None:
        row = _load(info, models.Season, self.season_id)
        return Season.from_row(row) if row else None

    @strawberry.field
    def competition(self, info: Info) -> Competition | None:
        row = _load(info, models.Competition, self.competition_id)
        return Competition.from_row(row) if row else None

    @strawberry.field
    def stadium(self, info: Info) -> Stadium | None:
        row = _load(info, models.Stadium, self.stadium_id)
        return Stadium.from_row(row) if row else None

    @classmethod
    def from_row(cls, row: models.Match) -> "Match":
        doc = row.to_document()
        lineup = doc["lineup"]
        referee = doc["referee"]
        return cls(
            id=_id(row.id),
            date=row.date,
            opponent=Opponent(**doc["opponent"]),
            home=row.home,
            season_id=_id(row.season_id),
            competition_id=_id(row.competition_id),
            stadium_id=_id(row.stadium_id),
            referee=Referee(**referee) if referee else None,
            lineup=Lineup(
                starting_ids=[_id(value) for value in lineup["starting"]],
                substitute_ids=[_id(value) for value in lineup["substitutes"]],
                substitutions=[
                    Substitution(
                        player_in_id=_id(sub["player_in_id"]),
                        player_out_id=_id(sub["player_out_id"]),
                        minute=sub["minute"],
                    )
                    for sub in lineup["substitutions"]
                ],
            ),
            goals=[
                Goal(
                    scorer_id=_id(goal["scorer_id"]),
                    assistant_id=_id(goal.get("assistant_id")),
                    minute=goal["minute"],
                    is_penalty=goal.get("is_penalty", False),
                    description=goal.get("description"),
                )
                for goal in doc["goals"]
            ],
            score_value=Score(**doc["score"]),
        )
