"""Translate GraphQL filter inputs into SQLAlchemy conditions.

Each builder returns a list of expressions; the service ANDs them together.
Every operator present on a filter contributes its own condition, so
`{gt: 10, lt: 20}` means "between 10 and 20" and a filter value of 0,
an empty string or False is still applied. ne and notContains also match
documents where the field is not set.
"""

from datetime import datetime

from sqlalchemy import Date, and_, or_

from ..core.clock import to_naive_utc
from ..database.models import Competition, Contract, Manager, Match, Player, PlayerStats, Season, Stadium, Trophy
from .inputs import (
    CompetitionFilter,
    ContractFilter,
    DateFilter,
    ManagerFilter,
    MatchFilter,
    NumberFilter,
    PlayerFilter,
    PlayerStatsFilter,
    SeasonFilter,
    StadiumFilter,
    StringFilter,
    TrophyFilter,
)
from .utils import parse_id

COMPARISONS = {
    "eq": lambda column, value: column == value,
    "ne": lambda column, value: or_(column != value, column.is_(None)),
    "gt": lambda column, value: column > value,
    "lt": lambda column, value: column < value,
    "gte": lambda column, value: column >= value,
    "lte": lambda column, value: column <= value,
}


def like_pattern(text: str) -> str:
    """Substring pattern with LIKE wildcards in `text` escaped."""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


# ========== GENERIC BUILDERS ==========


def string_conditions(column, flt: StringFilter | None) -> list:
    if flt is None:
        return []
    conditions = []
    if flt.eq is not None:
        conditions.append(column == flt.eq)
    if flt.ne is not None:
        conditions.append(or_(column != flt.ne, column.is_(None)))
    if flt.contains is not None:
        conditions.append(column.ilike(like_pattern(flt.contains), escape="\\"))
    if flt.not_contains is not None:
        conditions.append(or_(~column.ilike(like_pattern(flt.not_contains), escape="\\"), column.is_(None)))
    return conditions


def number_conditions(column, flt: NumberFilter | None) -> list:
    if flt is None:
        return []
    conditions = []
    for operator, compare in COMPARISONS.items():
        value = getattr(flt, operator)
        if value is not None:
            conditions.append(compare(column, value))
    return conditions


def _date_value(column, value: datetime):
    value = to_naive_utc(value)
    if isinstance(column.type, Date) and isinstance(value, datetime):
        return value.date()
    return value


def date_conditions(column, flt: DateFilter | None) -> list:
    """Timestamps are compared in UTC; date columns compare on the calendar day."""
    if flt is None:
        return []
    conditions = []
    for operator, compare in COMPARISONS.items():
        value = getattr(flt, operator)
        if value is not None:
            conditions.append(compare(column, _date_value(column, value)))
    return conditions


def id_conditions(column, value) -> list:
    if value is None:
        return []
    return [column == parse_id(value)]


def player_name_conditions(flt: StringFilter | None) -> list:
    """Name filters match on first or last name.

    eq and contains succeed when either part matches; ne and notContains
    require that neither part matches.
    """
    if flt is None:
        return []
    columns = (Player.first_name, Player.last_name)
    conditions = []
    if flt.eq is not None:
        conditions.append(or_(*(column == flt.eq for column in columns)))
    if flt.ne is not None:
        conditions.append(and_(*(column != flt.ne for column in columns)))
    if flt.contains is not None:
        pattern = like_pattern(flt.contains)
        conditions.append(or_(*(column.ilike(pattern, escape="\\") for column in columns)))
    if flt.not_contains is not None:
        pattern = like_pattern(flt.not_contains)
        conditions.append(and_(*(~column.ilike(pattern, escape="\\") for column in columns)))
    return conditions


# ========== ENTITY BUILDERS ==========


def match_conditions(flt: MatchFilter | None) -> list:
    if flt is None:
        return []
    conditions = [
        *string_conditions(Match.opponent_name, flt.opponent_name),
        *date_conditions(Match.date, flt.date),
        *id_conditions(Match.season_id, flt.season),
        *id_conditions(Match.competition_id, flt.competition),
        *id_conditions(Match.stadium_id, flt.stadium),
    ]
    if flt.home is not None:
        conditions.append(Match.home == flt.home)
    return conditions


def player_conditions(flt: PlayerFilter | None) -> list:
    if flt is None:
        return []
    return [
        *player_name_conditions(flt.name),
        *string_conditions(Player.position, flt.position),
        *string_conditions(Player.nationality, flt.nationality),
        *string_conditions(Player.status, flt.status),
        *number_conditions(Player.jersey_number, flt.jersey_number),
    ]


def stadium_conditions(flt: StadiumFilter | None) -> list:
    if flt is None:
        return []
    return [
        *string_conditions(Stadium.name, flt.name),
        *number_conditions(Stadium.capacity, flt.capacity),
        *string_conditions(Stadium.location, flt.location),
    ]


def manager_conditions(flt: ManagerFilter | None) -> list:
    if flt is None:
        return []
    return [
        *string_conditions(Manager.name, flt.name),
        *string_conditions(Manager.nationality, flt.nationality),
        *string_conditions(Manager.status, flt.status),
    ]


def competition_conditions(flt: CompetitionFilter | None) -> list:
    if flt is None:
        return []
    return [
        *string_conditions(Competition.name, flt.name),
        *string_conditions(Competition.type, flt.type),
        *number_conditions(Competition.year_of_creation, flt.year_of_creation),
    ]


def season_conditions(flt: SeasonFilter | None) -> list:
    if flt is None:
        return []
    return [
        *string_conditions(Season.years, flt.years),
        *id_conditions(Season.manager_id, flt.manager),
        *string_conditions(Season.status, flt.status),
    ]


def trophy_conditions(flt: TrophyFilter | None) -> list:
    if flt is None:
        return []
    return [
        *id_conditions(Trophy.competition_id, flt.competition),
        *date_conditions(Trophy.won_date, flt.won_date),
    ]


def contract_conditions(flt: ContractFilter | None) -> list:
    if flt is None:
        return []
    return [
        *date_conditions(Contract.start, flt.start),
        *date_conditions(Contract.end, flt.end),
        *number_conditions(Contract.salary_base, flt.salary_base),
    ]


def player_stats_conditions(flt: PlayerStatsFilter | None) -> list:
    if flt is None:
        return []
    conditions = []
    for counter in PlayerStats.COUNTERS:
        conditions.extend(number_conditions(getattr(PlayerStats, counter), getattr(flt, counter)))
    if flt.goals is not None:
        conditions.extend(number_conditions(PlayerStats.goals_total, flt.goals.total))
        conditions.extend(number_conditions(PlayerStats.goals_penalties, flt.goals.penalties))
        conditions.extend(number_conditions(PlayerStats.goals_free_kicks, flt.goals.free_kicks))
    if flt.cards is not None:
        conditions.extend(number_conditions(PlayerStats.cards_yellow, flt.cards.yellow))
        conditions.extend(number_conditions(PlayerStats.cards_red, flt.cards.red))
    return conditions
