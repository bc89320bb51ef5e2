"""Enumerated values shared by the Pydantic schemas and the GraphQL types."""

from enum import Enum


class Position(str, Enum):
    GK = "GK"
    DEF = "DEF"
    MID = "MID"
    FWD = "FWD"


class PlayerStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INJURED = "INJURED"
    SUSPENDED = "SUSPENDED"
    ON_LOAN = "ON_LOAN"
    INACTIVE = "INACTIVE"


class ManagerStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"


class SeasonStatus(str, Enum):
    UPCOMING = "UPCOMING"
    IN_PROGRESS = "IN_PROGRESS"
    FINISHED = "FINISHED"


class CompetitionType(str, Enum):
    LEAGUE = "LEAGUE"
    CUP = "CUP"
    FRIENDLY = "FRIENDLY"


class Currency(str, Enum):
    EUR = "EUR"
    GBP = "GBP"
    USD = "USD"


class BonusType(str, Enum):
    GOAL = "GOAL"
    ASSIST = "ASSIST"
    CLEAN_SHEET = "CLEAN_SHEET"
    APPEARANCE = "APPEARANCE"
    TROPHY = "TROPHY"
