"""SQLAlchemy database models for the Liverpool FC data API.

This file defines the complete database schema using SQLAlchemy ORM (Object-Relational Mapping).

For beginners:

SQLAlchemy ORM: A Python toolkit that lets you work with databases using Python classes
instead of raw SQL. Each class represents a database table, and instances represent rows.

Documents and rows: The API speaks in nested JSON documents (a player has a
`name` object with `first` and `last`, a match has a `lineup` object with
`starting` and `substitutes` lists). Each model therefore has two helpers:

- to_document(): row -> nested dict in the same shape the API accepts
- apply_document(doc): nested dict -> column values on this row

Model Categories:
1. Club structure: Competition, Stadium, Manager, Season, Trophy
2. People and money: Player, PlayerStats, Contract
3. Fixtures: Match, with lineup, goals and referees stored as JSON

Design Patterns:
- Consistent integer primary key and timestamp columns
- JSON columns for embedded lists addressed by index (goals, substitutions, bonuses)
- Association tables for id lists (season trophies, contract seasons, contract history)
- Foreign keys without ORM back-references, so deleting a referenced row
  fails at the database instead of silently nulling the reference
"""

from sqlalchemy import JSON  # Embedded lists and objects (lineup, goals, bonuses)
from sqlalchemy import Boolean  # True/False values (home)
from sqlalchemy import Column  # Defines table columns with types and constraints
from sqlalchemy import Date  # Date values without time (date_of_birth, won_date)
from sqlalchemy import DateTime  # Full timestamp values (match date, created_at)
from sqlalchemy import Float  # Money amounts (salary, market value)
from sqlalchemy import ForeignKey  # References to other tables' primary keys
from sqlalchemy import Index  # Database indexes for query performance
from sqlalchemy import Integer  # Whole numbers (id, capacity, appearances)
from sqlalchemy import String  # Text fields with length limits
from sqlalchemy import Table  # Plain association tables for many-to-many links
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func  # SQL functions like now()

# Base class for all database models
Base = declarative_base()


class DocumentMixin:
    """Shared id/timestamp columns and the record helper used by responses."""

    id = Column(Integer, primary_key=True, index=True)

    # Automatic timestamps for audit trail
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    def to_document(self) -> dict:
        raise NotImplementedError

    def apply_document(self, doc: dict) -> None:
        raise NotImplementedError

    def to_record(self) -> dict:
        """Document plus id and timestamps, the shape of every API response."""
        return {
            "id": self.id,
            **self.to_document(),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


# ========== ASSOCIATION TABLES ==========

# Seasons list the trophies won during them
season_trophies = Table(
    "season_trophies",
    Base.metadata,
    Column("season_id", ForeignKey("seasons.id", ondelete="CASCADE"), primary_key=True),
    Column("trophy_id", ForeignKey("trophies.id", ondelete="CASCADE"), primary_key=True),
)

# Contracts list the seasons they cover
contract_seasons = Table(
    "contract_seasons",
    Base.metadata,
    Column("contract_id", ForeignKey("contracts.id", ondelete="CASCADE"), primary_key=True),
    Column("season_id", ForeignKey("seasons.id", ondelete="CASCADE"), primary_key=True),
)

# Players keep every contract they have signed
player_contracts = Table(
    "player_contracts",
    Base.metadata,
    Column("player_id", ForeignKey("players.id", ondelete="CASCADE"), primary_key=True),
    Column("contract_id", ForeignKey("contracts.id", ondelete="CASCADE"), primary_key=True),
)


# ========== CLUB STRUCTURE ==========


class Competition(DocumentMixin, Base):
    """A league, cup or friendly tournament the club plays in."""

    __tablename__ = "competitions"

    name = Column(String(100), unique=True, nullable=False, index=True)  # "Premier League"
    type = Column(String(20), nullable=False, default="LEAGUE")  # LEAGUE, CUP, FRIENDLY
    year_of_creation = Column(Integer, nullable=False)

    def to_document(self) -> dict:
        return {
            "name": self.name,
            "type": self.type,
            "year_of_creation": self.year_of_creation,
        }

    def apply_document(self, doc: dict) -> None:
        self.name = doc["name"]
        self.type = doc["type"]
        self.year_of_creation = doc["year_of_creation"]


class Stadium(DocumentMixin, Base):
    """A ground where matches are played."""

    __tablename__ = "stadiums"

    name = Column(String(100), unique=True, nullable=False, index=True)  # "Anfield"
    capacity = Column(Integer, nullable=False)
    location = Column(String(100), nullable=False)  # "Liverpool, England"

    def to_document(self) -> dict:
        return {"name": self.name, "capacity": self.capacity, "location": self.location}

    def apply_document(self, doc: dict) -> None:
        self.name = doc["name"]
        self.capacity = doc["capacity"]
        self.location = doc["location"]


class Manager(DocumentMixin, Base):
    """First-team manager (head coach)."""

    __tablename__ = "managers"

    name = Column(String(100), nullable=False, index=True)
    nationality = Column(String(100), nullable=False)
    date_of_birth = Column(Date, nullable=False)
    status = Column(String(20), nullable=False, default="ACTIVE")

    def to_document(self) -> dict:
        return {
            "name": self.name,
            "nationality": self.nationality,
            "date_of_birth": self.date_of_birth,
            "status": self.status,
        }

    def apply_document(self, doc: dict) -> None:
        self.name = doc["name"]
        self.nationality = doc["nationality"]
        self.date_of_birth = doc["date_of_birth"]
        self.status = doc["status"]


class Season(DocumentMixin, Base):
    """A single campaign such as "2023-2024".

    The trophies relationship is written by the service layer from
    the document's trophy_ids list.
    """

    __tablename__ = "seasons"

    years = Column(String(9), unique=True, nullable=False, index=True)  # "2023-2024"
    manager_id = Column(Integer, ForeignKey("managers.id"), nullable=False)
    status = Column(String(20), nullable=False, default="UPCOMING")

    manager = relationship("Manager")
    trophies = relationship("Trophy", secondary=season_trophies)

    def to_document(self) -> dict:
        return {
            "years": self.years,
            "manager_id": self.manager_id,
            "trophy_ids": sorted(trophy.id for trophy in self.trophies),
            "status": self.status,
        }

    def apply_document(self, doc: dict) -> None:
        self.years = doc["years"]
        self.manager_id = doc["manager_id"]
        self.status = doc["status"]


class Trophy(DocumentMixin, Base):
    """A trophy won in a competition, with its prize money."""

    __tablename__ = "trophies"

    competition_id = Column(Integer, ForeignKey("competitions.id"), nullable=False, index=True)
    won_date = Column(Date, nullable=False)
    prizes = Column(JSON, nullable=False)  # {"winner": ..., "runner_up": ..., "third_place": ...}

    competition = relationship("Competition")

    def to_document(self) -> dict:
        return {
            "competition_id": self.competition_id,
            "won_date": self.won_date,
            "prizes": dict(self.prizes or {}),
        }

    def apply_document(self, doc: dict) -> None:
        self.competition_id = doc["competition_id"]
        self.won_date = doc["won_date"]
        self.prizes = dict(doc["prizes"])


# ========== PEOPLE AND MONEY ==========


class Contract(DocumentMixin, Base):
    """A player contract: dates, salary and performance bonuses."""

    __tablename__ = "contracts"

    start = Column(Date, nullable=False)
    end = Column(Date, nullable=False)
    salary_base = Column(Float, nullable=False)
    salary_currency = Column(String(3), nullable=False, default="GBP")
    bonuses = Column(JSON, nullable=False, default=list)  # [{"type": "GOAL", "amount": 50000}]

    seasons = relationship("Season", secondary=contract_seasons)

    def to_document(self) -> dict:
        return {
            "start": self.start,
            "end": self.end,
            "salary": {"base": self.salary_base, "currency": self.salary_currency},
            "bonuses": [dict(bonus) for bonus in self.bonuses or []],
            "season_ids": sorted(season.id for season in self.seasons),
        }

    def apply_document(self, doc: dict) -> None:
        self.start = doc["start"]
        self.end = doc["end"]
        self.salary_base = doc["salary"]["base"]
        self.salary_currency = doc["salary"]["currency"]
        self.bonuses = [dict(bonus) for bonus in doc.get("bonuses") or []]


class PlayerStats(DocumentMixin, Base):
    """Cumulative statistics for one player.

    The nested goals and cards objects are flattened into columns so GraphQL
    filters can compare them directly.
    """

    __tablename__ = "player_stats"

    appearances = Column(Integer, nullable=False, default=0)
    minutes_played = Column(Integer, nullable=False, default=0)
    goals_total = Column(Integer, nullable=False, default=0)
    goals_penalties = Column(Integer, nullable=False, default=0)
    goals_free_kicks = Column(Integer, nullable=False, default=0)
    assists = Column(Integer, nullable=False, default=0)
    tackles = Column(Integer, nullable=False, default=0)
    interceptions = Column(Integer, nullable=False, default=0)
    clearances = Column(Integer, nullable=False, default=0)
    clean_sheets = Column(Integer, nullable=False, default=0)
    saves = Column(Integer, nullable=False, default=0)
    cards_yellow = Column(Integer, nullable=False, default=0)
    cards_red = Column(Integer, nullable=False, default=0)

    COUNTERS = (
        "appearances",
        "minutes_played",
        "assists",
        "tackles",
        "interceptions",
        "clearances",
        "clean_sheets",
        "saves",
    )

    def to_document(self) -> dict:
        doc = {counter: getattr(self, counter) for counter in self.COUNTERS}
        doc["goals"] = {
            "total": self.goals_total,
            "penalties": self.goals_penalties,
            "free_kicks": self.goals_free_kicks,
        }
        doc["cards"] = {"yellow": self.cards_yellow, "red": self.cards_red}
        return doc

    def apply_document(self, doc: dict) -> None:
        for counter in self.COUNTERS:
            setattr(self, counter, doc[counter])
        self.goals_total = doc["goals"]["total"]
        self.goals_penalties = doc["goals"]["penalties"]
        self.goals_free_kicks = doc["goals"]["free_kicks"]
        self.cards_yellow = doc["cards"]["yellow"]
        self.cards_red = doc["cards"]["red"]


class Player(DocumentMixin, Base):
    """A first-team player.

    Design Decisions:
    - jersey_number is unique across the squad
    - current_contract_id and stats_id point at separate documents so
      contracts and statistics can be managed through their own endpoints
    - contract_history is written by the service layer from contract_history_ids
    """

    __tablename__ = "players"

    # Name parts
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False, index=True)
    display_name = Column(String(100))  # "Mo Salah"

    # Playing information
    position = Column(String(3), nullable=False, index=True)  # GK, DEF, MID, FWD
    jersey_number = Column(Integer, unique=True, index=True)
    status = Column(String(20), nullable=False, default="ACTIVE")

    # Personal details
    nationality = Column(String(100), nullable=False)
    date_of_birth = Column(Date, nullable=False)
    height = Column(Integer, nullable=False)  # centimetres
    weight = Column(Integer, nullable=False)  # kilograms

    # Links to other documents
    current_contract_id = Column(Integer, ForeignKey("contracts.id"))
    stats_id = Column(Integer, ForeignKey("player_stats.id"))

    # Transfer valuation
    market_value_amount = Column(Float)
    market_value_currency = Column(String(3))
    market_value_date = Column(Date)

    current_contract = relationship("Contract", foreign_keys=[current_contract_id])
    stats = relationship("PlayerStats")
    contract_history = relationship("Contract", secondary=player_contracts)

    __table_args__ = (Index("idx_player_name", "last_name", "first_name"),)

    def to_document(self) -> dict:
        market_value = None
        if self.market_value_amount is not None:
            market_value = {
                "value": self.market_value_amount,
                "currency": self.market_value_currency,
                "date": self.market_value_date,
            }
        return {
            "name": {
                "first": self.first_name,
                "last": self.last_name,
                "display_name": self.display_name,
            },
            "position": self.position,
            "nationality": self.nationality,
            "date_of_birth": self.date_of_birth,
            "height": self.height,
            "weight": self.weight,
            "status": self.status,
            "jersey_number": self.jersey_number,
            "current_contract_id": self.current_contract_id,
            "stats_id": self.stats_id,
            "contract_history_ids": sorted(contract.id for contract in self.contract_history),
            "market_value": market_value,
        }

    def apply_document(self, doc: dict) -> None:
        self.first_name = doc["name"]["first"]
        self.last_name = doc["name"]["last"]
        self.display_name = doc["name"].get("display_name")
        self.position = doc["position"]
        self.nationality = doc["nationality"]
        self.date_of_birth = doc["date_of_birth"]
        self.height = doc["height"]
        self.weight = doc["weight"]
        self.status = doc["status"]
        self.jersey_number = doc.get("jersey_number")
        self.current_contract_id = doc.get("current_contract_id")
        self.stats_id = doc.get("stats_id")

        market_value = doc.get("market_value")
        if market_value:
            self.market_value_amount = market_value["value"]
            self.market_value_currency = market_value["currency"]
            self.market_value_date = market_value["date"]
        else:
            self.market_value_amount = None
            self.market_value_currency = None
            self.market_value_date = None


# ========== FIXTURES ==========


class Match(DocumentMixin, Base):
    """A single fixture from the club's point of view.

    `home` says whether the club played at home; the club's goals are
    therefore score_home for home fixtures and score_away otherwise.

    lineup, goals and referee are embedded JSON, mirroring how they are
    addressed by the API (by list index under /matches/{id}/...).
    """

    __tablename__ = "matches"

    date = Column(DateTime, nullable=False, index=True)  # Kick-off, naive UTC

    # Opposition
    opponent_name = Column(String(100), nullable=False, index=True)
    opponent_manager = Column(String(100))

    # Result
    home = Column(Boolean, nullable=False, default=True)
    score_home = Column(Integer, nullable=False, default=0)
    score_away = Column(Integer, nullable=False, default=0)

    # Context
    stadium_id = Column(Integer, ForeignKey("stadiums.id"))
    season_id = Column(Integer, ForeignKey("seasons.id"), nullable=False, index=True)
    competition_id = Column(Integer, ForeignKey("competitions.id"), nullable=False)

    # Embedded documents
    referee = Column(JSON)  # {"main": ..., "assistants": [...], "fourth": ...}
    lineup = Column(JSON, nullable=False, default=dict)
    goals = Column(JSON, nullable=False, default=list)

    stadium = relationship("Stadium")
    season = relationship("Season")
    competition = relationship("Competition")

    __table_args__ = (Index("idx_match_season_date", "season_id", "date"),)

    def to_document(self) -> dict:
        lineup = self.lineup or {}
        return {
            "date": self.date,
            "opponent": {"name": self.opponent_name, "manager": self.opponent_manager},
            "home": self.home,
            "score": {"home": self.score_home, "away": self.score_away},
            "stadium_id": self.stadium_id,
            "season_id": self.season_id,
            "competition_id": self.competition_id,
            "referee": dict(self.referee) if self.referee else None,
            "lineup": {
                "starting": list(lineup.get("starting", [])),
                "substitutes": list(lineup.get("substitutes", [])),
                "substitutions": [dict(sub) for sub in lineup.get("substitutions", [])],
            },
            "goals": [dict(goal) for goal in self.goals or []],
        }

    def apply_document(self, doc: dict) -> None:
        self.date = doc["date"]
        self.opponent_name = doc["opponent"]["name"]
        self.opponent_manager = doc["opponent"].get("manager")
        self.home = doc["home"]
        self.score_home = doc["score"]["home"]
        self.score_away = doc["score"]["away"]
        self.stadium_id = doc.get("stadium_id")
        self.season_id = doc["season_id"]
        self.competition_id = doc["competition_id"]
        self.referee = dict(doc["referee"]) if doc.get("referee") else None

        lineup = doc.get("lineup") or {}
        self.lineup = {
            "starting": list(lineup.get("starting", [])),
            "substitutes": list(lineup.get("substitutes", [])),
            "substitutions": [dict(sub) for sub in lineup.get("substitutions", [])],
        }
        self.goals = [dict(goal) for goal in doc.get("goals") or []]
