"""Shared pytest fixtures.

Every test gets a fresh in-memory SQLite database. StaticPool keeps a single
connection alive, so the schema created here is the one the app sees through
the overridden get_db dependency (REST and GraphQL alike).

Factory fixtures create valid documents through the services, the same path
API writes take, so tests only spell out the fields they care about.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from lfc_api.api.main import app
from lfc_api.database.connection import get_db
from lfc_api.database.models import Base
from lfc_api.services import (
    competition_service,
    contract_service,
    manager_service,
    match_service,
    player_service,
    player_stats_service,
    season_service,
    stadium_service,
    trophy_service,
)

SQUAD_SIZE = 16


@pytest.fixture
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(test_engine)
    yield test_engine
    Base.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ========== DOCUMENT PAYLOADS ==========


def player_payload(jersey_number: int, /, **overrides) -> dict:
    payload = {
        "name": {"first": "Test", "last": f"Player{jersey_number:02d}"},
        "position": "MID",
        "nationality": "England",
        "date_of_birth": "1995-01-01",
        "height": 180,
        "weight": 75,
        "jersey_number": jersey_number,
    }
    payload.update(overrides)
    return payload


def match_payload(season_id: int, competition_id: int, **overrides) -> dict:
    payload = {
        "date": "2023-09-02T15:00:00Z",
        "opponent": {"name": "Everton", "manager": "Sean Dyche"},
        "home": True,
        "season_id": season_id,
        "competition_id": competition_id,
    }
    payload.update(overrides)
    return payload


# ========== FACTORIES ==========


@pytest.fixture
def make_competition(db):
    def make(**overrides):
        payload = {"name": "Premier League", "type": "LEAGUE", "year_of_creation": 1992}
        payload.update(overrides)
        return competition_service.create(db, payload)

    return make


@pytest.fixture
def make_stadium(db):
    def make(**overrides):
        payload = {"name": "Anfield", "capacity": 54074, "location": "Liverpool, England"}
        payload.update(overrides)
        return stadium_service.create(db, payload)

    return make


@pytest.fixture
def make_manager(db):
    def make(**overrides):
        payload = {"name": "Jürgen Klopp", "nationality": "German", "date_of_birth": "1967-06-16"}
        payload.update(overrides)
        return manager_service.create(db, payload)

    return make


@pytest.fixture
def make_season(db, make_manager):
    def make(**overrides):
        payload = {"years": "2023-2024", "status": "FINISHED"}
        payload.update(overrides)
        payload.setdefault("manager_id", make_manager().id)
        return season_service.create(db, payload)

    return make


@pytest.fixture
def make_trophy(db, make_competition):
    def make(**overrides):
        payload = {"won_date": "2024-02-25", "prizes": {"winner": 100000, "runner_up": 50000}}
        payload.update(overrides)
        if "competition_id" not in payload:
            payload["competition_id"] = make_competition(name="Carabao Cup", type="CUP", year_of_creation=1960).id
        return trophy_service.create(db, payload)

    return make


@pytest.fixture
def make_contract(db):
    def make(**overrides):
        payload = {
            "start": "2022-07-01",
            "end": "2025-06-30",
            "salary": {"base": 18200000, "currency": "GBP"},
            "bonuses": [{"type": "GOAL", "amount": 50000}],
        }
        payload.update(overrides)
        return contract_service.create(db, payload)

    return make


@pytest.fixture
def make_player_stats(db):
    def make(**overrides):
        payload = {"appearances": 10, "goals": {"total": 4, "penalties": 1}, "assists": 2}
        payload.update(overrides)
        return player_stats_service.create(db, payload)

    return make


@pytest.fixture
def make_player(db):
    def make(jersey_number: int = 11, **overrides):
        return player_service.create(db, player_payload(jersey_number, **overrides))

    return make


@pytest.fixture
def squad(db, make_competition, make_stadium, make_season, make_player):
    """A season, competition, stadium and sixteen active players.

    The first eleven players are the starting lineup, the rest the bench.
    """
    competition = make_competition()
    stadium = make_stadium()
    season = make_season()
    players = [make_player(jersey_number=number) for number in range(1, SQUAD_SIZE + 1)]
    player_ids = [player.id for player in players]
    return {
        "competition_id": competition.id,
        "stadium_id": stadium.id,
        "season_id": season.id,
        "player_ids": player_ids,
        "starting": player_ids[:11],
        "substitutes": player_ids[11:],
    }


@pytest.fixture
def make_match(db, squad):
    def make(**overrides):
        payload = match_payload(squad["season_id"], squad["competition_id"], stadium_id=squad["stadium_id"])
        payload.update(overrides)
        return match_service.create(db, payload)

    return make


@pytest.fixture
def match_with_lineup(db, squad, make_match):
    match = make_match()
    return match_service.update(
        db,
        match.id,
        {"lineup": {"starting": squad["starting"], "substitutes": squad["substitutes"]}},
    )
