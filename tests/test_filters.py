"""Tests for the GraphQL filter-condition builders.

Filters are built from the Strawberry input classes and run through the
services' query(), so each test checks which rows actually come back.
"""

from datetime import datetime, timedelta, timezone

import pytest

from lfc_api.core.exceptions import InvalidQueryError
from lfc_api.graphql.filters import (
    contract_conditions,
    like_pattern,
    match_conditions,
    number_conditions,
    player_conditions,
    player_stats_conditions,
    stadium_conditions,
    string_conditions,
    trophy_conditions,
)
from lfc_api.graphql.inputs import (
    CardCountsFilter,
    ContractFilter,
    DateFilter,
    GoalCountsFilter,
    MatchFilter,
    NumberFilter,
    PlayerFilter,
    PlayerStatsFilter,
    StadiumFilter,
    StringFilter,
    TrophyFilter,
)
from lfc_api.database.models import Player, Stadium
from lfc_api.services import (
    contract_service,
    match_service,
    player_service,
    player_stats_service,
    stadium_service,
    trophy_service,
)
from tests.conftest import player_payload


def jerseys(rows) -> list[int]:
    return sorted(row.jersey_number for row in rows)


@pytest.fixture
def players(make_player):
    make_player(jersey_number=11, name={"first": "Mohamed", "last": "Salah"}, nationality="Egypt", position="FWD")
    make_player(jersey_number=4, name={"first": "Virgil", "last": "van Dijk"}, nationality="Netherlands", position="DEF")
    make_player(jersey_number=66, name={"first": "Trent", "last": "Alexander-Arnold"}, nationality="England", position="DEF")
    make_player(jersey_number=1, name={"first": "Alisson", "last": "Becker"}, nationality="Brazil", position="GK")


def test_no_filter_means_no_conditions():
    assert match_conditions(None) == []
    assert string_conditions(Stadium.name, None) == []
    assert number_conditions(Stadium.capacity, NumberFilter()) == []


def test_like_pattern_escapes_wildcards():
    assert like_pattern("50%_off") == "%50\\%\\_off%"


def test_string_contains_is_case_insensitive(db, make_stadium):
    make_stadium(name="Anfield")
    make_stadium(name="Goodison Park")
    rows = stadium_service.query(db, stadium_conditions(StadiumFilter(name=StringFilter(contains="ANF"))))
    assert [row.name for row in rows] == ["Anfield"]


def test_string_not_contains(db, make_stadium):
    make_stadium(name="Anfield")
    make_stadium(name="Goodison Park")
    rows = stadium_service.query(db, stadium_conditions(StadiumFilter(name=StringFilter(not_contains="park"))))
    assert [row.name for row in rows] == ["Anfield"]


def test_contains_treats_wildcards_literally(db, make_stadium):
    make_stadium(name="Anfield")
    rows = stadium_service.query(db, stadium_conditions(StadiumFilter(name=StringFilter(contains="%"))))
    assert rows == []


def test_all_number_operators_are_combined(db, make_stadium):
    """gt and lt together mean "between", not whichever was written last."""
    make_stadium(name="Small Ground", capacity=5000)
    make_stadium(name="Anfield", capacity=54074)
    make_stadium(name="Wembley Stadium", capacity=90000)
    flt = StadiumFilter(capacity=NumberFilter(gt=10000, lt=60000))
    rows = stadium_service.query(db, stadium_conditions(flt))
    assert [row.name for row in rows] == ["Anfield"]


def test_zero_is_a_real_filter_value(db, make_player_stats):
    make_player_stats(saves=0)
    make_player_stats(saves=96)
    flt = PlayerStatsFilter(saves=NumberFilter(eq=0))
    rows = player_stats_service.query(db, player_stats_conditions(flt))
    assert [row.saves for row in rows] == [0]


def test_player_name_matches_first_or_last(db, players):
    flt = PlayerFilter(name=StringFilter(contains="al"))
    rows = player_service.query(db, player_conditions(flt))
    assert jerseys(rows) == [1, 11, 66], "Salah (last), Alisson (first), Alexander-Arnold (last)"


def test_player_name_eq(db, players):
    rows = player_service.query(db, player_conditions(PlayerFilter(name=StringFilter(eq="Virgil"))))
    assert jerseys(rows) == [4]


def test_player_name_not_contains_requires_both_parts(db, players):
    rows = player_service.query(db, player_conditions(PlayerFilter(name=StringFilter(not_contains="al"))))
    assert jerseys(rows) == [4]


def test_player_name_ne(db, players):
    rows = player_service.query(db, player_conditions(PlayerFilter(name=StringFilter(ne="Becker"))))
    assert jerseys(rows) == [4, 11, 66]


def test_ne_keeps_documents_without_the_field(db, players):
    player_service.create(db, player_payload(50, jersey_number=None))
    rows = player_service.query(db, player_conditions(PlayerFilter(jersey_number=NumberFilter(ne=11))))
    assert sorted(row.last_name for row in rows) == ["Alexander-Arnold", "Becker", "Player50", "van Dijk"]


def test_not_contains_keeps_documents_without_the_field(db, players):
    name = {"first": "Dominik", "last": "Szoboszlai", "display_name": "Dom"}
    player_service.create(db, player_payload(8, name=name))
    rows = player_service.query(db, string_conditions(Player.display_name, StringFilter(not_contains="dom")))
    assert jerseys(rows) == [1, 4, 11, 66]


def test_player_filters_combine(db, players):
    flt = PlayerFilter(position=StringFilter(eq="DEF"), jersey_number=NumberFilter(lte=10))
    rows = player_service.query(db, player_conditions(flt))
    assert jerseys(rows) == [4]


def test_match_filters(db, squad, make_match):
    make_match(date="2023-09-02T15:00:00Z", opponent={"name": "Everton"})
    make_match(date="2024-01-21T14:00:00Z", opponent={"name": "Norwich City"}, home=False)

    rows = match_service.query(db, match_conditions(MatchFilter(home=False)))
    assert [row.opponent_name for row in rows] == ["Norwich City"]

    rows = match_service.query(db, match_conditions(MatchFilter(season=str(squad["season_id"]))))
    assert len(rows) == 2

    rows = match_service.query(db, match_conditions(MatchFilter(stadium="999")))
    assert rows == []


def test_match_date_filter_compares_in_utc(db, squad, make_match):
    make_match(date="2023-09-02T15:00:00Z", opponent={"name": "Everton"})
    kick_off_in_paris = datetime(2023, 9, 2, 17, 0, tzinfo=timezone(timedelta(hours=2)))
    rows = match_service.query(db, match_conditions(MatchFilter(date=DateFilter(eq=kick_off_in_paris))))
    assert [row.opponent_name for row in rows] == ["Everton"]

    flt = MatchFilter(date=DateFilter(gte=datetime(2023, 9, 3, tzinfo=timezone.utc)))
    assert match_service.query(db, match_conditions(flt)) == []


def test_id_filter_rejects_garbage():
    with pytest.raises(InvalidQueryError, match="Invalid ID format"):
        match_conditions(MatchFilter(season="not-an-id"))


def test_trophy_date_filter_on_date_column(db, make_competition, make_trophy):
    competition = make_competition()
    make_trophy(competition_id=competition.id, won_date="2020-06-25")
    make_trophy(competition_id=competition.id, won_date="2024-02-25")
    flt = TrophyFilter(won_date=DateFilter(lt=datetime(2021, 1, 1)))
    rows = trophy_service.query(db, trophy_conditions(flt))
    assert [str(row.won_date) for row in rows] == ["2020-06-25"]


def test_contract_filters(db, make_contract):
    make_contract(salary={"base": 5000000})
    make_contract(salary={"base": 18000000})
    flt = ContractFilter(salary_base=NumberFilter(gte=10000000), start=DateFilter(lte=datetime(2023, 1, 1)))
    rows = contract_service.query(db, contract_conditions(flt))
    assert [row.salary_base for row in rows] == [18000000]


def test_nested_player_stats_filters(db, make_player_stats):
    make_player_stats(goals={"total": 25, "penalties": 5}, cards={"yellow": 1})
    make_player_stats(goals={"total": 3}, cards={"yellow": 6, "red": 1})
    flt = PlayerStatsFilter(goals=GoalCountsFilter(total=NumberFilter(gt=10)))
    assert [row.goals_total for row in player_stats_service.query(db, player_stats_conditions(flt))] == [25]

    flt = PlayerStatsFilter(cards=CardCountsFilter(red=NumberFilter(gte=1)))
    assert [row.cards_yellow for row in player_stats_service.query(db, player_stats_conditions(flt))] == [6]
