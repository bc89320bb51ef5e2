"""Tests for the match consistency rules.

The rules are pure functions over match documents, so these tests build
plain dicts rather than database rows.
"""

from datetime import datetime

import pytest

from lfc_api.core.exceptions import BusinessLogicError
from lfc_api.services import match_rules

STARTING = list(range(1, 12))
SUBSTITUTES = [12, 13, 14, 15, 16]
ALL_ACTIVE = {player_id: "ACTIVE" for player_id in STARTING + SUBSTITUTES}


def match_document(**overrides) -> dict:
    doc = {
        "date": datetime(2023, 9, 2, 15, 0),
        "home": True,
        "score": {"home": 0, "away": 0},
        "lineup": {"starting": list(STARTING), "substitutes": list(SUBSTITUTES), "substitutions": []},
        "goals": [],
    }
    doc.update(overrides)
    return doc


# ========== SEASON BOUNDS ==========


@pytest.mark.parametrize("year", [2023, 2024])
def test_match_inside_season_years(year):
    match_rules.check_season_bounds(datetime(year, 1, 15), "2023-2024")


@pytest.mark.parametrize("year", [2022, 2025])
def test_match_outside_season_years(year):
    with pytest.raises(BusinessLogicError, match="outside season 2023-2024"):
        match_rules.check_season_bounds(datetime(year, 6, 1), "2023-2024")


def test_season_bounds_parses_years():
    assert match_rules.season_bounds("2019-2020") == (2019, 2020)


# ========== LINEUP ==========


def test_empty_lineup_is_allowed():
    """A lineup that has not been announced yet is simply empty."""
    match_rules.check_lineup_size({"starting": [], "substitutes": []})


@pytest.mark.parametrize("size", [1, 10, 12])
def test_starting_lineup_must_have_eleven(size):
    with pytest.raises(BusinessLogicError, match="exactly 11"):
        match_rules.check_lineup_size({"starting": list(range(1, size + 1))})


def test_duplicate_in_starting_lineup():
    lineup = {"starting": [1, 1, *range(3, 12)], "substitutes": []}
    with pytest.raises(BusinessLogicError, match="Player 1 appears more than once"):
        match_rules.check_duplicate_players(lineup)


def test_player_both_starting_and_substitute():
    lineup = {"starting": list(STARTING), "substitutes": [11, 12]}
    with pytest.raises(BusinessLogicError, match="Player 11 appears more than once"):
        match_rules.check_duplicate_players(lineup)


def test_lineup_players_must_exist():
    statuses = dict(ALL_ACTIVE)
    del statuses[5]
    with pytest.raises(BusinessLogicError, match="Player 5 does not exist"):
        match_rules.check_active_players({"starting": STARTING, "substitutes": SUBSTITUTES}, statuses)


def test_lineup_players_must_be_active():
    statuses = {**ALL_ACTIVE, 13: "INJURED"}
    with pytest.raises(BusinessLogicError, match="Player 13 is INJURED"):
        match_rules.check_active_players({"starting": STARTING, "substitutes": SUBSTITUTES}, statuses)


# ========== GOALS ==========


def test_goals_need_a_lineup():
    with pytest.raises(BusinessLogicError, match="before the starting lineup is set"):
        match_rules.check_goals({"starting": []}, [{"scorer_id": 1, "minute": 10}])


def test_substitute_may_score():
    lineup = {"starting": STARTING, "substitutes": SUBSTITUTES}
    match_rules.check_goals(lineup, [{"scorer_id": 14, "assistant_id": 2, "minute": 80}])


def test_scorer_must_be_in_squad():
    lineup = {"starting": STARTING, "substitutes": SUBSTITUTES}
    with pytest.raises(BusinessLogicError, match="Goal scorer 99"):
        match_rules.check_goals(lineup, [{"scorer_id": 99, "minute": 10}])


def test_assistant_must_be_in_squad():
    lineup = {"starting": STARTING, "substitutes": SUBSTITUTES}
    with pytest.raises(BusinessLogicError, match="Assistant 99"):
        match_rules.check_goals(lineup, [{"scorer_id": 1, "assistant_id": 99, "minute": 10}])


def test_scorer_cannot_assist_themselves():
    lineup = {"starting": STARTING, "substitutes": SUBSTITUTES}
    with pytest.raises(BusinessLogicError, match="cannot assist their own goal"):
        match_rules.check_goals(lineup, [{"scorer_id": 1, "assistant_id": 1, "minute": 10}])


# ========== SUBSTITUTIONS ==========


def substitution(player_in: int, player_out: int, minute: int) -> dict:
    return {"player_in_id": player_in, "player_out_id": player_out, "minute": minute}


def test_valid_substitutions():
    lineup = {
        "starting": STARTING,
        "substitutes": SUBSTITUTES,
        "substitutions": [substitution(12, 9, 60), substitution(13, 12, 85)],
    }
    match_rules.check_substitutions(lineup)


def test_substitutions_are_replayed_in_minute_order():
    """Player 12 comes on at 60' and off at 85', regardless of list order."""
    lineup = {
        "starting": STARTING,
        "substitutes": SUBSTITUTES,
        "substitutions": [substitution(13, 12, 85), substitution(12, 9, 60)],
    }
    match_rules.check_substitutions(lineup)


def test_player_out_must_be_on_the_pitch():
    lineup = {"starting": STARTING, "substitutes": SUBSTITUTES, "substitutions": [substitution(12, 14, 60)]}
    with pytest.raises(BusinessLogicError, match="Player 14 is not on the pitch"):
        match_rules.check_substitutions(lineup)


def test_substituted_player_cannot_be_replaced_again():
    lineup = {
        "starting": STARTING,
        "substitutes": SUBSTITUTES,
        "substitutions": [substitution(12, 9, 60), substitution(13, 9, 70)],
    }
    with pytest.raises(BusinessLogicError, match="Player 9 is not on the pitch"):
        match_rules.check_substitutions(lineup)


def test_player_in_must_be_a_substitute():
    lineup = {"starting": STARTING, "substitutes": SUBSTITUTES, "substitutions": [substitution(99, 9, 60)]}
    with pytest.raises(BusinessLogicError, match="Player 99 is not among the substitutes"):
        match_rules.check_substitutions(lineup)


def test_substitute_comes_on_only_once():
    lineup = {
        "starting": STARTING,
        "substitutes": SUBSTITUTES,
        "substitutions": [substitution(12, 9, 60), substitution(12, 10, 70)],
    }
    with pytest.raises(BusinessLogicError):
        match_rules.check_substitutions(lineup)


def test_player_cannot_replace_themselves():
    lineup = {"starting": STARTING, "substitutes": SUBSTITUTES, "substitutions": [substitution(9, 9, 60)]}
    with pytest.raises(BusinessLogicError, match="substituted for themselves"):
        match_rules.check_substitutions(lineup)


def test_substitutions_need_a_lineup():
    with pytest.raises(BusinessLogicError, match="before the starting lineup is set"):
        match_rules.check_substitutions({"starting": [], "substitutions": [substitution(12, 9, 60)]})


# ========== SCORE ==========


@pytest.mark.parametrize("home, side", [(True, "home"), (False, "away")])
def test_club_side(home, side):
    assert match_rules.club_side(home) == side


def test_score_derived_from_goals_at_home():
    goals = [{"scorer_id": 9, "minute": 10}, {"scorer_id": 10, "minute": 50}]
    doc = match_rules.derive_score(match_document(goals=goals, score={"home": 0, "away": 1}), False)
    assert doc["score"] == {"home": 2, "away": 1}


def test_score_derived_from_goals_away():
    goals = [{"scorer_id": 9, "minute": 10}]
    doc = match_rules.derive_score(match_document(home=False, goals=goals), False)
    assert doc["score"] == {"home": 0, "away": 1}


def test_supplied_score_must_match_goals():
    goals = [{"scorer_id": 9, "minute": 10}]
    with pytest.raises(BusinessLogicError, match="does not match 1 recorded goal"):
        match_rules.derive_score(match_document(goals=goals, score={"home": 3, "away": 0}), True)


def test_supplied_score_agreeing_with_goals_is_kept():
    goals = [{"scorer_id": 9, "minute": 10}]
    doc = match_rules.derive_score(match_document(goals=goals, score={"home": 1, "away": 4}), True)
    assert doc["score"] == {"home": 1, "away": 4}


def test_score_without_goals_is_left_alone():
    doc = match_rules.derive_score(match_document(score={"home": 2, "away": 2}), True)
    assert doc["score"] == {"home": 2, "away": 2}


def test_emptied_goal_list_resets_the_club_score():
    doc = match_rules.derive_score(match_document(score={"home": 2, "away": 1}), False, goals_supplied=True)
    assert doc["score"] == {"home": 0, "away": 1}


def test_emptied_goal_list_with_a_disagreeing_score():
    with pytest.raises(BusinessLogicError, match="does not match 0 recorded goal"):
        match_rules.derive_score(match_document(score={"home": 2, "away": 0}), True, goals_supplied=True)


def test_referenced_player_ids():
    doc = match_document(
        lineup={
            "starting": [1, 2],
            "substitutes": [3],
            "substitutions": [{"player_in_id": 3, "player_out_id": 2, "minute": 60}],
        },
        goals=[{"scorer_id": 1, "assistant_id": 3, "minute": 70}],
    )
    assert match_rules.referenced_player_ids(doc) == {1, 2, 3}
    assert match_rules.referenced_player_ids({"lineup": {}, "goals": []}) == set()


# ========== ALL RULES ==========


def test_validate_match_runs_every_rule():
    goals = [{"scorer_id": 9, "assistant_id": 10, "minute": 12}]
    doc = match_rules.validate_match(match_document(goals=goals), "2023-2024", ALL_ACTIVE)
    assert doc["score"]["home"] == 1


def test_validate_match_checks_season_first():
    """A match outside its season fails before the lineup is even looked at."""
    doc = match_document(date=datetime(2021, 5, 1), lineup={"starting": [1, 2]})
    with pytest.raises(BusinessLogicError, match="outside season"):
        match_rules.validate_match(doc, "2023-2024", {})
