"""Consistency rules checked before a match is stored.

These functions are pure: they take the match document (a dict in the
MatchDocument shape) plus whatever related data the caller already loaded,
and either return quietly or raise BusinessLogicError. validate_match runs
them in a fixed order and returns the document with the club's score filled
in from its goals.

Rules, in the order they run:
1. The match date falls inside the season's years ("2023-2024" allows 2023 and 2024)
2. The starting lineup is empty (not announced yet) or exactly 11 players
3. Nobody appears twice across starting players and substitutes
4. Every lineup player exists and is ACTIVE
5. Goals and substitutions only involve players in the matchday squad
6. The club's side of the score equals the number of recorded goals
"""

from collections.abc import Mapping
from datetime import datetime

from ..core.enums import PlayerStatus
from ..core.exceptions import BusinessLogicError

STARTING_LINEUP_SIZE = 11


def season_bounds(years: str) -> tuple[int, int]:
    start, end = years.split("-")
    return int(start), int(end)


def check_season_bounds(match_date: datetime, years: str) -> None:
    start, end = season_bounds(years)
    if not start <= match_date.year <= end:
        raise BusinessLogicError(
            f"Match date {match_date.date().isoformat()} is outside season {years}"
        )


def check_lineup_size(lineup: Mapping) -> None:
    starting = lineup.get("starting") or []
    if starting and len(starting) != STARTING_LINEUP_SIZE:
        raise BusinessLogicError(
            f"Starting lineup must contain exactly {STARTING_LINEUP_SIZE} players, got {len(starting)}"
        )


def check_duplicate_players(lineup: Mapping) -> None:
    seen = set()
    for group in ("starting", "substitutes"):
        for player_id in lineup.get(group) or []:
            if player_id in seen:
                raise BusinessLogicError(f"Player {player_id} appears more than once in the lineup")
            seen.add(player_id)


def lineup_player_ids(lineup: Mapping) -> list[int]:
    return [*(lineup.get("starting") or []), *(lineup.get("substitutes") or [])]


def referenced_player_ids(match: Mapping) -> set[int]:
    """Every player id the match document mentions: lineup, substitutions and goals."""
    lineup = match.get("lineup") or {}
    ids = set(lineup_player_ids(lineup))
    for sub in lineup.get("substitutions") or []:
        ids.update((sub["player_in_id"], sub["player_out_id"]))
    for goal in match.get("goals") or []:
        ids.add(goal["scorer_id"])
        if goal.get("assistant_id") is not None:
            ids.add(goal["assistant_id"])
    return ids


def check_active_players(lineup: Mapping, statuses: Mapping[int, str]) -> None:
    """`statuses` maps player id -> status for every lineup player that exists."""
    for player_id in lineup_player_ids(lineup):
        if player_id not in statuses:
            raise BusinessLogicError(f"Player {player_id} does not exist")
        if statuses[player_id] != PlayerStatus.ACTIVE.value:
            raise BusinessLogicError(
                f"Player {player_id} is {statuses[player_id]} and cannot be selected"
            )


def check_goals(lineup: Mapping, goals: list[Mapping]) -> None:
    if not goals:
        return
    if not lineup.get("starting"):
        raise BusinessLogicError("Goals cannot be recorded before the starting lineup is set")

    squad = set(lineup_player_ids(lineup))
    for goal in goals:
        scorer = goal["scorer_id"]
        assistant = goal.get("assistant_id")
        if scorer not in squad:
            raise BusinessLogicError(f"Goal scorer {scorer} is not in the matchday squad")
        if assistant is None:
            continue
        if assistant not in squad:
            raise BusinessLogicError(f"Assistant {assistant} is not in the matchday squad")
        if assistant == scorer:
            raise BusinessLogicError("A player cannot assist their own goal")


def check_substitutions(lineup: Mapping) -> None:
    """Replay substitutions in minute order against who is on the pitch."""
    substitutions = lineup.get("substitutions") or []
    if not substitutions:
        return
    if not lineup.get("starting"):
        raise BusinessLogicError("Substitutions cannot be made before the starting lineup is set")

    on_pitch = set(lineup["starting"])
    bench = set(lineup.get("substitutes") or [])
    used = set()
    for sub in sorted(substitutions, key=lambda item: item["minute"]):
        player_in, player_out = sub["player_in_id"], sub["player_out_id"]
        if player_in == player_out:
            raise BusinessLogicError("A player cannot be substituted for themselves")
        if player_out not in on_pitch:
            raise BusinessLogicError(
                f"Player {player_out} is not on the pitch at minute {sub['minute']}"
            )
        if player_in not in bench:
            raise BusinessLogicError(f"Player {player_in} is not among the substitutes")
        if player_in in used:
            raise BusinessLogicError(f"Player {player_in} has already come on")
        on_pitch.remove(player_out)
        on_pitch.add(player_in)
        used.add(player_in)


def club_side(home: bool) -> str:
    """Which half of the score belongs to the club."""
    return "home" if home else "away"


def derive_score(match: Mapping, score_supplied: bool, goals_supplied: bool = False) -> dict:
    """Set the club's score from its goals.

    When goals are recorded, or the goal list itself is being written (even
    emptied), the club's side of the score must match how many there are. A
    score sent alongside the write that disagrees is rejected; otherwise the
    count is written into the score.
    """
    goals = match.get("goals") or []
    score = dict(match["score"])
    if goals or goals_supplied:
        side = club_side(match["home"])
        if score_supplied and score[side] != len(goals):
            raise BusinessLogicError(
                f"Score {score['home']}-{score['away']} does not match "
                f"{len(goals)} recorded goal(s) for the club"
            )
        score[side] = len(goals)
    return {**match, "score": score}


def validate_match(
    match: Mapping,
    season_years: str,
    statuses: Mapping[int, str],
    score_supplied: bool = False,
    goals_supplied: bool = False,
) -> dict:
    """Run every rule in order; return the document with the derived score."""
    lineup = match.get("lineup") or {}
    check_season_bounds(match["date"], season_years)
    check_lineup_size(lineup)
    check_duplicate_players(lineup)
    check_active_players(lineup, statuses)
    check_goals(lineup, match.get("goals") or [])
    check_substitutions(lineup)
    return derive_score(match, score_supplied, goals_supplied)
