"""REST tests for matches: fixture writes, lineup, substitutions and goals."""

import pytest

from lfc_api.services import player_service
from tests.conftest import match_payload


@pytest.fixture
def match_url(client, match_with_lineup):
    return f"/api/v1/matches/{match_with_lineup.id}"


def test_create_match(client, squad):
    payload = match_payload(squad["season_id"], squad["competition_id"], stadium_id=squad["stadium_id"])
    response = client.post("/api/v1/matches", json=payload)
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["date"] == "2023-09-02T15:00:00"
    assert data["score"] == {"home": 0, "away": 0}
    assert data["lineup"] == {"starting": [], "substitutes": [], "substitutions": []}
    assert data["goals"] == []
    assert data["_links"]["season"] == f"/api/v1/seasons/{squad['season_id']}"
    assert data["_links"]["stadium"] == f"/api/v1/stadiums/{squad['stadium_id']}"


def test_create_match_outside_its_season(client, squad):
    payload = match_payload(squad["season_id"], squad["competition_id"], date="2021-05-01T15:00:00Z")
    response = client.post("/api/v1/matches", json=payload)
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "BusinessLogicError"
    assert "outside season 2023-2024" in body["message"]


def test_create_match_rejects_lineup(client, squad):
    payload = match_payload(squad["season_id"], squad["competition_id"], lineup={"starting": squad["starting"]})
    response = client.post("/api/v1/matches", json=payload)
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid fields"


def test_create_match_with_unknown_season(client, squad):
    response = client.post("/api/v1/matches", json=match_payload(999, squad["competition_id"]))
    assert response.status_code == 400
    assert response.json()["message"] == "season_id 999 does not exist"


def test_put_keeps_lineup_and_goals(client, squad, match_url):
    client.post(f"{match_url}/goals", json={"scorer_id": squad["starting"][9], "minute": 30})
    replacement = match_payload(squad["season_id"], squad["competition_id"], opponent={"name": "Everton FC"})
    response = client.put(match_url, json=replacement)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["opponent"]["name"] == "Everton FC"
    assert data["lineup"]["starting"] == squad["starting"]
    assert len(data["goals"]) == 1
    assert data["score"]["home"] == 1


def test_patch_score_must_agree_with_goals(client, squad, match_url):
    client.post(f"{match_url}/goals", json={"scorer_id": squad["starting"][9], "minute": 30})
    response = client.patch(match_url, json={"score": {"home": 3}})
    assert response.status_code == 400
    assert "does not match" in response.json()["message"]

    response = client.patch(match_url, json={"score": {"away": 2}})
    assert response.status_code == 200
    assert response.json()["data"]["score"] == {"home": 1, "away": 2}


# ========== LINEUP ==========


def test_get_lineup(client, squad, match_url):
    response = client.get(f"{match_url}/lineup")
    assert response.status_code == 200
    body = response.json()
    assert body["data"]["starting"] == squad["starting"]
    assert body["_links"]["starting"] == f"{match_url}/lineup/starting"

    assert client.get(f"{match_url}/lineup/starting").json()["data"] == squad["starting"]
    assert client.get(f"{match_url}/lineup/substitutes").json()["data"] == squad["substitutes"]


def test_replace_starting_lineup(client, squad, match_url):
    starting = squad["starting"][1:] + [squad["substitutes"][0]]
    assert client.put(f"{match_url}/lineup/substitutes", json=squad["substitutes"][1:]).status_code == 200
    response = client.put(f"{match_url}/lineup/starting", json=starting)
    assert response.status_code == 200
    assert response.json()["data"] == starting


def test_starting_lineup_needs_eleven_players(client, squad, match_url):
    response = client.put(f"{match_url}/lineup/starting", json=squad["starting"][:10])
    assert response.status_code == 400
    assert "exactly 11" in response.json()["message"]


def test_lineup_rejects_duplicates(client, squad, match_url):
    response = client.put(f"{match_url}/lineup/substitutes", json=[squad["starting"][0]])
    assert response.status_code == 400
    assert "appears more than once" in response.json()["message"]


def test_lineup_rejects_inactive_players(client, db, squad, match_url):
    player_service.update(db, squad["substitutes"][0], {"status": "INJURED"})
    response = client.put(f"{match_url}/lineup/substitutes", json=squad["substitutes"])
    assert response.status_code == 400
    assert f"Player {squad['substitutes'][0]} is INJURED" in response.json()["message"]


def test_lineup_of_missing_match(client):
    response = client.get("/api/v1/matches/12/lineup")
    assert response.status_code == 404
    assert response.json()["error"] == "Match not found"


# ========== SUBSTITUTIONS ==========


def test_substitution_lifecycle(client, squad, match_url):
    on, off = squad["substitutes"][0], squad["starting"][10]
    response = client.post(
        f"{match_url}/lineup/substitutions",
        json={"player_in_id": on, "player_out_id": off, "minute": 62},
    )
    assert response.status_code == 201
    assert response.headers["Location"] == f"{match_url}/lineup/substitutions/0"

    response = client.get(f"{match_url}/lineup/substitutions/0")
    assert response.json()["data"] == {"player_in_id": on, "player_out_id": off, "minute": 62}

    response = client.put(
        f"{match_url}/lineup/substitutions/0",
        json={"player_in_id": on, "player_out_id": off, "minute": 70},
    )
    assert response.json()["data"]["minute"] == 70

    assert client.delete(f"{match_url}/lineup/substitutions/0").status_code == 204
    assert client.get(f"{match_url}/lineup/substitutions").json()["data"] == []


def test_substitute_must_come_from_the_bench(client, squad, match_url):
    response = client.post(
        f"{match_url}/lineup/substitutions",
        json={"player_in_id": squad["starting"][0], "player_out_id": squad["starting"][1], "minute": 50},
    )
    assert response.status_code == 400
    assert "not among the substitutes" in response.json()["message"]


def test_missing_substitution(client, match_url):
    response = client.get(f"{match_url}/lineup/substitutions/0")
    assert response.status_code == 404
    assert response.json()["error"] == "Substitution not found"


# ========== GOALS ==========


def test_goal_updates_the_score(client, squad, match_url):
    scorer, assistant = squad["starting"][10], squad["starting"][7]
    response = client.post(f"{match_url}/goals", json={"scorer_id": scorer, "assistant_id": assistant, "minute": 12})
    assert response.status_code == 201
    assert response.headers["Location"] == f"{match_url}/goals/0"
    assert response.json()["data"]["scorer_id"] == scorer

    client.post(f"{match_url}/goals", json={"scorer_id": scorer, "minute": 88, "is_penalty": True})
    assert client.get(match_url).json()["data"]["score"]["home"] == 2

    response = client.get(f"{match_url}/goals/1")
    assert response.json()["data"]["is_penalty"] is True
    assert response.json()["_links"]["scorer"] == f"/api/v1/players/{scorer}"


def test_removing_goals_lowers_the_score(client, squad, match_url):
    client.post(f"{match_url}/goals", json={"scorer_id": squad["starting"][10], "minute": 12})
    assert client.delete(f"{match_url}/goals/0").status_code == 204
    assert client.get(match_url).json()["data"]["score"]["home"] == 0


def test_goal_by_player_outside_the_squad(client, make_player, match_url):
    outsider = make_player(jersey_number=40)
    response = client.post(f"{match_url}/goals", json={"scorer_id": outsider.id, "minute": 12})
    assert response.status_code == 400
    assert "not in the matchday squad" in response.json()["message"]


def test_goal_before_lineup_is_set(client, make_match, squad):
    match = make_match()
    response = client.post(f"/api/v1/matches/{match.id}/goals", json={"scorer_id": squad["starting"][0], "minute": 5})
    assert response.status_code == 400
    assert "before the starting lineup is set" in response.json()["message"]


def test_replace_goal(client, squad, match_url):
    client.post(f"{match_url}/goals", json={"scorer_id": squad["starting"][10], "minute": 12})
    response = client.put(f"{match_url}/goals/0", json={"scorer_id": squad["starting"][9], "minute": 14})
    assert response.status_code == 200
    assert response.json()["data"]["scorer_id"] == squad["starting"][9]


def test_missing_goal(client, match_url):
    assert client.delete(f"{match_url}/goals/3").status_code == 404
