"""REST tests for player sub-resources, player deletes and contract bonuses."""

from datetime import date

from tests.conftest import player_payload


def test_player_stats_sub_resource(client, make_player_stats):
    stats = make_player_stats(appearances=38)
    player_id = client.post("/api/v1/players", json=player_payload(11, stats_id=stats.id)).json()["data"]["id"]

    response = client.get(f"/api/v1/players/{player_id}/stats")
    assert response.status_code == 200
    assert response.headers["X-Resource-Type"] == "PlayerStats"
    body = response.json()
    assert body["data"]["appearances"] == 38
    assert body["data"]["goals"]["total"] == 4
    assert body["_links"]["player"] == f"/api/v1/players/{player_id}"


def test_player_without_stats(client):
    player_id = client.post("/api/v1/players", json=player_payload(11)).json()["data"]["id"]
    response = client.get(f"/api/v1/players/{player_id}/stats")
    assert response.status_code == 404
    assert response.json()["error"] == "Player stats not found"


def test_stats_of_missing_player(client):
    response = client.get("/api/v1/players/99/stats")
    assert response.status_code == 404
    assert response.json()["error"] == "Player not found"


def test_player_contract_sub_resource(client, make_contract):
    contract = make_contract()
    payload = player_payload(11, current_contract_id=contract.id, contract_history_ids=[contract.id])
    player = client.post("/api/v1/players", json=payload).json()["data"]
    assert player["_links"]["current_contract"] == f"/api/v1/contracts/{contract.id}"

    response = client.get(f"/api/v1/players/{player['id']}/contract")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["salary"] == {"base": 18200000, "currency": "GBP"}
    assert data["bonuses"] == [{"type": "GOAL", "amount": 50000}]


def test_player_without_contract(client):
    player_id = client.post("/api/v1/players", json=player_payload(11)).json()["data"]["id"]
    response = client.get(f"/api/v1/players/{player_id}/contract")
    assert response.status_code == 404
    assert response.json()["error"] == "Contract not found"


def test_player_with_unknown_contract(client):
    response = client.post("/api/v1/players", json=player_payload(11, current_contract_id=404))
    assert response.status_code == 400
    assert response.json()["message"] == "current_contract_id 404 does not exist"


def test_deleting_current_contract_is_a_conflict(client, make_contract):
    contract = make_contract()
    client.post("/api/v1/players", json=player_payload(11, current_contract_id=contract.id))
    assert client.delete(f"/api/v1/contracts/{contract.id}").status_code == 409


def test_market_value_defaults_to_today(client):
    payload = player_payload(11, market_value={"value": 85000000, "currency": "GBP"})
    response = client.post("/api/v1/players", json=payload)
    assert response.status_code == 201
    assert response.json()["data"]["market_value"] == {
        "value": 85000000,
        "currency": "GBP",
        "date": date.today().isoformat(),
    }


# ========== DELETING PLAYERS ==========


def test_deleting_a_lineup_player_is_a_conflict(client, squad, match_with_lineup):
    starter = squad["starting"][0]
    response = client.delete(f"/api/v1/players/{starter}")
    assert response.status_code == 409
    assert response.json()["message"] == f"Player {starter} is still referenced by match {match_with_lineup.id}"

    # The match stays editable
    response = client.patch(f"/api/v1/matches/{match_with_lineup.id}", json={"opponent": {"name": "Chelsea"}})
    assert response.status_code == 200
    assert response.json()["data"]["opponent"]["name"] == "Chelsea"


def test_deleting_a_bench_player_is_a_conflict(client, squad, match_with_lineup):
    response = client.delete(f"/api/v1/players/{squad['substitutes'][-1]}")
    assert response.status_code == 409


def test_deleting_a_player_outside_every_matchday_squad(client, squad, match_with_lineup, make_player):
    player = make_player(jersey_number=40)
    assert client.delete(f"/api/v1/players/{player.id}").status_code == 204
    assert client.get(f"/api/v1/players/{player.id}").status_code == 404


# ========== CONTRACT BONUSES ==========


def test_list_and_get_bonuses(client, make_contract):
    contract = make_contract(bonuses=[{"type": "GOAL", "amount": 50000}, {"type": "ASSIST", "amount": 25000}])
    response = client.get(f"/api/v1/contracts/{contract.id}/bonuses")
    assert response.status_code == 200
    assert [bonus["type"] for bonus in response.json()["data"]] == ["GOAL", "ASSIST"]

    response = client.get(f"/api/v1/contracts/{contract.id}/bonuses/1")
    assert response.json()["data"] == {"type": "ASSIST", "amount": 25000}
    assert response.json()["_links"]["contract"] == f"/api/v1/contracts/{contract.id}"


def test_add_bonus(client, make_contract):
    contract = make_contract()
    response = client.post(f"/api/v1/contracts/{contract.id}/bonuses", json={"type": "CLEAN_SHEET", "amount": 10000})
    assert response.status_code == 201
    assert response.headers["Location"] == f"/api/v1/contracts/{contract.id}/bonuses/1"
    assert len(client.get(f"/api/v1/contracts/{contract.id}/bonuses").json()["data"]) == 2


def test_add_invalid_bonus(client, make_contract):
    contract = make_contract()
    response = client.post(f"/api/v1/contracts/{contract.id}/bonuses", json={"type": "GOAL", "amount": -5})
    assert response.status_code == 400


def test_replace_bonus(client, make_contract):
    contract = make_contract()
    response = client.put(f"/api/v1/contracts/{contract.id}/bonuses/0", json={"type": "GOAL", "amount": 75000})
    assert response.status_code == 200
    assert response.json()["data"]["amount"] == 75000


def test_remove_bonus_shifts_later_ones(client, make_contract):
    contract = make_contract(bonuses=[{"type": "GOAL", "amount": 50000}, {"type": "ASSIST", "amount": 25000}])
    assert client.delete(f"/api/v1/contracts/{contract.id}/bonuses/0").status_code == 204
    response = client.get(f"/api/v1/contracts/{contract.id}/bonuses/0")
    assert response.json()["data"]["type"] == "ASSIST"


def test_bonus_index_out_of_range(client, make_contract):
    contract = make_contract()
    response = client.get(f"/api/v1/contracts/{contract.id}/bonuses/3")
    assert response.status_code == 404
    assert response.json()["error"] == "Bonus not found"
