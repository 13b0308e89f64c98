"""Master Data Routes — auth interceptor, param merging, and PHP envelope shape.

Invariants tested:
    - Every auth failure kind is HTTP 200 + status false + legacy message
    - user_id/token accepted from query, JSON body, or form body; body wins
    - Echoed user_id is the encoded id, never the numeric key
    - Parent-id parameters validated after auth
"""

import pytest

from tests.api.seed_data import SEEDED_TOKEN


# ─── getCountryList ──────────────────────────────────────────────

async def test_country_list_via_query(client, credentials, seed_places):
    res = await client.get("/api/getCountryList", params=credentials)
    assert res.status_code == 200
    body = res.json()
    assert body["status"] is True
    assert body["rcode"] == 200
    assert body["user_id"] == credentials["user_id"]
    assert body["user_id"] != "42"
    assert body["unique_token"] == SEEDED_TOKEN
    assert body["country_list"] == [
        {"country_id": "1", "country_name": "India"},
        {"country_id": "2", "country_name": "United Arab Emirates"},
    ]


async def test_country_list_via_json_body(client, credentials, seed_places):
    res = await client.post("/api/getCountryList", json=credentials)
    assert res.json()["status"] is True


async def test_country_list_via_form_body(client, credentials, seed_places):
    res = await client.post("/api/getCountryList", data=credentials)
    assert res.json()["status"] is True


async def test_body_overrides_query(client, credentials, seed_places):
    res = await client.post(
        "/api/getCountryList",
        params={"user_id": "garbage-string", "token": "wrong"},
        json=credentials,
    )
    assert res.json()["status"] is True


async def test_query_fills_fields_missing_from_body(client, credentials):
    res = await client.post(
        "/api/getCountryList",
        params={"token": credentials["token"]},
        json={"user_id": credentials["user_id"]},
    )
    assert res.json()["status"] is True


async def test_body_wins_even_when_body_is_wrong(client, credentials):
    res = await client.post(
        "/api/getCountryList", params=credentials, json={"token": "stale"},
    )
    body = res.json()
    assert res.status_code == 200
    assert body == {
        "status": False, "rcode": 500, "message": "Token Mismatch Exception",
    }


async def test_non_object_json_body_is_ignored(client, credentials):
    res = await client.post(
        "/api/getCountryList", params=credentials, json=["not", "an", "object"],
    )
    assert res.json()["status"] is True


@pytest.mark.parametrize("params, message", [
    ({}, "Token Mismatch Exception"),
    ({"token": SEEDED_TOKEN}, "Token Mismatch Exception"),
    ({"user_id": "garbage-string", "token": "anything"}, "Not A Valid User"),
])
async def test_auth_failures_are_200_with_false_status(
    client, seed_user, params, message,
):
    res = await client.get("/api/getCountryList", params=params)
    assert res.status_code == 200
    assert res.json() == {"status": False, "rcode": 500, "message": message}


async def test_unknown_user_is_not_a_valid_user(client, codec, seed_user):
    res = await client.get(
        "/api/getCountryList",
        params={"user_id": codec.encode(999_999), "token": "anything"},
    )
    assert res.status_code == 200
    assert res.json()["message"] == "Not A Valid User"


async def test_token_mismatch_message(client, codec, seed_user):
    res = await client.get(
        "/api/getCountryList",
        params={"user_id": codec.encode(42), "token": "wrong-token"},
    )
    assert res.status_code == 200
    assert res.json()["message"] == "Token Mismatch Exception"


async def test_anonymous_id_not_accepted_on_strict_route(client, seed_user):
    res = await client.get("/api/getCountryList", params={"user_id": "0", "token": ""})
    assert res.json()["status"] is False


# ─── getStateList ────────────────────────────────────────────────

async def test_state_list(client, credentials, seed_places):
    res = await client.get(
        "/api/getStateList", params={**credentials, "country_id": "1"},
    )
    body = res.json()
    assert body["status"] is True
    assert body["state_list"] == [
        {"state_id": "10", "state_name": "Gujarat"},
        {"state_id": "11", "state_name": ""},
    ]


async def test_state_list_requires_country_id(client, credentials):
    res = await client.get("/api/getStateList", params=credentials)
    assert res.status_code == 200
    assert res.json() == {
        "status": False, "rcode": 500, "message": "country_id is required",
    }


@pytest.mark.parametrize("country_id", ["abc", "-1", "\u00b2", "\u0661", "9" * 5000])
async def test_state_list_rejects_non_numeric_country_id(client, credentials, country_id):
    res = await client.get(
        "/api/getStateList", params={**credentials, "country_id": country_id},
    )
    assert res.status_code == 200
    assert res.json()["message"] == "Invalid country_id"


async def test_state_list_auth_checked_before_params(client, seed_user):
    res = await client.get("/api/getStateList", params={"country_id": "1"})
    assert res.json()["message"] == "Token Mismatch Exception"


# ─── getCityList ─────────────────────────────────────────────────

async def test_city_list(client, credentials, seed_places):
    res = await client.post(
        "/api/getCityList", json={**credentials, "state_id": 10},
    )
    body = res.json()
    assert body["status"] is True
    assert body["message"] == "City list retrieved successfully"
    assert body["city_list"] == [
        {"city_id": "100", "city_name": "Ahmedabad"},
        {"city_id": "101", "city_name": "Surat"},
    ]


async def test_city_list_empty_state(client, credentials, seed_places):
    res = await client.get(
        "/api/getCityList", params={**credentials, "state_id": "11"},
    )
    body = res.json()
    assert body["status"] is True
    assert body["message"] == "No cities found for this state"
    assert body["city_list"] == []


async def test_city_list_requires_state_id(client, credentials):
    res = await client.get("/api/getCityList", params=credentials)
    assert res.json()["message"] == "state_id is required"


@pytest.mark.parametrize("state_id", ["x1", "\u00b2", "\u0661", "9" * 5000])
async def test_city_list_rejects_non_numeric_state_id(client, credentials, state_id):
    res = await client.get(
        "/api/getCityList", params={**credentials, "state_id": state_id},
    )
    assert res.status_code == 200
    assert res.json() == {
        "status": False, "rcode": 500, "message": "Invalid state_id",
    }


async def test_lone_surrogate_token_is_token_mismatch(client, credentials):
    raw = '{"user_id": "%s", "token": "\\ud800"}' % credentials["user_id"]
    res = await client.post(
        "/api/getCountryList",
        content=raw.encode("ascii"),
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 200
    assert res.json()["message"] == "Token Mismatch Exception"
