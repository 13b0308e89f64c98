"""Response Envelopes — pure shape tests for the legacy JSON bodies."""

import json

from bizcard.api.envelope import (
    AUTH_FAILURE_MESSAGES, auth_failure_envelope, auth_failure_response,
    data_envelope, echo_identity, failure_envelope, php_envelope,
)
from bizcard.core.domain_types import AuthFailure
from bizcard.core.id_codec import HashidsIdCodec


def test_php_envelope_flattens_data():
    body = php_envelope({"country_list": []}, message="ok")
    assert body == {"status": True, "rcode": 200, "message": "ok", "country_list": []}


def test_php_envelope_omits_message_when_absent():
    assert php_envelope({"x": 1}) == {"status": True, "rcode": 200, "x": 1}


def test_data_envelope_nests_payload():
    assert data_envelope("Success", {"a": 1}) == {
        "status": True, "message": "Success", "data": {"a": 1},
    }
    assert data_envelope("Logged out")["data"] == {}


def test_failure_envelope_default_rcode():
    assert failure_envelope("nope") == {"status": False, "rcode": 500, "message": "nope"}


def test_every_failure_kind_has_a_message():
    assert set(AUTH_FAILURE_MESSAGES) == set(AuthFailure)


def test_auth_failure_messages():
    assert auth_failure_envelope(AuthFailure.INVALID_USER)["message"] == "Not A Valid User"
    assert auth_failure_envelope(AuthFailure.TOKEN_MISMATCH)["message"] == "Token Mismatch Exception"
    assert auth_failure_envelope(AuthFailure.MISSING_CREDENTIALS)["status"] is False


def test_auth_failure_response_is_http_200():
    for failure in AuthFailure:
        res = auth_failure_response(failure)
        assert res.status_code == 200
        assert json.loads(res.body)["status"] is False


def test_echo_identity_encodes_id():
    codec = HashidsIdCodec("echo-secret")
    echoed = echo_identity(codec, 42, "tok")
    assert echoed == {"user_id": codec.encode(42), "unique_token": "tok"}
    assert echoed["user_id"] != "42"
