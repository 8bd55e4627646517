import json

import pytest
from googleapiclient.http import HttpMockSequence

ENV_VARS = [
    "GOOGLE_CREDENTIALS",
    "GOOGLE_CLOUD_KEYFILE_JSON",
    "GOOGLE_KEYFILE_JSON",
    "GOOGLE_OAUTH_ACCESS_TOKEN",
    "GOOGLE_OAUTH_SCOPES",
    "GOOGLE_APPLICATION_CREDENTIALS",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without any credential-related environment."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def authorized_user_json():
    """Authorized-user credentials; parsing them needs no private key."""
    return json.dumps({
        "type": "authorized_user",
        "client_id": "client-id.apps.googleusercontent.com",
        "client_secret": "client-secret",
        "refresh_token": "refresh-token",
    })


def ok(body="{}"):
    return ({"status": "200"}, body.encode("utf-8"))


def forbidden(message="The caller does not have permission"):
    body = json.dumps({"error": {"code": 403, "message": message, "status": "PERMISSION_DENIED"}})
    return ({"status": "403"}, body.encode("utf-8"))


@pytest.fixture
def http_sequence():
    """Build a mock transport that replays the given responses in order."""
    return lambda responses: HttpMockSequence(list(responses))
