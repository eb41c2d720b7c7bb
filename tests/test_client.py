"""Tests for the Slack HTTP transport."""

from __future__ import annotations

import httpx
import pytest

from slackstatus.client import PRESENCE_METHOD, PROFILE_METHOD, SlackClient
from slackstatus.errors import RemoteRejection, TransportError
from slackstatus.models import Workspace

from conftest import Recorder


ACME = Workspace("acme", "T")


def test_send_request_posts_json_with_bearer(client, recorder):
    client.send_request({"presence": "away"}, PRESENCE_METHOD, ACME)

    (request,) = recorder.requests
    assert request.method == "POST"
    assert str(request.url) == "https://slack.com/api/users.setPresence"
    assert request.headers["content-type"] == "application/json; charset=UTF-8"
    assert request.headers["Authorization"] == "Bearer T"
    assert recorder.calls[0][3] == {"presence": "away"}


def test_http_error_status_is_still_transport_success():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="upstream sad")

    client = SlackClient(transport=httpx.MockTransport(handler))
    try:
        response = client.send_request({}, PROFILE_METHOD, ACME)
    finally:
        client.close()

    assert response.status_code == 500


def test_network_failure_raises_transport_error():
    recorder = Recorder()
    recorder.fail_after = 0
    client = SlackClient(transport=httpx.MockTransport(recorder.handler))

    with pytest.raises(TransportError, match="users.profile.set"):
        client.send_request({}, PROFILE_METHOD, ACME)
    client.close()


def test_ok_false_raises_remote_rejection():
    recorder = Recorder(body={"ok": False, "error": "invalid_auth"})
    client = SlackClient(transport=httpx.MockTransport(recorder.handler))

    with pytest.raises(RemoteRejection) as excinfo:
        client.send_request({}, PRESENCE_METHOD, ACME)
    client.close()

    assert excinfo.value.method == "users.setPresence"
    assert excinfo.value.error == "invalid_auth"
    assert excinfo.value.workspace == "acme"
    assert len(recorder.requests) == 1


def test_non_json_body_is_success():
    recorder = Recorder(body="not json")
    client = SlackClient(transport=httpx.MockTransport(recorder.handler))

    response = client.send_request({}, PRESENCE_METHOD, ACME)
    client.close()

    assert response.text == "not json"


def test_auth_test_returns_raw_body():
    recorder = Recorder(body='{"ok":true,"user":"me"}')
    client = SlackClient(transport=httpx.MockTransport(recorder.handler))

    body = client.auth_test(ACME)
    client.close()

    assert body == '{"ok":true,"user":"me"}'
    (request,) = recorder.requests
    assert request.method == "GET"
    assert request.url.path == "/api/auth.test"
    assert request.headers["Authorization"] == "Bearer T"


def test_non_ascii_token_raises_transport_error(client, recorder):
    workspace = Workspace("acme", "xoxp-’bad")

    with pytest.raises(TransportError, match="non-ASCII"):
        client.send_request({"presence": "away"}, PRESENCE_METHOD, workspace)

    assert recorder.requests == []


def test_auth_test_non_ascii_token_raises_transport_error(client, recorder):
    with pytest.raises(TransportError, match="acme"):
        client.auth_test(Workspace("acme", "té"))

    assert recorder.requests == []
