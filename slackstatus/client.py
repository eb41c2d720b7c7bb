"""HTTP client wrapper around the Slack Web API methods slackstatus uses."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from slackstatus.config import DEFAULT_TIMEOUT_SECONDS
from slackstatus.errors import RemoteRejection, TransportError
from slackstatus.models import Workspace


logger = logging.getLogger(__name__)

API_BASE = "https://slack.com/api"
PRESENCE_METHOD = "/users.setPresence"
PROFILE_METHOD = "/users.profile.set"
AUTH_TEST_METHOD = "/auth.test"


class SlackClient:
    """Small synchronous Slack Web API client.

    One client serves every workspace; the bearer token is attached per
    request. There are no retries.
    """

    def __init__(
        self,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._http = httpx.Client(
            base_url=API_BASE,
            timeout=timeout_seconds,
            transport=transport,
        )

    def close(self) -> None:
        self._http.close()

    def send_request(
        self, payload: dict[str, Any], method: str, workspace: Workspace
    ) -> httpx.Response:
        """POST ``payload`` as JSON to ``method`` on behalf of ``workspace``.

        Any received response counts as success. A JSON body with ``ok: false``
        raises RemoteRejection after the request has completed.
        """

        body = json.dumps(payload)
        logger.debug("POST %s for %s: %s", method, workspace.short_name, body)
        response = self._request(
            "POST",
            method,
            workspace,
            content_type="application/json; charset=UTF-8",
            content=body,
        )

        logger.debug(
            "%s for %s -> HTTP %s", method, workspace.short_name, response.status_code
        )
        _check_remote(response, method, workspace)
        return response

    def auth_test(self, workspace: Workspace) -> str:
        """GET auth.test with the workspace token and return the raw body."""

        response = self._request(
            "GET", AUTH_TEST_METHOD, workspace, content_type="application/json"
        )
        return response.text

    def _request(
        self,
        http_method: str,
        method: str,
        workspace: Workspace,
        *,
        content_type: str,
        content: str | None = None,
    ) -> httpx.Response:
        headers = {
            "content-type": content_type,
            "Authorization": f"Bearer {workspace.token}",
        }
        try:
            return self._http.request(
                http_method, method, content=content, headers=headers
            )
        except UnicodeEncodeError as exc:
            # Header values must be ASCII.
            raise TransportError(
                f"Cannot build Slack API request {method} for "
                f"{workspace.short_name}: token contains non-ASCII characters"
            ) from exc
        except httpx.RequestError as exc:
            raise TransportError(
                f"Network error calling Slack API {method} "
                f"for {workspace.short_name}: {exc}"
            ) from exc


def _check_remote(response: httpx.Response, method: str, workspace: Workspace) -> None:
    try:
        data = response.json()
    except ValueError:
        return
    if isinstance(data, dict) and data.get("ok") is False:
        raise RemoteRejection(
            method.lstrip("/"),
            str(data.get("error") or "unknown_error"),
            workspace.short_name,
        )
