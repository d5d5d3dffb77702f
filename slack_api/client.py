"""
SlackClient: the token and transport every call shares.

A client is immutable and holds no per-call state, so one instance can be
used from any number of threads at once.
"""

from __future__ import annotations

from typing import Any

from slack_api import config
from slack_api.dispatch import Method, invoke
from slack_api.exceptions import SetupError
from slack_api.transport import Transport, _mask_token, default_transport


class SlackClient:
    """Public entry point for calling Slack Web API methods.

    Every method in ``slack_api.methods`` is a Method value that takes the
    client as its first argument:

        client = SlackClient("xoxb-...")
        channels.history(client, channel="C024BE91L")

    or, equivalently, ``client.call(channels.history, request)``.
    """

    __slots__ = ("_token", "_transport", "_base_url")

    def __init__(
        self, token: str, *, transport: Transport | None = None, base_url: str | None = None
    ):
        """Initialize the client.

        Args:
            token: Slack bearer token, sent as the ``token`` parameter.
            transport: Anything with ``send(url, params) -> bytes``.
                Defaults to a urllib transport configured from config.
            base_url: Method URL prefix. Defaults to config.BASE_URL.
        """
        object.__setattr__(self, "_token", token)
        object.__setattr__(self, "_transport", transport or default_transport())
        object.__setattr__(self, "_base_url", base_url)

    def __setattr__(self, name, value):
        raise AttributeError("SlackClient is immutable")

    def __repr__(self):
        return f"SlackClient(token={_mask_token(self._token)!r}, transport={self._transport!r})"

    @classmethod
    def from_env(cls, *, transport: Transport | None = None) -> SlackClient:
        """Build a client from SLACK_API_TOKEN in .env or the environment."""
        if not config.API_TOKEN:
            raise SetupError(
                "No Slack token configured. Set SLACK_API_TOKEN in .env or the environment."
            )
        return cls(config.API_TOKEN, transport=transport)

    @property
    def token(self) -> str:
        return self._token

    @property
    def transport(self) -> Transport:
        return self._transport

    def call(self, method: Method, request: Any = None) -> Any:
        """Invoke *method* with *request* and return the decoded response record."""
        return invoke(self._transport, self._token, method, request, base_url=self._base_url)
