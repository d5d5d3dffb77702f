"""
Generic call dispatch and response decoding.

Every Slack method goes through invoke():

    request record -> build_params() -> transport.send() -> decode_response()

decode_response() cannot know in advance whether Slack answered with the
documented success shape or with an ``{"ok": false, "error": ...}`` envelope,
so it tries the strict success record first and the error envelope second.
"""

from __future__ import annotations

import http.client
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from slack_api import config
from slack_api.errors import COMMON, ErrorTaxonomy
from slack_api.exceptions import MalformedResponse, TransportError, TransportFailure
from slack_api.models import BoolEncoding, EmptyResponse, SlackRequest, SlackResponse
from slack_api.timestamp import Timestamp
from slack_api.transport import _sanitize_error


class ErrorEnvelope(BaseModel):
    """Minimal failure reply. Other envelope keys (ok, needed, provided...) are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    error: str


@dataclass(frozen=True)
class Method:
    """One remote operation: its wire name, records and error table.

    Calling a Method dispatches it through a client:

        info = Method("channels.info", InfoResponse, ERRORS, InfoRequest)
        info(client, InfoRequest(channel="C024BE91L"))
        info(client, channel="C024BE91L")
    """

    name: str
    response: type[SlackResponse] = EmptyResponse
    errors: ErrorTaxonomy = COMMON
    request: type[SlackRequest] | None = None
    bool_encoding: BoolEncoding = BoolEncoding.LITERAL

    def __post_init__(self):
        if not self.name:
            raise ValueError("Method name cannot be empty.")

    @property
    def docs_url(self) -> str:
        return f"https://api.slack.com/methods/{self.name}"

    def __call__(self, client, request=None, **params):
        if params:
            if request is not None:
                raise TypeError(
                    f"{self.name}: pass either a request or keyword parameters, not both"
                )
            if self.request is None:
                raise TypeError(f"{self.name} takes no parameters")
            request = self.request(**params)
        return client.call(self, request)


# ---------------------------------------------------------------------------
# Request encoding
# ---------------------------------------------------------------------------


def _encode_value(value, bool_encoding):
    if isinstance(value, bool):
        return bool_encoding.encode(value)
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, Timestamp):
        return str(value)
    if isinstance(value, (list, tuple)):
        return ",".join(_encode_value(item, bool_encoding) for item in value)
    return str(value)


def _request_items(request):
    if isinstance(request, BaseModel):
        fields = type(request).model_fields
        return [
            (info.serialization_alias or info.alias or name, getattr(request, name))
            for name, info in fields.items()
        ]
    if isinstance(request, Mapping):
        return list(request.items())
    raise TypeError(
        f"Cannot build request parameters from {type(request).__name__}; "
        "expected a request record or a mapping."
    )


def build_params(request, bool_encoding=BoolEncoding.LITERAL) -> list[tuple[str, str]]:
    """Flatten a request into ordered wire parameters.

    Fields whose value is None are left out entirely; they are never sent as
    empty strings.
    """
    if request is None:
        return []
    return [
        (key, _encode_value(value, bool_encoding))
        for key, value in _request_items(request)
        if value is not None
    ]


# ---------------------------------------------------------------------------
# Response decoding
# ---------------------------------------------------------------------------


def _describe_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        loc = ".".join(str(p) for p in item.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {item.get('msg', '')}")
    return f"{error.error_count()} error(s) decoding {error.title}: " + "; ".join(parts)


def decode_response(
    raw, response: type[SlackResponse], errors: ErrorTaxonomy = COMMON, *, method=None
) -> Any:
    """Turn a raw reply into *response*, or raise the matching SlackError.

    1. strict decode as *response* -> return it
    2. decode as ``{"error": str}`` -> raise KnownError / UnknownError
    3. neither -> raise MalformedResponse with the first stage's diagnostic
    """
    try:
        return response.model_validate_json(raw)
    except ValidationError as success_error:
        try:
            envelope = ErrorEnvelope.model_validate_json(raw)
        except ValidationError:
            text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else str(raw)
            raise MalformedResponse(
                _describe_validation_error(success_error),
                body=_sanitize_error(text),
                method=method,
            ) from success_error
    raise errors.classify(envelope.error, method=method)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def method_url(name, base_url=None):
    base = base_url or config.BASE_URL
    if not base.endswith("/"):
        base += "/"
    return base + name


def invoke(transport, token, method: Method, request=None, *, base_url=None) -> Any:
    """Call *method* once and return its decoded response record.

    Raises TransportFailure when the transport fails (nothing is decoded),
    otherwise whatever decode_response() raises.
    """
    params = build_params(request, method.bool_encoding)
    if token:
        params.insert(0, ("token", token))
    try:
        raw = transport.send(method_url(method.name, base_url), params)
    except (TransportError, OSError, http.client.HTTPException) as e:
        raise TransportFailure(e, method=method.name) from e
    return decode_response(raw, method.response, method.errors, method=method.name)
