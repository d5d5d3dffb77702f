"""slack-api: typed client binding for the Slack Web API."""

from slack_api.client import SlackClient
from slack_api.config import VERSION
from slack_api.dispatch import Method, build_params, decode_response, invoke
from slack_api.errors import CommonError, ErrorCode, ErrorTaxonomy
from slack_api.exceptions import (
    HTTPError,
    KnownError,
    MalformedResponse,
    SetupError,
    SlackError,
    TimestampError,
    TransportError,
    TransportFailure,
    UnknownError,
)
from slack_api.methods import api, auth, channels, pins, rtm, team, usergroups_users, users
from slack_api.models import BoolEncoding
from slack_api.timestamp import Timestamp
from slack_api.transport import Transport, UrllibTransport

__all__ = [
    "VERSION",
    "SlackClient",
    "Method",
    "build_params",
    "decode_response",
    "invoke",
    "BoolEncoding",
    "CommonError",
    "ErrorCode",
    "ErrorTaxonomy",
    "HTTPError",
    "KnownError",
    "MalformedResponse",
    "SetupError",
    "SlackError",
    "TimestampError",
    "TransportError",
    "TransportFailure",
    "UnknownError",
    "Timestamp",
    "Transport",
    "UrllibTransport",
    "api",
    "auth",
    "channels",
    "pins",
    "rtm",
    "team",
    "usergroups_users",
    "users",
]
