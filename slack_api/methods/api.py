"""Checks API calling code."""

from pydantic import Field

from slack_api.dispatch import Method
from slack_api.errors import COMMON
from slack_api.models import SlackRequest, SlackResponse


class TestRequest(SlackRequest):
    # Error response to return
    error: str | None = None
    # example property to return
    foo: str | None = None


class TestResponse(SlackResponse):
    args: dict[str, str] = Field(default_factory=dict)


# Checks API calling code.
test = Method("api.test", TestResponse, COMMON, TestRequest)
