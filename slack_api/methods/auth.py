"""Checks authentication and revokes tokens."""

from slack_api.dispatch import Method
from slack_api.errors import COMMON
from slack_api.models import AppId, SlackRequest, SlackResponse, TeamId, UserId


class RevokeRequest(SlackRequest):
    # Setting this triggers a testing mode where the token is not actually revoked.
    test: bool | None = None


class RevokeResponse(SlackResponse):
    revoked: bool


class TestResponse(SlackResponse):
    team: str
    team_id: TeamId
    url: str
    user: str
    user_id: UserId
    bot_id: str | None = None
    app_id: AppId | None = None
    enterprise_id: str | None = None
    is_enterprise_install: bool | None = None


# Revokes a token.
revoke = Method("auth.revoke", RevokeResponse, COMMON, RevokeRequest)

# Checks authentication & identity.
test = Method("auth.test", TestResponse, COMMON)
