"""Real Time Messaging session handshakes.

Only the HTTP calls that hand out the websocket URL live here; the websocket
protocol itself is out of this library's scope.
"""

from typing import Literal

from pydantic import ConfigDict, Field

from slack_api.dispatch import Method
from slack_api.errors import ErrorCode, ErrorTaxonomy
from slack_api.models import (
    Bot,
    BoolEncoding,
    Channel,
    Group,
    Im,
    Mpim,
    SlackObject,
    SlackRequest,
    SlackResponse,
    Team,
    User,
)


class RtmError(ErrorCode):
    MIGRATION_IN_PROGRESS = (
        "migration_in_progress",
        "Team is being migrated between servers. See the team_migration_started event "
        "documentation for details.",
    )


ERRORS = ErrorTaxonomy(name="rtm", codes=RtmError)


class ConnectRequest(SlackRequest):
    batch_presence_aware: bool | None = None
    presence_sub: bool | None = None


class ConnectSelf(SlackObject):
    id: str
    name: str


class ConnectTeam(SlackObject):
    domain: str | None = None
    enterprise_id: str | None = None
    enterprise_name: str | None = None
    id: str | None = None
    name: str


class ConnectResponse(SlackResponse):
    self_: ConnectSelf = Field(alias="self")
    team: ConnectTeam
    url: str


class StartRequest(SlackRequest):
    # Skip unread counts for each channel (improves performance).
    no_unreads: bool | None = None
    # Returns MPIMs to the client in the API response.
    mpim_aware: bool | None = None
    # Exclude latest timestamps for channels, groups, mpims, and ims. Implies no_unreads.
    no_latest: bool | None = None
    # Only deliver presence events when requested by subscription.
    batch_presence_aware: bool | None = None
    # Receive the locale for users and channels.
    include_locale: bool | None = None


class StartResponse(SlackResponse):
    """rtm.start returns a large, changing snapshot of the workspace.

    Undeclared keys are kept. ``ok`` must be true, so a failure envelope falls
    through to the error stage instead of decoding as an empty snapshot.
    """

    model_config = ConfigDict(extra="allow")

    ok: Literal[True]
    bots: list[Bot] | None = None
    channels: list[Channel] | None = None
    groups: list[Group] | None = None
    ims: list[Im] | None = None
    mpims: list[Mpim] | None = None
    self_: User | None = Field(default=None, alias="self")
    team: Team | None = None
    url: str | None = None
    users: list[User] | None = None


# Starts a Real Time Messaging session.
connect = Method("rtm.connect", ConnectResponse, ERRORS, ConnectRequest)

# Starts a Real Time Messaging session, returning a snapshot of the workspace.
# Booleans go over the wire as 1/0 for this method.
start = Method("rtm.start", StartResponse, ERRORS, StartRequest, BoolEncoding.NUMERIC)
