"""Get info on members of your Slack team."""

from enum import Enum

from slack_api.codecs import SlackTimestamp
from slack_api.dispatch import Method
from slack_api.errors import ErrorCode, ErrorTaxonomy
from slack_api.models import (
    ChannelId,
    Cursor,
    EmptyResponse,
    ResponseMetadata,
    SlackRecord,
    SlackRequest,
    SlackResponse,
    Team,
    User,
    UserId,
)


class UsersError(ErrorCode):
    USER_NOT_FOUND = ("user_not_found", "Value passed for user was invalid.")
    USER_NOT_VISIBLE = ("user_not_visible", "The requested user is not visible to the calling user.")
    INVALID_CURSOR = ("invalid_cursor", "Value passed for cursor was not valid or is no longer valid.")
    LIMIT_REQUIRED = ("limit_required", "For large teams a limit is required.")
    INVALID_PRESENCE = ("invalid_presence", "Value passed for presence was invalid.")


ERRORS = ErrorTaxonomy(name="users", codes=UsersError)


class Presence(str, Enum):
    AUTO = "auto"
    AWAY = "away"


class GetPresenceRequest(SlackRequest):
    # User to get presence info on. Defaults to the authed user.
    user: UserId


class GetPresenceResponse(SlackResponse):
    presence: str | None = None
    online: bool | None = None
    auto_away: bool | None = None
    manual_away: bool | None = None
    connection_count: int | None = None
    last_activity: SlackTimestamp | None = None


class IdentityResponse(SlackResponse):
    team: Team | None = None
    user: User | None = None


class InfoRequest(SlackRequest):
    # User to get info on
    user: UserId
    include_locale: bool | None = None


class InfoResponse(SlackResponse):
    user: User | None = None


class ListRequest(SlackRequest):
    """Leaving out limit makes Slack try to return the whole member list in one reply."""

    # Whether to include presence data in the output
    presence: bool | None = None
    cursor: Cursor | None = None
    limit: int | None = None
    include_locale: bool | None = None


class ListResponse(SlackResponse):
    members: list[User]
    cache_ts: SlackTimestamp | None = None
    response_metadata: ResponseMetadata | None = None
    is_limited: bool | None = None


class UserPrefs(SlackRecord):
    muted_channels: list[ChannelId]


class PrefsResponse(SlackResponse):
    prefs: UserPrefs


class SetPresenceRequest(SlackRequest):
    presence: Presence


# Delete the user profile photo
delete_photo = Method("users.deletePhoto", EmptyResponse, ERRORS)

# Gets user presence information.
get_presence = Method("users.getPresence", GetPresenceResponse, ERRORS, GetPresenceRequest)

# Get a user's identity.
identity = Method("users.identity", IdentityResponse, ERRORS)

# Gets information about a user.
info = Method("users.info", InfoResponse, ERRORS, InfoRequest)

# Lists all users in a Slack team.
list_ = Method("users.list", ListResponse, ERRORS, ListRequest)

# Gets a user's preferences
prefs_get = Method("users.prefs.get", PrefsResponse, ERRORS)

# Marks a user as active.
set_active = Method("users.setActive", EmptyResponse, ERRORS)

# Manually sets user presence.
set_presence = Method("users.setPresence", EmptyResponse, ERRORS, SetPresenceRequest)
