"""Get info on your team's Slack channels, create or archive channels, invite users,
set the topic and purpose, and mark a channel as read."""

from pydantic import Field

from slack_api.codecs import SlackTimestamp
from slack_api.dispatch import Method
from slack_api.errors import ErrorCode, ErrorTaxonomy
from slack_api.models import (
    Channel,
    ChannelId,
    Cursor,
    EmptyResponse,
    Message,
    ResponseMetadata,
    SlackRequest,
    SlackResponse,
    UserId,
)


class ChannelsError(ErrorCode):
    CHANNEL_NOT_FOUND = ("channel_not_found", "Value passed for channel was invalid.")
    ALREADY_ARCHIVED = ("already_archived", "Channel has already been archived.")
    NOT_ARCHIVED = ("not_archived", "Channel is not archived.")
    CANT_ARCHIVE_GENERAL = ("cant_archive_general", "You cannot archive the general channel.")
    RESTRICTED_ACTION = ("restricted_action", "A team preference prevents the authenticated user from performing this action.")
    NOT_AUTHORIZED = ("not_authorized", "Caller cannot perform this action on the channel.")
    USER_IS_BOT = ("user_is_bot", "This method cannot be called by a bot user.")
    USER_IS_RESTRICTED = ("user_is_restricted", "This method cannot be called by a restricted user or single channel guest.")
    USER_IS_ULTRA_RESTRICTED = ("user_is_ultra_restricted", "This method cannot be called by a single channel guest.")
    NAME_TAKEN = ("name_taken", "A channel cannot be created with the given name.")
    NO_CHANNEL = ("no_channel", "Value passed for name was empty.")
    INVALID_NAME = ("invalid_name", "Value passed for name was invalid.")
    INVALID_NAME_REQUIRED = ("invalid_name_required", "Value passed for name was empty.")
    INVALID_NAME_PUNCTUATION = ("invalid_name_punctuation", "Value passed for name contained only punctuation.")
    INVALID_NAME_MAXLENGTH = ("invalid_name_maxlength", "Value passed for name exceeded max length.")
    INVALID_NAME_SPECIALS = ("invalid_name_specials", "Value passed for name contained unallowed special characters or upper case characters.")
    INVALID_CURSOR = ("invalid_cursor", "Value passed for cursor was not valid or is no longer valid.")
    INVALID_TS_LATEST = ("invalid_ts_latest", "Value passed for latest was invalid.")
    INVALID_TS_OLDEST = ("invalid_ts_oldest", "Value passed for oldest was invalid.")
    INVALID_TIMESTAMP = ("invalid_timestamp", "Value passed for timestamp was invalid.")
    USER_NOT_FOUND = ("user_not_found", "Value passed for user was invalid.")
    CANT_INVITE_SELF = ("cant_invite_self", "Authenticated user cannot invite themselves to a channel.")
    CANT_INVITE = ("cant_invite", "User cannot be invited to this channel.")
    NOT_IN_CHANNEL = ("not_in_channel", "User was not in the channel.")
    ALREADY_IN_CHANNEL = ("already_in_channel", "Invited user is already in the channel.")
    IS_ARCHIVED = ("is_archived", "Channel has been archived.")
    URA_MAX_CHANNELS = ("ura_max_channels", "URA is already in the maximum number of channels.")
    CANT_KICK_SELF = ("cant_kick_self", "Authenticated user can't kick themselves from a channel.")
    CANT_KICK_FROM_GENERAL = ("cant_kick_from_general", "User cannot be removed from #general.")
    CANT_KICK_FROM_LAST_CHANNEL = ("cant_kick_from_last_channel", "User cannot be removed from the last channel they're in.")
    CANT_LEAVE_GENERAL = ("cant_leave_general", "Authenticated user cannot leave the general channel.")
    THREAD_NOT_FOUND = ("thread_not_found", "Value for thread_ts was missing or invalid.")
    TOO_LONG = ("too_long", "Purpose or topic was longer than 250 characters.")
    METHOD_DEPRECATED = ("method_deprecated", "The method has been deprecated.")


ERRORS = ErrorTaxonomy(name="channels", codes=ChannelsError)


class ChannelRequest(SlackRequest):
    # Channel to act on
    channel: ChannelId


class ArchiveRequest(ChannelRequest):
    pass


class UnarchiveRequest(ChannelRequest):
    pass


class LeaveRequest(ChannelRequest):
    pass


class CreateRequest(SlackRequest):
    # Name of channel to create
    name: str
    # Return errors on invalid channel name instead of modifying it to meet the criteria.
    validate_name: bool | None = Field(default=None, alias="validate")


class ChannelResponse(SlackResponse):
    channel: Channel


class HistoryRequest(SlackRequest):
    channel: ChannelId
    # End of time range of messages to include in results.
    latest: SlackTimestamp | None = None
    # Start of time range of messages to include in results.
    oldest: SlackTimestamp | None = None
    # Include messages with latest or oldest timestamp in results.
    inclusive: bool | None = None
    # Number of messages to return, between 1 and 1000.
    count: int | None = None
    # Include unread_count_display in the output?
    unreads: bool | None = None


class HistoryResponse(SlackResponse):
    has_more: bool | None = None
    latest: SlackTimestamp | None = None
    messages: list[Message]
    is_limited: bool | None = None
    unread_count_display: int | None = None
    channel_actions_ts: SlackTimestamp | None = None
    channel_actions_count: int | None = None
    pin_count: int | None = None


class InfoRequest(ChannelRequest):
    include_locale: bool | None = None


class InviteRequest(ChannelRequest):
    # User to invite to channel.
    user: UserId


class KickRequest(ChannelRequest):
    # User to remove from channel.
    user: UserId


class JoinRequest(SlackRequest):
    # Name of channel to join
    name: str
    validate_name: bool | None = Field(default=None, alias="validate")


class JoinResponse(SlackResponse):
    # Slack sends a shorter channel object when already_in_channel is true.
    channel: Channel
    already_in_channel: bool | None = None


class LeaveResponse(SlackResponse):
    not_in_channel: bool | None = None


class ListRequest(SlackRequest):
    # Exclude archived channels from the list
    exclude_archived: bool | None = None
    # Exclude the members collection from each channel
    exclude_members: bool | None = None
    cursor: Cursor | None = None
    limit: int | None = None


class ListResponse(SlackResponse):
    channels: list[Channel]
    response_metadata: ResponseMetadata | None = None


class MarkRequest(ChannelRequest):
    # Timestamp of the most recently seen message.
    ts: SlackTimestamp


class RenameRequest(ChannelRequest):
    # New name for channel.
    name: str
    validate_name: bool | None = Field(default=None, alias="validate")


class RepliesRequest(ChannelRequest):
    # Unique identifier of a thread's parent message
    thread_ts: SlackTimestamp


class RepliesResponse(SlackResponse):
    has_more: bool
    messages: list[Message]


class SetPurposeRequest(ChannelRequest):
    purpose: str


class SetPurposeResponse(SlackResponse):
    purpose: str


class SetTopicRequest(ChannelRequest):
    topic: str


class SetTopicResponse(SlackResponse):
    topic: str


# Archives a channel.
archive = Method("channels.archive", EmptyResponse, ERRORS, ArchiveRequest)

# Creates a channel.
create = Method("channels.create", ChannelResponse, ERRORS, CreateRequest)

# Fetches history of messages and events from a channel.
history = Method("channels.history", HistoryResponse, ERRORS, HistoryRequest)

# Gets information about a channel.
info = Method("channels.info", ChannelResponse, ERRORS, InfoRequest)

# Invites a user to a channel.
invite = Method("channels.invite", ChannelResponse, ERRORS, InviteRequest)

# Joins a channel, creating it if needed.
join = Method("channels.join", JoinResponse, ERRORS, JoinRequest)

# Removes a user from a channel.
kick = Method("channels.kick", EmptyResponse, ERRORS, KickRequest)

# Leaves a channel.
leave = Method("channels.leave", LeaveResponse, ERRORS, LeaveRequest)

# Lists all channels in a Slack team.
list_ = Method("channels.list", ListResponse, ERRORS, ListRequest)

# Sets the read cursor in a channel.
mark = Method("channels.mark", EmptyResponse, ERRORS, MarkRequest)

# Renames a channel.
rename = Method("channels.rename", ChannelResponse, ERRORS, RenameRequest)

# Retrieve a thread of messages posted to a channel
replies = Method("channels.replies", RepliesResponse, ERRORS, RepliesRequest)

# Sets the purpose for a channel.
set_purpose = Method("channels.setPurpose", SetPurposeResponse, ERRORS, SetPurposeRequest)

# Sets the topic for a channel.
set_topic = Method("channels.setTopic", SetTopicResponse, ERRORS, SetTopicRequest)

# Unarchives a channel.
unarchive = Method("channels.unarchive", EmptyResponse, ERRORS, UnarchiveRequest)
