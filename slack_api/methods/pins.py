"""Pin and unpin messages, files and file comments in a channel."""

from slack_api.codecs import SlackTimestamp
from slack_api.dispatch import Method
from slack_api.errors import ErrorCode, ErrorTaxonomy
from slack_api.models import (
    ChannelId,
    EmptyResponse,
    FileId,
    PinnedItem,
    SlackRequest,
    SlackResponse,
)


class PinsError(ErrorCode):
    BAD_TIMESTAMP = ("bad_timestamp", "Value passed for timestamp was invalid.")
    CHANNEL_NOT_FOUND = ("channel_not_found", "The channel argument was not specified or was invalid.")
    FILE_NOT_FOUND = ("file_not_found", "File specified by file does not exist.")
    FILE_COMMENT_NOT_FOUND = ("file_comment_not_found", "File comment specified by file_comment does not exist.")
    MESSAGE_NOT_FOUND = ("message_not_found", "Message specified by channel and timestamp does not exist.")
    NO_ITEM_SPECIFIED = ("no_item_specified", "One of file, file_comment, or timestamp was not specified.")
    ALREADY_PINNED = ("already_pinned", "The specified item is already pinned to the channel.")
    NOT_PINNED = ("not_pinned", "The specified item is not pinned to the channel.")
    NOT_PINNABLE = ("not_pinnable", "The item cannot be pinned.")
    PERMISSION_DENIED = ("permission_denied", "The user does not have permission to add pins to the channel.")
    FILE_NOT_SHARED = ("file_not_shared", "File specified by file is not public nor shared to the channel.")
    IS_ARCHIVED = ("is_archived", "Channel has been archived.")


ERRORS = ErrorTaxonomy(name="pins", codes=PinsError)


class PinRequest(SlackRequest):
    # Channel to pin the item in / where the item is pinned.
    channel: ChannelId
    file: FileId | None = None
    file_comment: str | None = None
    # Timestamp of the message to pin.
    timestamp: SlackTimestamp | None = None


class AddRequest(PinRequest):
    pass


class RemoveRequest(PinRequest):
    pass


class ListRequest(SlackRequest):
    # Channel to get pinned items for.
    channel: ChannelId


class ListResponse(SlackResponse):
    items: list[PinnedItem] | None = None


# Pins an item to a channel.
add = Method("pins.add", EmptyResponse, ERRORS, AddRequest)

# Lists items pinned to a channel.
list_ = Method("pins.list", ListResponse, ERRORS, ListRequest)

# Un-pins an item from a channel.
remove = Method("pins.remove", EmptyResponse, ERRORS, RemoveRequest)
