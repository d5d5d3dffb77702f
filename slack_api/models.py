"""
Typed records shared by the method families.

Four bases:

- SlackRequest: parameters of one call. Frozen; unknown keyword arguments are
  rejected so a misspelt parameter never goes missing silently.
- SlackResponse: the success reply of one call. Strict: a field the record does
  not declare makes decoding fail, which is what lets the dispatcher tell a
  success reply from an error envelope.
- SlackRecord: strict nested records, e.g. the pinned-item variants.
- SlackObject: Slack's own entities (channels, users, messages...). These grow
  new fields all the time, so extra keys are kept rather than rejected.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel

from slack_api.codecs import SlackTimestamp, struct_or_empty

ChannelId = str
UserId = str
TeamId = str
FileId = str
AppId = str
BotId = str
UsergroupId = str
Cursor = str


class SlackRequest(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class SlackRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class SlackResponse(SlackRecord):
    ok: bool | None = None
    warning: str | None = None


class SlackObject(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)


class EmptyResponse(SlackResponse):
    """Acknowledgement-only reply, ``{"ok": true}``."""


class BoolEncoding(str, Enum):
    """How a method expects boolean parameters on the wire."""

    LITERAL = "literal"  # true / false
    NUMERIC = "numeric"  # 1 / 0

    def encode(self, value: bool) -> str:
        if self is BoolEncoding.NUMERIC:
            return "1" if value else "0"
        return "true" if value else "false"


# ---------------------------------------------------------------------------
# Paging
# ---------------------------------------------------------------------------


class ResponseMetadata(SlackObject):
    next_cursor: Cursor | None = None
    warnings: list[str] | None = None


class Paging(SlackObject):
    count: int | None = None
    page: int | None = None
    pages: int | None = None
    total: int | None = None
    per_page: int | None = None
    spill: int | None = None


# ---------------------------------------------------------------------------
# Channels and conversations
# ---------------------------------------------------------------------------


class ChannelTopic(SlackObject):
    value: str = ""
    creator: UserId | None = None
    last_set: int | None = None


class Channel(SlackObject):
    id: ChannelId
    name: str | None = None
    created: SlackTimestamp | None = None
    creator: UserId | None = None
    is_archived: bool | None = None
    is_channel: bool | None = None
    is_general: bool | None = None
    is_member: bool | None = None
    is_private: bool | None = None
    members: list[UserId] | None = None
    num_members: int | None = None
    topic: ChannelTopic | None = None
    purpose: ChannelTopic | None = None
    last_read: SlackTimestamp | None = None
    unread_count: int | None = None
    unread_count_display: int | None = None
    locale: str | None = None


class Group(Channel):
    is_group: bool | None = None
    is_mpim: bool | None = None


class Mpim(Group):
    pass


class Im(SlackObject):
    id: ChannelId
    user: UserId | None = None
    created: SlackTimestamp | None = None
    is_im: bool | None = None
    is_org_shared: bool | None = None
    is_user_deleted: bool | None = None


# ---------------------------------------------------------------------------
# Messages and files
# ---------------------------------------------------------------------------


class Reaction(SlackObject):
    name: str
    count: int | None = None
    users: list[UserId] | None = None


class Message(SlackObject):
    type: str | None = None
    subtype: str | None = None
    ts: SlackTimestamp | None = None
    user: UserId | None = None
    bot_id: BotId | None = None
    text: str | None = None
    thread_ts: SlackTimestamp | None = None
    reply_count: int | None = None
    reactions: list[Reaction] | None = None
    edited: dict | None = None


class File(SlackObject):
    id: FileId
    name: str | None = None
    title: str | None = None
    created: SlackTimestamp | None = None
    user: UserId | None = None
    mimetype: str | None = None
    filetype: str | None = None
    size: int | None = None
    url_private: str | None = None
    permalink: str | None = None


class FileComment(SlackObject):
    id: str
    comment: str | None = None
    created: SlackTimestamp | None = None
    timestamp: SlackTimestamp | None = None
    user: UserId | None = None


# ---------------------------------------------------------------------------
# Users and teams
# ---------------------------------------------------------------------------


class UserProfileField(SlackObject):
    value: str | None = None
    alt: str | None = None
    label: str | None = None


class UserProfileFields(RootModel[dict[str, UserProfileField]]):
    """Custom profile fields keyed by field id. Slack sends ``[]`` when there are none."""

    @classmethod
    def empty(cls):
        return cls({})

    def __getitem__(self, key):
        return self.root[key]

    def __len__(self):
        return len(self.root)

    def __contains__(self, key):
        return key in self.root


ProfileFieldsOrEmpty = struct_or_empty(UserProfileFields)


class UserProfile(SlackObject):
    real_name: str | None = None
    display_name: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    title: str | None = None
    status_text: str | None = None
    status_emoji: str | None = None
    image_48: str | None = None
    image_192: str | None = None
    fields: ProfileFieldsOrEmpty = None


class User(SlackObject):
    id: UserId
    name: str | None = None
    team_id: TeamId | None = None
    deleted: bool | None = None
    real_name: str | None = None
    tz: str | None = None
    is_admin: bool | None = None
    is_owner: bool | None = None
    is_bot: bool | None = None
    presence: str | None = None
    locale: str | None = None
    updated: SlackTimestamp | None = None
    profile: UserProfile | None = None


class TeamIcon(SlackObject):
    image_34: str | None = None
    image_44: str | None = None
    image_68: str | None = None
    image_88: str | None = None
    image_102: str | None = None
    image_132: str | None = None
    image_default: bool | None = None

    @classmethod
    def empty(cls):
        return cls()


TeamIconOrEmpty = struct_or_empty(TeamIcon)


class Team(SlackObject):
    id: TeamId | None = None
    name: str | None = None
    domain: str | None = None
    email_domain: str | None = None
    enterprise_id: str | None = None
    enterprise_name: str | None = None
    icon: TeamIconOrEmpty = None


class Bot(SlackObject):
    id: BotId
    name: str | None = None
    app_id: AppId | None = None
    deleted: bool | None = None
    icons: dict[str, str] | None = None


class Usergroup(SlackObject):
    id: UsergroupId
    team_id: TeamId | None = None
    name: str | None = None
    handle: str | None = None
    description: str | None = None
    is_external: bool | None = None
    date_create: SlackTimestamp | None = None
    date_update: SlackTimestamp | None = None
    date_delete: SlackTimestamp | None = None
    users: list[UserId] | None = None
    user_count: int | None = None


# ---------------------------------------------------------------------------
# Pinned items: tagged on "type"
# ---------------------------------------------------------------------------


class PinnedMessage(SlackRecord):
    type: Literal["message"]
    channel: ChannelId
    created: SlackTimestamp | None = None
    created_by: UserId | None = None
    message: Message


class PinnedFile(SlackRecord):
    type: Literal["file"]
    created: SlackTimestamp | None = None
    created_by: UserId | None = None
    file: File


class PinnedFileComment(SlackRecord):
    type: Literal["file_comment"]
    comment: FileComment
    created: SlackTimestamp | None = None
    created_by: UserId | None = None
    file: File


PinnedItem = Annotated[
    Union[PinnedMessage, PinnedFile, PinnedFileComment],
    Field(discriminator="type"),
]
