"""End-to-end tests for the method families against a recording transport."""

import pytest
from pydantic import ValidationError

from slack_api.errors import CommonError
from slack_api.exceptions import KnownError, MalformedResponse, UnknownError
from slack_api.methods import api, auth, channels, pins, rtm, team, usergroups_users, users
from slack_api.models import (
    Channel,
    PinnedFile,
    PinnedFileComment,
    PinnedMessage,
    TeamIcon,
    UserProfileFields,
)
from slack_api.timestamp import Timestamp

from conftest import TEST_TOKEN

CHANNEL = {
    "id": "C024BE91L",
    "name": "fun",
    "created": 1360782804,
    "creator": "U024BE7LH",
    "is_archived": False,
    "is_general": False,
    "members": ["U024BE7LH"],
    "topic": {"value": "Fun times", "creator": "U024BE7LV", "last_set": 1369677212},
    "purpose": {"value": "This channel is for fun", "creator": "U024BE7LH", "last_set": 1360782804},
    "last_read": "1401383885.000061",
    "unread_count": 0,
    "some_new_field": {"nested": True},
}

USER = {
    "id": "W012A3CDE",
    "team_id": "T012AB3C4",
    "name": "spengler",
    "deleted": False,
    "real_name": "Egon Spengler",
    "is_admin": True,
    "updated": 1502138686,
    "profile": {"real_name": "Egon Spengler", "fields": []},
}


class TestApi:
    def test_echoes_args(self, client, transport):
        transport.queue({"ok": True, "args": {"foo": "bar"}})
        result = api.test(client, foo="bar")
        assert result.args == {"foo": "bar"}

    def test_requested_error(self, client, transport):
        transport.queue({"ok": False, "error": "my_error", "args": {"error": "my_error"}})
        with pytest.raises(UnknownError) as exc_info:
            api.test(client, error="my_error")
        assert exc_info.value.code == "my_error"
        assert transport.last_params == [("token", TEST_TOKEN), ("error", "my_error")]


class TestAuth:
    def test_identity(self, client, transport):
        transport.queue(
            {
                "ok": True,
                "url": "https://subarachnoid.slack.com/",
                "team": "Subarachnoid Workspace",
                "user": "grace",
                "team_id": "T12345678",
                "user_id": "W12345678",
            }
        )
        result = auth.test(client)
        assert result.user_id == "W12345678"
        assert result.bot_id is None
        assert transport.last_url.endswith("/auth.test")
        assert transport.last_params == [("token", TEST_TOKEN)]

    def test_bad_token(self, client, transport):
        transport.queue({"ok": False, "error": "invalid_auth"})
        with pytest.raises(KnownError) as exc_info:
            auth.test(client)
        assert exc_info.value.code is CommonError.INVALID_AUTH

    def test_revoke(self, client, transport):
        transport.queue({"ok": True, "revoked": True})
        assert auth.revoke(client, test=True).revoked is True
        assert transport.last_params[1:] == [("test", "true")]


class TestChannels:
    def test_info_keeps_unknown_entity_fields(self, client, transport):
        transport.queue({"ok": True, "channel": CHANNEL})
        result = channels.info(client, channel="C024BE91L")
        assert isinstance(result.channel, Channel)
        assert result.channel.created == Timestamp(1360782804)
        assert result.channel.last_read == Timestamp(1401383885, 61)
        assert result.channel.topic.value == "Fun times"
        assert result.channel.some_new_field == {"nested": True}

    def test_history(self, client, transport):
        transport.queue(
            {
                "ok": True,
                "latest": "1512085950.000216",
                "messages": [
                    {
                        "type": "message",
                        "user": "U012AB3CDE",
                        "text": "I find you punny and would like to smell your nose letter",
                        "ts": "1512085950.000216",
                    },
                    {
                        "type": "message",
                        "user": "U061F7AUR",
                        "text": "What, you want to smell my shoes better?",
                        "ts": "1512104434.000490",
                    },
                ],
                "has_more": True,
                "pin_count": 0,
            }
        )
        result = channels.history(
            client, channel="C1", latest=Timestamp(1512085950, 216), inclusive=True, count=2
        )
        assert transport.last_params == [
            ("token", TEST_TOKEN),
            ("channel", "C1"),
            ("latest", "1512085950.000216"),
            ("inclusive", "true"),
            ("count", "2"),
        ]
        assert result.has_more is True
        assert result.latest == Timestamp(1512085950, 216)
        assert [str(m.ts) for m in result.messages] == ["1512085950.000216", "1512104434.000490"]

    def test_history_unknown_top_level_field(self, client, transport):
        transport.queue({"ok": True, "messages": [], "brand_new_thing": 1})
        with pytest.raises(MalformedResponse):
            channels.history(client, channel="C1")

    def test_create_name_taken(self, client, transport):
        transport.queue({"ok": False, "error": "name_taken"})
        with pytest.raises(KnownError) as exc_info:
            channels.create(client, name="fun", validate=True)
        assert exc_info.value.code is channels.ChannelsError.NAME_TAKEN
        assert exc_info.value.method == "channels.create"
        assert transport.last_params[1:] == [("name", "fun"), ("validate", "true")]

    def test_join_already_in_channel(self, client, transport):
        transport.queue(
            {"ok": True, "already_in_channel": True, "channel": {"id": "C1", "name": "fun"}}
        )
        result = channels.join(client, name="fun")
        assert result.already_in_channel is True
        assert result.channel.id == "C1"

    def test_list_with_cursor(self, client, transport):
        transport.queue(
            {
                "ok": True,
                "channels": [CHANNEL],
                "response_metadata": {"next_cursor": "dGVhbTpDMUg5UkVTR0w="},
            }
        )
        result = channels.list_(client, exclude_archived=True, limit=20)
        assert len(result.channels) == 1
        assert result.response_metadata.next_cursor == "dGVhbTpDMUg5UkVTR0w="

    def test_mark(self, client, transport):
        transport.queue({"ok": True})
        channels.mark(client, channel="C1", ts="1401383885.000061")
        assert transport.last_params[1:] == [("channel", "C1"), ("ts", "1401383885.000061")]

    def test_set_topic(self, client, transport):
        transport.queue({"ok": True, "topic": "To picture topic"})
        assert channels.set_topic(client, channel="C1", topic="To picture topic").topic == (
            "To picture topic"
        )

    def test_misspelt_parameter(self, client):
        with pytest.raises(ValidationError):
            channels.archive(client, chanel="C1")


class TestPins:
    def test_list_tagged_items(self, client, transport):
        transport.queue(
            {
                "ok": True,
                "items": [
                    {
                        "type": "message",
                        "channel": "C2U86NC6H",
                        "created": 1508881078,
                        "created_by": "U2U85N1RZ",
                        "message": {"type": "message", "text": "hi", "ts": "1508881072.000040"},
                    },
                    {
                        "type": "file",
                        "created": 1508880991,
                        "created_by": "U2U85N1RZ",
                        "file": {"id": "F7PKF7G5H", "name": "notes.txt"},
                    },
                    {
                        "type": "file_comment",
                        "created": 1508880991,
                        "created_by": "U2U85N1RZ",
                        "comment": {"id": "Fc7PKF7G5H", "comment": "nice"},
                        "file": {"id": "F7PKF7G5H"},
                    },
                ],
            }
        )
        result = pins.list_(client, channel="C2U86NC6H")
        message, file, comment = result.items
        assert isinstance(message, PinnedMessage)
        assert message.message.ts == Timestamp(1508881072, 40)
        assert isinstance(file, PinnedFile)
        assert file.file.name == "notes.txt"
        assert isinstance(comment, PinnedFileComment)
        assert comment.comment.comment == "nice"

    def test_unknown_item_type(self, client, transport):
        transport.queue({"ok": True, "items": [{"type": "channel", "created": 1}]})
        with pytest.raises(MalformedResponse):
            pins.list_(client, channel="C1")

    def test_add_message(self, client, transport):
        transport.queue({"ok": True})
        pins.add(client, channel="C1", timestamp="1508881072.000040")
        assert transport.last_params[1:] == [("channel", "C1"), ("timestamp", "1508881072.000040")]

    def test_already_pinned(self, client, transport):
        transport.queue({"ok": False, "error": "already_pinned"})
        with pytest.raises(KnownError) as exc_info:
            pins.add(client, channel="C1", file="F1")
        assert exc_info.value.code is pins.PinsError.ALREADY_PINNED


class TestRtm:
    def test_connect(self, client, transport):
        transport.queue(
            {
                "ok": True,
                "url": "wss://cerberus-xxxx.lb.slack-msgs.com/websocket/ABCD",
                "team": {"domain": "example", "id": "T12345", "name": "Example"},
                "self": {"id": "U123", "name": "bot"},
            }
        )
        result = rtm.connect(client, batch_presence_aware=True)
        assert result.self_.id == "U123"
        assert result.team.name == "Example"
        assert transport.last_params[1:] == [("batch_presence_aware", "true")]

    def test_start_numeric_bools(self, client, transport):
        transport.queue(
            {
                "ok": True,
                "url": "wss://example/websocket",
                "self": {"id": "U123", "name": "bot"},
                "team": {"id": "T1", "name": "Example", "icon": []},
                "users": [USER],
                "channels": [CHANNEL],
                "cache_ts": 1502138686,
                "latest_event_ts": "1502138686.000000",
            }
        )
        result = rtm.start(client, no_unreads=True, mpim_aware=False, include_locale=True)
        assert transport.last_params[1:] == [
            ("no_unreads", "1"),
            ("mpim_aware", "0"),
            ("include_locale", "1"),
        ]
        assert result.url == "wss://example/websocket"
        assert result.self_.id == "U123"
        assert result.team.icon == TeamIcon.empty()
        assert result.users[0].profile.fields == UserProfileFields.empty()
        assert result.cache_ts == 1502138686

    def test_start_failure(self, client, transport):
        transport.queue({"ok": False, "error": "migration_in_progress"})
        with pytest.raises(KnownError) as exc_info:
            rtm.start(client)
        assert exc_info.value.code is rtm.RtmError.MIGRATION_IN_PROGRESS

    def test_start_failure_without_code(self, client, transport):
        transport.queue({"ok": False})
        with pytest.raises(MalformedResponse):
            rtm.start(client)


class TestTeam:
    def test_info_with_empty_icon(self, client, transport):
        transport.queue(
            {"ok": True, "team": {"id": "T1", "name": "My Team", "domain": "example", "icon": []}}
        )
        result = team.info(client)
        assert result.team.icon == TeamIcon.empty()

    def test_billable_info(self, client, transport):
        transport.queue(
            {
                "ok": True,
                "billable_info": {
                    "U0632EWRW": {"billing_active": False},
                    "U02UCPE1R": {"billing_active": True},
                },
            }
        )
        result = team.billable_info(client, user="U02UCPE1R")
        assert result.billable_info["U02UCPE1R"].billing_active is True
        assert result.billable_info["U0632EWRW"].billing_active is False

    def test_access_logs(self, client, transport):
        transport.queue(
            {
                "ok": True,
                "logins": [
                    {
                        "user_id": "U45678",
                        "username": "alice",
                        "date_first": 1422922864,
                        "date_last": 1422922864,
                        "count": 1,
                        "ip": "127.0.0.1",
                    }
                ],
                "paging": {"count": 100, "total": 1, "page": 1, "pages": 1},
            }
        )
        result = team.access_logs(client, count=100, before=1422922900)
        assert result.logins[0].date_first == Timestamp(1422922864)
        assert result.paging.total == 1
        assert transport.last_params[1:] == [("count", "100"), ("before", "1422922900")]

    def test_paid_only(self, client, transport):
        transport.queue({"ok": False, "error": "paid_only"})
        with pytest.raises(KnownError) as exc_info:
            team.integration_logs(client, service_id="1234")
        assert exc_info.value.code is team.TeamError.PAID_ONLY


class TestUsergroupsUsers:
    def test_list(self, client, transport):
        transport.queue({"ok": True, "users": ["U060R4BJ4", "W123A4BC5"]})
        result = usergroups_users.list_(client, usergroup="S0604QSJC")
        assert result.users == ["U060R4BJ4", "W123A4BC5"]

    def test_update(self, client, transport):
        transport.queue({"ok": True, "usergroup": {"id": "S0616NG6A", "user_count": 2}})
        result = usergroups_users.update(
            client, usergroup="S0616NG6A", users=["U060R4BJ4", "U060RNRCZ"], include_count=True
        )
        assert result.usergroup.user_count == 2
        assert transport.last_params[1:] == [
            ("usergroup", "S0616NG6A"),
            ("users", "U060R4BJ4,U060RNRCZ"),
            ("include_count", "true"),
        ]


class TestUsers:
    def test_info(self, client, transport):
        transport.queue({"ok": True, "user": USER})
        result = users.info(client, user="W012A3CDE")
        assert result.user.real_name == "Egon Spengler"
        assert result.user.updated == Timestamp(1502138686)
        assert len(result.user.profile.fields) == 0

    def test_list_paginated(self, client, transport):
        transport.queue(
            {
                "ok": True,
                "members": [USER],
                "cache_ts": 1498777272,
                "response_metadata": {"next_cursor": "dXNlcjpVMEc5V0ZYTlo="},
            }
        )
        result = users.list_(client, limit=1, cursor="abc")
        assert result.cache_ts == Timestamp(1498777272)
        assert result.response_metadata.next_cursor == "dXNlcjpVMEc5V0ZYTlo="
        assert transport.last_params[1:] == [("cursor", "abc"), ("limit", "1")]

    def test_get_presence(self, client, transport):
        transport.queue({"ok": True, "presence": "active", "online": True, "auto_away": False})
        result = users.get_presence(client, user="U1")
        assert result.presence == "active"
        assert result.connection_count is None

    def test_set_presence(self, client, transport):
        transport.queue({"ok": True})
        users.set_presence(client, presence=users.Presence.AWAY)
        assert transport.last_params[1:] == [("presence", "away")]

    def test_set_presence_accepts_wire_value(self, client, transport):
        transport.queue({"ok": True})
        users.set_presence(client, presence="auto")
        assert transport.last_params[1:] == [("presence", "auto")]

    def test_set_presence_invalid(self, client):
        with pytest.raises(ValidationError):
            users.set_presence(client, presence="busy")

    def test_prefs_get(self, client, transport):
        transport.queue({"ok": True, "prefs": {"muted_channels": ["C1", "C2"]}})
        assert users.prefs_get(client).prefs.muted_channels == ["C1", "C2"]

    def test_identity(self, client, transport):
        transport.queue(
            {"ok": True, "user": {"name": "Sonny Whether", "id": "U0G9QF9C6"}, "team": {"id": "T1"}}
        )
        result = users.identity(client)
        assert result.user.name == "Sonny Whether"

    def test_set_active(self, client, transport):
        transport.queue({"ok": True})
        assert users.set_active(client).ok is True

    def test_delete_photo(self, client, transport):
        transport.queue({"ok": True})
        users.delete_photo(client)
        assert transport.last_url.endswith("/users.deletePhoto")

    def test_user_not_found(self, client, transport):
        transport.queue({"ok": False, "error": "user_not_found"})
        with pytest.raises(KnownError) as exc_info:
            users.info(client, user="U404")
        assert exc_info.value.code is users.UsersError.USER_NOT_FOUND
