"""Slack Web API method families.

Each module declares its request/response records, its error-code table and
one Method value per remote method.
"""

from slack_api.methods import api, auth, channels, pins, rtm, team, usergroups_users, users

__all__ = [
    "api",
    "auth",
    "channels",
    "pins",
    "rtm",
    "team",
    "usergroups_users",
    "users",
]
