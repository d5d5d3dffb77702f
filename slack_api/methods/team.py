"""Get access logs, billing info and details about the current team."""

from slack_api.codecs import SlackTimestamp
from slack_api.dispatch import Method
from slack_api.errors import ErrorCode, ErrorTaxonomy
from slack_api.models import (
    AppId,
    Paging,
    SlackObject,
    SlackRecord,
    SlackRequest,
    SlackResponse,
    Team,
    UserId,
)


class TeamError(ErrorCode):
    PAID_ONLY = ("paid_only", "This is only available to paid teams.")
    OVER_PAGINATION_LIMIT = ("over_pagination_limit", "It is not possible to request more than 1000 items per page or more than 100 pages.")
    USER_NOT_FOUND = ("user_not_found", "Value passed for user was invalid.")
    USER_IS_BOT = ("user_is_bot", "This method cannot be called by a bot user.")


ERRORS = ErrorTaxonomy(name="team", codes=TeamError)


class AccessLogsRequest(SlackRequest):
    # Number of items to return per page.
    count: int | None = None
    # Page number of results to return.
    page: int | None = None
    # End of time range of logs to include in results (inclusive).
    before: SlackTimestamp | None = None


class AccessLogsLogin(SlackObject):
    count: int | None = None
    country: str | None = None
    date_first: SlackTimestamp | None = None
    date_last: SlackTimestamp | None = None
    ip: str | None = None
    isp: str | None = None
    region: str | None = None
    user_agent: str | None = None
    user_id: UserId | None = None
    username: str | None = None


class AccessLogsResponse(SlackResponse):
    logins: list[AccessLogsLogin] | None = None
    paging: Paging | None = None


class BillableInfoRequest(SlackRequest):
    # A user to retrieve the billable information for. Defaults to all users.
    user: UserId | None = None


class BillableInfo(SlackRecord):
    billing_active: bool


class BillableInfoResponse(SlackResponse):
    billable_info: dict[UserId, BillableInfo]


class InfoResponse(SlackResponse):
    team: Team | None = None


class IntegrationLogsRequest(SlackRequest):
    # Filter logs to this service. Defaults to all logs.
    service_id: str | None = None
    # Filter logs to this Slack app. Defaults to all logs.
    app_id: AppId | None = None
    # Filter logs generated by this user's actions. Defaults to all logs.
    user: UserId | None = None
    # Filter logs with this change type. Defaults to all logs.
    change_type: str | None = None
    count: int | None = None
    page: int | None = None


class IntegrationLog(SlackObject):
    app_id: AppId | None = None
    app_type: str | None = None
    change_type: str | None = None
    channel: str | None = None
    date: str | None = None
    reason: str | None = None
    scope: str | None = None
    service_id: str | None = None
    service_type: str | None = None
    user_id: UserId | None = None
    user_name: str | None = None


class IntegrationLogsResponse(SlackResponse):
    logs: list[IntegrationLog] | None = None
    paging: Paging | None = None


# Gets the access logs for the current team.
access_logs = Method("team.accessLogs", AccessLogsResponse, ERRORS, AccessLogsRequest)

# Gets billable users information for the current team.
billable_info = Method("team.billableInfo", BillableInfoResponse, ERRORS, BillableInfoRequest)

# Gets information about the current team.
info = Method("team.info", InfoResponse, ERRORS)

# Gets the integration logs for the current team.
integration_logs = Method(
    "team.integrationLogs", IntegrationLogsResponse, ERRORS, IntegrationLogsRequest
)
