"""List and replace the members of a User Group."""

from slack_api.dispatch import Method
from slack_api.errors import ErrorCode, ErrorTaxonomy
from slack_api.models import SlackRequest, SlackResponse, Usergroup, UsergroupId, UserId


class UsergroupsUsersError(ErrorCode):
    NO_SUCH_SUBTEAM = ("no_such_subteam", "The User Group does not exist.")
    INVALID_USERS = ("invalid_users", "Value passed for users was invalid.")
    NO_USERS_PROVIDED = ("no_users_provided", "Either the users field wasn't provided or that field contained no valid users.")
    PAID_TEAMS_ONLY = ("paid_teams_only", "Usergroups can only be used on paid Slack teams.")
    PERMISSION_DENIED = ("permission_denied", "The user does not have permission to update the list of users for a User Group.")
    PLAN_UPGRADE_REQUIRED = ("plan_upgrade_required", "The workspace plan does not include User Groups.")


ERRORS = ErrorTaxonomy(name="usergroups.users", codes=UsergroupsUsersError)


class ListRequest(SlackRequest):
    # The encoded ID of the User Group.
    usergroup: UsergroupId
    # Allow results that involve disabled User Groups.
    include_disabled: bool | None = None


class ListResponse(SlackResponse):
    users: list[UserId] | None = None


class UpdateRequest(SlackRequest):
    usergroup: UsergroupId
    # The entire list of users for the User Group; sent comma separated.
    users: list[UserId]
    # Include the number of users in the User Group.
    include_count: bool | None = None


class UpdateResponse(SlackResponse):
    usergroup: Usergroup | None = None


# List all users in a User Group
list_ = Method("usergroups.users.list", ListResponse, ERRORS, ListRequest)

# Update the list of users for a User Group
update = Method("usergroups.users.update", UpdateResponse, ERRORS, UpdateRequest)
