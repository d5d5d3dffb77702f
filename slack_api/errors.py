"""Error-code registry: documented Slack failure codes per method family.

Each method family declares one ErrorCode enum and wraps it in an
ErrorTaxonomy. Codes every Slack method can return live in CommonError and
are consulted second.
"""

from dataclasses import dataclass
from enum import Enum

from slack_api.exceptions import KnownError, UnknownError


class ErrorCode(str, Enum):
    """Base for per-family error enums. Members are ``NAME = (code, description)``."""

    def __new__(cls, code, description=""):
        obj = str.__new__(cls, code)
        obj._value_ = code
        obj.description = description
        return obj

    def __str__(self):
        return self.value


class CommonError(ErrorCode):
    """Errors any Slack Web API method may return."""

    NOT_AUTHED = ("not_authed", "No authentication token provided.")
    INVALID_AUTH = ("invalid_auth", "Invalid authentication token.")
    ACCOUNT_INACTIVE = ("account_inactive", "Authentication token is for a deleted user or team.")
    TOKEN_REVOKED = ("token_revoked", "Authentication token is for a deleted user or team or the app has been removed.")
    NO_PERMISSION = ("no_permission", "The workspace token used in this request does not have the permissions necessary to complete the request.")
    ORG_LOGIN_REQUIRED = ("org_login_required", "The workspace is undergoing an enterprise migration and will not be available until migration is complete.")
    MISSING_SCOPE = ("missing_scope", "The token used is not granted the specific scope permissions required to complete this request.")
    INVALID_ARG_NAME = ("invalid_arg_name", "The method was passed an argument whose name falls outside the bounds of common decency.")
    INVALID_ARRAY_ARG = ("invalid_array_arg", "The method was passed a PHP-style array argument (e.g. with a name like foo[7]). These are never valid with the Slack API.")
    INVALID_CHARSET = ("invalid_charset", "The method was called via a POST request, but the charset specified in the Content-Type header was invalid.")
    INVALID_FORM_DATA = ("invalid_form_data", "The method was called via a POST request with form data that was either missing or syntactically invalid.")
    INVALID_POST_TYPE = ("invalid_post_type", "The method was called via a POST request, but the specified Content-Type was invalid.")
    MISSING_POST_TYPE = ("missing_post_type", "The method was called via a POST request and included a data payload, but the request did not include a Content-Type header.")
    TEAM_ADDED_TO_ORG = ("team_added_to_org", "The workspace associated with your request is currently undergoing migration to an Enterprise Organization.")
    REQUEST_TIMEOUT = ("request_timeout", "The method was called via a POST request, but the POST data was either missing or truncated.")
    FATAL_ERROR = ("fatal_error", "The server could not complete your operation(s) without encountering a catastrophic error.")
    RATELIMITED = ("ratelimited", "The request has been ratelimited.")


@dataclass(frozen=True)
class ErrorTaxonomy:
    """The closed set of error codes one method family documents."""

    name: str
    codes: type[ErrorCode]
    common: type[ErrorCode] = CommonError

    def lookup(self, code):
        """Return the enum member for *code*, or None when it is undocumented."""
        for table in (self.codes, self.common):
            try:
                return table(code)
            except ValueError:
                continue
        return None

    def classify(self, code, method=None):
        """Build the exception for a raw ``error`` string: KnownError or UnknownError."""
        member = self.lookup(code)
        if member is None:
            return UnknownError(code, method=method)
        return KnownError(member, method=method)

    def known_codes(self) -> tuple[str, ...]:
        """All documented codes, family-specific first, in declaration order."""
        seen = {}
        for table in (self.codes, self.common):
            for member in table:
                seen.setdefault(member.value, None)
        return tuple(seen)


class NoFamilyError(ErrorCode):
    """Placeholder for families that document no codes beyond the common ones."""


COMMON = ErrorTaxonomy(name="common", codes=NoFamilyError)
