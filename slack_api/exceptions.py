"""
slack-api exception hierarchy.

All custom exceptions live here to avoid circular imports.

A failed call always raises exactly one SlackError subclass:

    TransportFailure   the request never produced a response body
    MalformedResponse  a body arrived but matched neither the success nor the error shape
    KnownError         Slack answered ok=false with a documented error code
    UnknownError       Slack answered ok=false with a code this library does not know
"""


class SlackError(Exception):
    """Base class for every failure surfaced by a Slack API call."""

    def __init__(self, message, method=None):
        super().__init__(message)
        self.method = method


class TransportFailure(SlackError):
    """The transport could not deliver the request or read the reply."""

    def __init__(self, cause, method=None):
        where = f" calling {method}" if method else ""
        super().__init__(f"Transport failure{where}: {cause}", method=method)
        self.cause = cause


class MalformedResponse(SlackError):
    """The reply parsed as neither the method's response record nor an error envelope."""

    def __init__(self, detail, body="", method=None):
        where = f" from {method}" if method else ""
        super().__init__(f"Malformed response{where}: {detail}", method=method)
        self.detail = detail
        self.body = body


class KnownError(SlackError):
    """Slack reported a documented failure. ``code`` is the matching enum member."""

    def __init__(self, code, method=None):
        description = getattr(code, "description", "")
        message = f"{code.value}: {description}" if description else code.value
        super().__init__(message, method=method)
        self.code = code


class UnknownError(SlackError):
    """Slack reported a failure code missing from the method family's table.

    The raw code is kept verbatim.
    """

    def __init__(self, code, method=None):
        super().__init__(code, method=method)
        self.code = code


class SetupError(Exception):
    """No token configured."""


class TimestampError(ValueError):
    """A wire value could not be read as a Slack timestamp."""


class TransportError(Exception):
    """Raised by transports for connection, timeout and size-limit failures."""


class HTTPError(TransportError):
    """Raised by transports for non-2xx HTTP responses."""

    def __init__(self, code, reason, body, headers=None):
        super().__init__(f"HTTP {code}: {reason}")
        self.code = code
        self.reason = reason
        self.body = body
        self.headers = headers or {}
