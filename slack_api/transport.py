"""
HTTP transport and logging helpers for slack-api.

A transport takes a URL and the ordered form parameters of one call and
returns the raw response body. It knows nothing about Slack envelopes:
decoding is the dispatcher's job. Any failure to obtain a body is raised as
TransportError (or its HTTPError subclass for non-2xx statuses). A non-2xx
reply carrying a Slack `{"error": ...}` body is returned like any other body
so the dispatcher can classify it.
"""

from __future__ import annotations

import hashlib
import http.client
import json
import re
import sys
import time
import urllib.error
import urllib.parse
import urllib.request
import uuid
from typing import Protocol

from slack_api import config
from slack_api.exceptions import HTTPError, TransportError

_SECRET_PARAMS = frozenset({"token", "client_secret", "code"})


class Transport(Protocol):
    """Anything that can POST form parameters to a URL and hand back the body."""

    def send(self, url: str, params: list[tuple[str, str]]) -> bytes: ...


# ---------------------------------------------------------------------------
# Security helpers
# ---------------------------------------------------------------------------


def _mask_token(token):
    """Show only first 6 chars of a token for safe logging."""
    return token[:6] + "..." if len(token) > 6 else token


def _sanitize_error(body, max_len=500):
    """Truncate and clean error body for safe display."""
    if not body:
        return ""
    cleaned = re.sub(r"<[^>]+>", "", body)
    cleaned = re.sub(r"\s+", " ", cleaned).strip()
    if len(cleaned) > max_len:
        return cleaned[:max_len] + "... [truncated]"
    return cleaned


def _sanitize_params_for_log(params):
    """Mask secret parameter values before logging."""
    return [(key, "***" if key in _SECRET_PARAMS else value) for key, value in params]


def _is_error_envelope(raw):
    """True when a non-2xx body is a Slack `{"error": ...}` reply."""
    try:
        parsed = json.loads(raw)
    except ValueError:
        return False
    return isinstance(parsed, dict) and "error" in parsed


# ---------------------------------------------------------------------------
# Structured logging
# ---------------------------------------------------------------------------


def _log_http_event(**fields):
    """Emit structured HTTP logs to stderr when enabled."""
    if not config.HTTP_LOG_ENABLED:
        return
    print("[HTTP] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def _is_sampled_request(request_id):
    """Decide if a request should be logged based on sample rate."""
    rate = config.HTTP_LOG_SAMPLE_RATE
    if rate <= 0:
        return False
    if rate >= 1:
        return True
    if not request_id:
        return False
    digest = hashlib.sha256(request_id.encode("utf-8")).digest()
    bucket = int.from_bytes(digest[:4], "big") / 4294967295.0
    return bucket < rate


# ---------------------------------------------------------------------------
# urllib transport
# ---------------------------------------------------------------------------


class UrllibTransport:
    """Form-encoded POST over urllib. One request per send(), no retries.

    Settings left as None are read from config on every call, so tests and
    callers can adjust config at runtime.
    """

    def __init__(self, *, timeout=None, max_response_bytes=None, user_agent=None):
        self.timeout = timeout
        self.max_response_bytes = max_response_bytes
        self.user_agent = user_agent or config.USER_AGENT

    def __repr__(self):
        return f"UrllibTransport(timeout={self.timeout!r})"

    def send(self, url, params):
        timeout = max(1, self.timeout or config.HTTP_TIMEOUT_SECONDS)
        limit = self.max_response_bytes or config.HTTP_MAX_RESPONSE_BYTES
        request_id = str(uuid.uuid4())
        sampled = _is_sampled_request(request_id)
        body = urllib.parse.urlencode(params).encode("utf-8")
        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "Accept": "application/json",
            "User-Agent": self.user_agent,
            "X-Request-Id": request_id,
        }
        req = urllib.request.Request(url, data=body, headers=headers, method="POST")
        if sampled:
            _log_http_event(
                phase="request",
                url=url,
                params=_sanitize_params_for_log(params),
                request_id=request_id,
                timeout_seconds=timeout,
            )
        start = time.perf_counter()
        try:
            with urllib.request.urlopen(req, timeout=timeout) as resp:
                raw = resp.read(limit + 1)
                if sampled:
                    _log_http_event(
                        phase="response",
                        url=url,
                        status=getattr(resp, "status", 200),
                        content_type=resp.headers.get("Content-Type", ""),
                        bytes=len(raw),
                        latency_ms=round((time.perf_counter() - start) * 1000, 2),
                        request_id=request_id,
                    )
                if len(raw) > limit:
                    raise TransportError(f"Response too large from Slack API (>{limit} bytes).")
                return raw
        except urllib.error.HTTPError as e:
            raw_error = e.read(limit) if e.fp else b""
            if sampled:
                _log_http_event(
                    phase="response",
                    url=url,
                    status=e.code,
                    latency_ms=round((time.perf_counter() - start) * 1000, 2),
                    request_id=request_id,
                )
            if _is_error_envelope(raw_error):
                return raw_error
            error_body = raw_error.decode("utf-8", errors="replace")
            raise HTTPError(e.code, e.reason, _sanitize_error(error_body), headers=e.headers) from e
        except TimeoutError as e:
            if sampled:
                _log_http_event(
                    phase="network_error", url=url, error="timeout", request_id=request_id
                )
            raise TransportError(
                f"Request timed out after {timeout} seconds. Is the Slack API reachable?"
            ) from e
        except urllib.error.URLError as e:
            if sampled:
                _log_http_event(
                    phase="network_error",
                    url=url,
                    error=f"url_error: {e.reason}",
                    request_id=request_id,
                )
            raise TransportError(f"Connection failed: {e.reason}") from e
        except http.client.HTTPException as e:
            if sampled:
                _log_http_event(
                    phase="network_error",
                    url=url,
                    error=f"http_error: {e!r}",
                    request_id=request_id,
                )
            raise TransportError(f"Connection failed: {e!r}") from e


def default_transport():
    """A fresh UrllibTransport configured from config."""
    return UrllibTransport()
