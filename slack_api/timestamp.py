"""
Slack message timestamps.

Slack identifies messages by a ``"seconds.micros"`` string, but several
methods report times as bare integers instead. Both shapes decode into one
Timestamp value; encoding keeps whichever shape the value came from, since
callers hand these back to Slack as opaque cursors.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from slack_api.config import MICROS_DIGITS, MICROS_MAX, SECONDS_MAX, TIMESTAMP_MAX_LEN
from slack_api.exceptions import TimestampError

_DIGITS = re.compile(r"[0-9]+")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class Timestamp:
    """A point in time: whole seconds plus an optional microsecond fraction."""

    seconds: int
    micros: int | None = None

    def __post_init__(self):
        if self.seconds < 0:
            raise TimestampError(f"Timestamp seconds must be unsigned, got {self.seconds}")
        if self.seconds > SECONDS_MAX:
            raise TimestampError(f"Timestamp seconds do not fit in 64 bits, got {self.seconds}")
        if self.micros is not None and not 0 <= self.micros <= MICROS_MAX:
            raise TimestampError(
                f"Timestamp fraction must be between 0 and {MICROS_MAX}, got {self.micros}"
            )

    @classmethod
    def from_wire(cls, value) -> Timestamp:
        """Decode a JSON value (unsigned int or "seconds.fraction" string)."""
        if isinstance(value, Timestamp):
            return value
        # bool is an int subclass; Slack never sends one for a time.
        if isinstance(value, bool):
            raise TimestampError(f"Expected a Unix-style timestamp, got bool {value!r}")
        if isinstance(value, int):
            if value < 0:
                raise TimestampError(f"Expected an unsigned timestamp, got {value}")
            return cls(seconds=value)
        if isinstance(value, str):
            return cls._from_string(value)
        raise TimestampError(
            f"Expected a Unix-style timestamp as an integer or string, got {type(value).__name__}"
        )

    @classmethod
    def _from_string(cls, value: str) -> Timestamp:
        if len(value) > TIMESTAMP_MAX_LEN:
            raise TimestampError(
                f"Timestamps must be at most {TIMESTAMP_MAX_LEN} characters, got {value!r}"
            )
        if "." not in value:
            raise TimestampError(f"Got a timestamp string without a '.': {value!r}")
        seconds_str, fraction_str = value.split(".", 1)
        if not _DIGITS.fullmatch(seconds_str):
            raise TimestampError(f"Cannot parse {seconds_str!r} as a number in {value!r}")
        if not _DIGITS.fullmatch(fraction_str):
            raise TimestampError(f"Cannot parse {fraction_str!r} as a number in {value!r}")
        if len(fraction_str) > MICROS_DIGITS:
            raise TimestampError(
                f"Timestamp fraction {fraction_str!r} has more than {MICROS_DIGITS} digits "
                f"and does not fit in microseconds in {value!r}"
            )
        return cls(seconds=int(seconds_str), micros=int(fraction_str))

    def to_wire(self) -> str | int:
        """JSON form: a string when a fraction is present, a bare number otherwise."""
        if self.micros is None:
            return self.seconds
        return str(self)

    def to_datetime(self) -> datetime:
        """Convert to an aware UTC datetime. Display only."""
        try:
            return _EPOCH + timedelta(seconds=self.seconds, microseconds=self.micros or 0)
        except OverflowError as e:
            raise TimestampError(f"Timestamp {self} is outside the datetime range") from e

    def __str__(self):
        if self.micros is None:
            return str(self.seconds)
        return f"{self.seconds}.{self.micros:06d}"
