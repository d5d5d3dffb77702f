"""
Field codecs for values Slack encodes more than one way.

Both are pydantic ``Annotated`` types so response records can declare them
like any other field:

    latest: SlackTimestamp | None = None
    fields: struct_or_empty(UserProfileFields) = None
"""

from __future__ import annotations

from typing import Annotated, Any, Protocol, TypeVar

from pydantic import BeforeValidator, PlainSerializer, PlainValidator

from slack_api.timestamp import Timestamp

SlackTimestamp = Annotated[
    Timestamp,
    PlainValidator(Timestamp.from_wire),
    PlainSerializer(lambda ts: ts.to_wire()),
]


class EmptyDefault(Protocol):
    """A record that can be decoded from a JSON object and has an "empty" value."""

    @classmethod
    def empty(cls) -> Any: ...

    @classmethod
    def model_validate(cls, obj: Any) -> Any: ...


T = TypeVar("T", bound=EmptyDefault)


def _collection_coercer(model):
    def _coerce(value):
        if isinstance(value, list):
            if value:
                raise ValueError(
                    f"Expected an object or an empty array for {model.__name__}, "
                    f"got an array of {len(value)} item(s)"
                )
            return model.empty()
        return value

    return _coerce


def decode_struct_or_empty(model: type[T], value: Any) -> T | None:
    """Decode one struct-or-empty-collection wire value outside of a record.

    None stays None, ``[]`` becomes ``model.empty()``, a mapping is decoded as
    ``model``. A non-empty array raises ValueError.
    """
    value = _collection_coercer(model)(value)
    if value is None or isinstance(value, model):
        return value
    return model.model_validate(value)


def struct_or_empty(model):
    """Annotated field type accepting absent, null, ``[]`` or an object for *model*.

    Fields declared with it must default to None so an absent key decodes to None.
    """
    return Annotated[model | None, BeforeValidator(_collection_coercer(model))]
