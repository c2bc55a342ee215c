"""The closed set of keys a context understands.

Each field has a kind that decides how its value crosses the wire:
- "bytes": stored verbatim, may be non-UTF-8
- "text": must be UTF-8, stored as str
- "bool": written as true/false, read with the relaxed vocabulary

FIELDS is also the order in which keys are written.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional

from .boolean import parse_quit
from .context import Context
from .errors import EncodingError, IllformedUtf8Error


Kind = Literal["bytes", "text", "bool"]


@dataclass(frozen=True)
class Field:
    name: str
    kind: Kind


FIELDS: tuple[Field, ...] = (
    Field("url", "bytes"),
    Field("path", "bytes"),
    Field("protocol", "text"),
    Field("host", "text"),
    Field("username", "text"),
    Field("password", "text"),
    Field("quit", "bool"),
)

FIELDS_BY_NAME = {f.name: f for f in FIELDS}


def lookup(key: str) -> Optional[Field]:
    """Return the field for `key`, or None if the key is unknown."""
    return FIELDS_BY_NAME.get(key)


def dump_value(field: Field, ctx: Context) -> Optional[bytes]:
    """Return the wire value of `field` in `ctx`, or None if it's unset.

    Raises:
        EncodingError: if a text field can't be encoded as UTF-8.
    """
    value = getattr(ctx, field.name)
    if value is None:
        return None

    if field.kind == "bytes":
        return bytes(value)
    if field.kind == "text":
        try:
            return value.encode("utf-8")
        except UnicodeEncodeError:
            raw = value.encode("utf-8", "backslashreplace")
            raise EncodingError(field.name, raw, "must be encodable as UTF-8") from None
    return b"true" if value else b"false"


def load_value(field: Field, ctx: Context, value: bytes) -> None:
    """Store the wire `value` of `field` into `ctx`, replacing any earlier one.

    Raises:
        IllformedUtf8Error: if a text field's value isn't UTF-8.
    """
    if field.kind == "bytes":
        setattr(ctx, field.name, value)
    elif field.kind == "text":
        try:
            text = value.decode("utf-8")
        except UnicodeDecodeError:
            raise IllformedUtf8Error(field.name, value) from None
        setattr(ctx, field.name, text)
    else:
        setattr(ctx, field.name, parse_quit(value))
