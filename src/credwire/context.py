"""The credential context record and its single-line format.

A context travels as a sequence of lines:
    <key>=<value>

Example:
    protocol=https
    host=example.com
    username=bob

Keys are UTF-8 text. Values are raw bytes; only `url` and `path` may hold
bytes that aren't valid UTF-8. Neither side may contain a null byte or a
newline, which is the only structural constraint of the format.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional

from .errors import EncodingError, InvalidFieldError, ParseError


REDACTED = "<redacted>"


@dataclass
class Context:
    """Credential metadata exchanged with a credential helper.

    Every field is optional; `None` means the key is absent on the wire.
    """
    protocol: Optional[str] = None
    host: Optional[str] = None
    path: Optional[bytes] = None
    username: Optional[str] = None
    password: Optional[str] = None
    url: Optional[bytes] = None
    quit: Optional[bool] = None

    def redacted(self) -> "Context":
        """Return a copy that is safe to display, with the password masked."""
        if self.password is None:
            return replace(self)
        return replace(self, password=REDACTED)


def validate(key: str, value: bytes) -> None:
    """Check that `key` and `value` can be written as a single line.

    Raises:
        EncodingError: if either contains a null byte or a newline.
    """
    if "\0" in key or "\n" in key or b"\0" in value or b"\n" in value:
        raise EncodingError(key, value)


def parse_line(line: bytes) -> tuple[str, bytes]:
    """Split one line (without its line terminator) into key and value.

    Only the first "=" separates; the value may contain more of them.

    Raises:
        ParseError: if there is no "=" or the key isn't UTF-8.
        InvalidFieldError: if the key or value contains a null byte.
    """
    raw_key, sep, value = line.partition(b"=")
    if not sep:
        raise ParseError(line)
    try:
        key = raw_key.decode("utf-8")
    except UnicodeDecodeError:
        raise ParseError(line) from None

    try:
        validate(key, value)
    except EncodingError as err:
        raise InvalidFieldError(err) from err
    return key, value


def render_line(key: str, value: bytes) -> bytes:
    """Render a key and value back to its line form, newline included.

    Raises:
        EncodingError: if the pair can't be represented.
    """
    validate(key, value)
    return key.encode("utf-8") + b"=" + value + b"\n"
