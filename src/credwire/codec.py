"""Encoding and decoding of whole contexts.

Encode shape:
- walk FIELDS in order, skipping unset ones
- validate and render each as one key=value line

Decode shape:
- split lines -> stop at the first empty line
- parse key=value -> dispatch on the key, ignoring unknown ones

Both directions are all-or-nothing: the first bad field raises.
"""

from __future__ import annotations
import io
from itertools import takewhile
from typing import Iterator, Protocol

from .context import Context, parse_line, render_line
from .fields import FIELDS, load_value, lookup, dump_value


class Writer(Protocol):
    """Anything bytes can be written to."""

    def write(self, data: bytes) -> object: ...


def write_to(ctx: Context, out: Writer) -> None:
    """Write `ctx` to `out` such that `decode()` can read it back losslessly.

    No blank termination line is written.

    Raises:
        EncodingError: if a set field can't be represented. Lines for the
            fields before it have already been written at that point.
    """
    for field in FIELDS:
        value = dump_value(field, ctx)
        if value is None:
            continue
        out.write(render_line(field.name, value))


def encode(ctx: Context) -> bytes:
    """Return the wire form of `ctx`."""
    buf = io.BytesIO()
    write_to(ctx, buf)
    return buf.getvalue()


def iter_lines(data: bytes) -> Iterator[bytes]:
    """Yield the lines of `data` without their "\\n" or "\\r\\n" terminator.

    A trailing newline does not produce a final empty line. A "\\r" is only
    dropped in front of "\\n"; an unterminated last line keeps it. So a value
    ending in "\\r" doesn't survive `write_to()` followed by `decode()`.
    """
    start = 0
    end_of_data = len(data)
    while start < end_of_data:
        end = data.find(b"\n", start)
        if end == -1:
            yield data[start:]
            return
        line = data[start:end]
        start = end + 1
        if line.endswith(b"\r"):
            line = line[:-1]
        yield line


def decode(data: bytes) -> Context:
    """Decode a context from `data`, the format written by `write_to()`.

    Decoding stops at the first empty line or at the end of `data`, so a
    record may be followed by unrelated content after a blank line.

    Raises:
        ParseError, InvalidFieldError, IllformedUtf8Error
    """
    ctx = Context()
    for line in takewhile(bool, iter_lines(bytes(data))):
        key, value = parse_line(line)  # may raise
        field = lookup(key)
        if field is None:
            continue
        load_value(field, ctx, value)
    return ctx


from_bytes = decode
