import pytest

from credwire.context import Context, parse_line, render_line, validate
from credwire.errors import EncodingError, InvalidFieldError, ParseError


def test_default_context_is_empty():
    ctx = Context()
    assert ctx == Context(None, None, None, None, None, None, None)


@pytest.mark.parametrize(
    "key, value",
    [
        ("host", b"a\nb"),
        ("host", b"a\0b"),
        ("ho\nst", b"ok"),
        ("ho\0st", b"ok"),
    ],
)
def test_validate_rejects_null_and_newline(key, value):
    with pytest.raises(EncodingError) as info:
        validate(key, value)
    assert info.value.key == key
    assert info.value.value == value
    assert "must not contain null bytes or newlines" in str(info.value)


def test_validate_accepts_carriage_return_and_equals():
    validate("url", b"a=b\rc")


def test_parse_line_splits_at_first_equals():
    assert parse_line(b"url=https://x/?a=b") == ("url", b"https://x/?a=b")


def test_parse_line_allows_empty_value():
    assert parse_line(b"quit=") == ("quit", b"")


def test_parse_line_without_equals():
    with pytest.raises(ParseError) as info:
        parse_line(b"malformed")
    assert info.value.line == b"malformed"


def test_parse_line_key_must_be_utf8():
    with pytest.raises(ParseError) as info:
        parse_line(b"\xffkey=value")
    assert info.value.line == b"\xffkey=value"


def test_parse_line_null_byte_wraps_encoding_error():
    with pytest.raises(InvalidFieldError) as info:
        parse_line(b"host=a\0b")
    assert isinstance(info.value.error, EncodingError)
    assert info.value.__cause__ is info.value.error
    assert info.value.error.key == "host"


def test_render_line():
    assert render_line("host", b"example.com") == b"host=example.com\n"


def test_render_line_rejects_newline():
    with pytest.raises(EncodingError):
        render_line("host", b"a\nb")


def test_redacted_masks_password_only():
    ctx = Context(host="example.com", username="bob", password="hunter2")
    shown = ctx.redacted()
    assert shown.password == "<redacted>"
    assert shown.username == "bob"
    assert shown.host == "example.com"
    assert ctx.password == "hunter2"


def test_redacted_without_password_is_a_copy():
    ctx = Context(host="example.com")
    shown = ctx.redacted()
    assert shown == ctx
    assert shown is not ctx
    assert shown.password is None
