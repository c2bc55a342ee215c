"""Errors raised by the credential context codec."""


class CredwireError(Exception):
    """Base error for this package."""


class EncodingError(CredwireError, ValueError):
    """Raised when a key or value can't be written as a single line."""

    def __init__(
        self,
        key: str,
        value: bytes,
        reason: str = "must not contain null bytes or newlines neither in key nor in value",
    ) -> None:
        self.key = key
        self.value = value
        super().__init__(f"{key!r}={value!r} {reason}.")


class DecodeError(CredwireError, ValueError):
    """Base error for everything `decode()` can raise."""


class ParseError(DecodeError):
    """Raised when an input line is not of the form key=value."""

    def __init__(self, line: bytes) -> None:
        self.line = line
        super().__init__(f"Invalid format in line {line!r}, expecting key=value")


class IllformedUtf8Error(DecodeError):
    """Raised when a text-only field carries a value that isn't UTF-8."""

    def __init__(self, key: str, value: bytes) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Illformed UTF-8 in value of key {key!r}: {value!r}")


class InvalidFieldError(DecodeError):
    """A decoded line failed validation; wraps the EncodingError."""

    def __init__(self, error: EncodingError) -> None:
        self.error = error
        super().__init__(str(error))
