"""Relaxed boolean tokens, as used by git's configuration values.

`bytes.lower()` only folds ASCII letters, so non-ASCII input never matches.
"""

from __future__ import annotations


TRUE_TOKENS = (b"yes", b"on", b"true")
FALSE_TOKENS = (b"no", b"off", b"false")


def parse_true(value: bytes) -> bool:
    return value.lower() in TRUE_TOKENS


def parse_false(value: bytes) -> bool:
    """An empty value counts as false."""
    return not value or value.lower() in FALSE_TOKENS


def parse_quit(value: bytes) -> bool:
    """Resolve the `quit` flag.

    Anything that isn't a known false token is true, so an unrecognized
    non-empty value like b"banana" means quit.
    """
    if parse_true(value):
        return True
    return not parse_false(value)
