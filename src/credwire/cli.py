"""Command-line interface for credwire.

Reads one context from a file or stdin and writes its canonical form to
stdout: fixed key order, unknown keys dropped, `quit` as true/false.
"""

from __future__ import annotations
import argparse
import sys
from typing import BinaryIO

from .codec import decode, write_to
from .errors import CredwireError


def _open_input(path: str | None) -> BinaryIO:
    if path is None or path == "-":
        return sys.stdin.buffer
    return open(path, "rb")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="credwire", description="Validate and normalize credential contexts.")
    p.add_argument("path", nargs="?", default="-", help="Input file path or '-' for stdin")
    p.add_argument("--check", action="store_true", help="Only decode; print nothing on success")
    p.add_argument("--redact", action="store_true", help="Mask the password in the output")
    p.add_argument("--terminate", action="store_true", help="Append the blank termination line")
    args = p.parse_args(argv)

    try:
        fh = _open_input(args.path)
        try:
            ctx = decode(fh.read())
        finally:
            if fh is not sys.stdin.buffer:
                fh.close()
        if args.check:
            return 0
        if args.redact:
            ctx = ctx.redacted()
        out = sys.stdout.buffer
        write_to(ctx, out)
        if args.terminate:
            out.write(b"\n")
        out.flush()
    except (CredwireError, OSError) as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
