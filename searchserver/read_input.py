"""Reading lines and numbers from a text stream."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_INT_RE = re.compile(r"[+-]?\d+")


def read_line(stream: TextIO | None = None) -> str:
    """Read one line without its line terminator; empty at end of input."""
    source = sys.stdin if stream is None else stream
    line = source.readline()
    if line.endswith("\n"):
        line = line[:-1]
    return line


def read_line_with_number(stream: TextIO | None = None) -> int:
    """Read an integer, skipping leading whitespace, and discard the rest of its line."""
    source = sys.stdin if stream is None else stream
    while True:
        line = source.readline()
        if not line:
            raise EOFError("no number in input")
        stripped = line.lstrip()
        if stripped:
            break
    match = _INT_RE.match(stripped)
    if match is None:
        raise ValueError(f"expected an integer, got {stripped.rstrip()!r}")
    return int(match.group())