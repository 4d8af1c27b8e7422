"""Shared helpers: lenient number parsing, string splitting and console logging."""

from __future__ import annotations

import math
import re
import sys

__all__ = [
    "ParseError",
    "lexical_cast",
    "str_split",
    "split",
    "is_any_of",
    "log_error",
    "log_debug",
    "log_inform",
    "log_warn",
]


class ParseError(Exception):
    """Raised when a description element cannot be interpreted."""


_NUMBER_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def lexical_cast(text: str) -> float:
    """Read the leading number of ``text`` as a float.

    Leading whitespace is skipped and trailing garbage ignored; text with no
    leading number yields ``0.0``.  This never raises for malformed input.
    """
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return 0.0
    token = match.group(1)
    lowered = token.lower().lstrip("+-")
    if lowered.startswith("inf"):
        return -math.inf if token.startswith("-") else math.inf
    if lowered == "nan":
        return math.nan
    return float(token)


def str_split(text: str, sep: str) -> list[str]:
    """Split ``text`` on every occurrence of the substring ``sep``.

    The result always holds at least one item; empty pieces are kept.
    """
    if not sep:
        raise ValueError("separator must not be empty")
    return text.split(sep)


def split(text: str, separators: list[str]) -> list[str]:
    """Split ``text`` on the single separator held in ``separators``."""
    if len(separators) != 1:
        raise ValueError("exactly one separator is supported")
    return str_split(text, separators[0])


def is_any_of(seps: str) -> list[str]:
    """Turn a string of separator characters into a list of one-character strings."""
    return list(seps)


def _emit(msg: str, args: tuple) -> None:
    print(" ".join([msg, *(str(arg) for arg in args)]), file=sys.stderr)


def log_error(msg: str = "", *args) -> None:
    """Write an error message and its arguments to standard error."""
    _emit(msg, args)


def log_debug(msg: str, *args) -> None:
    """Write a debug message and its arguments to standard error."""
    _emit(msg, args)


def log_inform(msg: str, *args) -> None:
    """Write an informational message and its arguments to standard error."""
    _emit(msg, args)


def log_warn(msg: str, *args) -> None:
    """Write a warning message and its arguments to standard error."""
    _emit(msg, args)