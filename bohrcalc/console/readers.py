"""
Line-oriented input readers.

Every reader consumes whole lines from a text stream and keeps asking until
the line is acceptable. Exhausting the stream raises :class:`EndOfInputError`.
"""

import re
import sys
from enum import Enum
from typing import Iterable, Optional, TextIO

from bohrcalc.core.logging_config import get_logger

logger = get_logger("console.readers")

INVALID_INPUT_MESSAGE = "Sorry, the value you inputted was not valid."

# Optional sign and digits after leading whitespace
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


class EndOfInputError(EOFError):
    """Raised when the input stream ends while a reader still needs a line."""


class Choice(Enum):
    """Which of two option sets a response matched."""

    ACCEPT = 1
    REJECT = -1


def _next_line(stream: TextIO) -> str:
    line = stream.readline()
    if line == "":
        raise EndOfInputError("Input ended while waiting for a response")
    return line.rstrip("\r\n")


def parse_bounded_int(line: str, min_value: int, max_value: Optional[int] = None) -> Optional[int]:
    """
    Parse a whole line as an integer within bounds.

    The longest leading integer token is taken; the line is accepted only if
    the value lies in ``[min_value, max_value]`` and nothing but whitespace
    follows it.

    Returns
    -------
    int or None
        The value, or None if the line is not acceptable
    """
    match = _LEADING_INT.match(line)
    if match is None:
        return None

    try:
        value = int(match.group(1))
    except ValueError:
        # Digit strings past sys.get_int_max_str_digits()
        return None
    if value < min_value or (max_value is not None and value > max_value):
        return None
    # "123abc" is not an integer
    if line[match.end():].strip():
        return None
    return value


def read_bounded_int(
    min_value: int = 1,
    max_value: Optional[int] = None,
    stream: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
) -> int:
    """
    Read an integer in ``[min_value, max_value]``, re-prompting until valid.

    Parameters
    ----------
    min_value : int
        Smallest accepted value
    max_value : int, optional
        Largest accepted value; None for no upper bound
    stream : file-like, optional
        Input stream (default sys.stdin)
    out : file-like, optional
        Output stream for error messages (default sys.stdout)

    Returns
    -------
    int
        The first acceptable value read

    Raises
    ------
    EndOfInputError
        If the stream is exhausted first
    """
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out

    while True:
        line = _next_line(stream)
        value = parse_bounded_int(line, min_value, max_value)
        if value is not None:
            return value

        logger.debug(f"Rejected integer input {line!r}")
        print(INVALID_INPUT_MESSAGE, file=out)
        if max_value is None:
            print(f"Input an integer of at least {min_value}:", file=out)
        else:
            print(f"Input an integer between {min_value} and {max_value}:", file=out)


def ascii_equal(a: str, b: str) -> bool:
    """Compare two strings ignoring ASCII letter case."""
    if len(a) != len(b):
        return False
    return a.translate(_ASCII_LOWER) == b.translate(_ASCII_LOWER)


def read_choice(
    prompt: str,
    accept: Iterable[str],
    reject: Iterable[str],
    stream: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
) -> Choice:
    """
    Read a response that matches one of two sets of accepted strings.

    Matching ignores ASCII case but is otherwise exact. A response found in
    both sets counts as ACCEPT. Anything else prints ``prompt`` again.

    Parameters
    ----------
    prompt : str
        Text repeated after an unrecognized response
    accept, reject : iterable of str
        Responses mapping to ACCEPT and REJECT

    Returns
    -------
    Choice

    Raises
    ------
    EndOfInputError
        If the stream is exhausted first
    """
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out
    accept = tuple(accept)
    reject = tuple(reject)

    while True:
        line = _next_line(stream)
        if any(ascii_equal(option, line) for option in accept):
            return Choice.ACCEPT
        if any(ascii_equal(option, line) for option in reject):
            return Choice.REJECT

        logger.debug(f"Unrecognized choice {line!r}")
        print(INVALID_INPUT_MESSAGE, file=out)
        print(prompt, file=out)
