"""
Feedback codes and status-string parsing.

A status string has one character per guessed letter:
  - 'b' : black  = letter absent (or present fewer times than guessed)
  - 'y' : yellow = letter present, but not at this position
  - 'g' : green  = letter present at exactly this position

e.g. for "bbggy" the first two letters were black, the next two green and
the last one yellow.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Sequence, Union

from wordlenarrow.errors import InvalidArgument

ALLOWED_STATUS_CHARS = "byg"


class Feedback(str, Enum):
    BLACK = "b"
    YELLOW = "y"
    GREEN = "g"


Status = Union[str, Sequence[Feedback]]


def status_text(status: Status) -> str:
    """Render a status (string or sequence of codes) as its 'byg' text."""
    if isinstance(status, str):
        return status
    return "".join(f.value if isinstance(f, Feedback) else str(f) for f in status)


def parse_feedback(status: Status) -> List[Feedback]:
    """
    Decode a status into Feedback codes.

    Raises InvalidArgument naming the offending status and the allowed
    characters if any element is not one of 'b', 'y', 'g'.
    """
    codes: List[Feedback] = []
    for s in status:
        if isinstance(s, Feedback):
            codes.append(s)
            continue
        if not isinstance(s, str) or len(s) != 1 or s not in ALLOWED_STATUS_CHARS:
            raise InvalidArgument(
                f"Invalid status characters in [{status_text(status)}], "
                f"status characters must be from: [{ALLOWED_STATUS_CHARS}]"
            )
        codes.append(Feedback(s))
    return codes


def is_found(status: Status) -> bool:
    """True when every letter is green (the target has been guessed)."""
    return len(status) > 0 and all(f == Feedback.GREEN for f in parse_feedback(status))
