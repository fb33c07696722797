"""
Error kinds raised by the candidate stores and the solver.

Both subclass the matching builtin so callers that only care about
"bad value" / "bad index" can keep catching ValueError / IndexError.
"""


class InvalidArgument(ValueError):
    """Malformed guess/feedback, bad word size, or other rejected input."""


class IndexOutOfRange(IndexError):
    """A positional constraint was given a position outside the word."""
