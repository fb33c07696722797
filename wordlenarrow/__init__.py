"""
wordle-narrow: narrow a dictionary down to the words consistent with
Wordle-style guess/feedback pairs.
"""

from .errors import InvalidArgument, IndexOutOfRange

__version__ = "0.1.0"

__all__ = ["InvalidArgument", "IndexOutOfRange", "__version__"]
