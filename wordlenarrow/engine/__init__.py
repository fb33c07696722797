from .feedback import ALLOWED_STATUS_CHARS, Feedback, parse_feedback, is_found
from .scoring import score
from .wordle import Wordle

__all__ = ["ALLOWED_STATUS_CHARS", "Feedback", "parse_feedback", "is_found", "score", "Wordle"]
