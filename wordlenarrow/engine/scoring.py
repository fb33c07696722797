"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Produces the status string the game would show, in the same 'b'/'y'/'g'
alphabet Wordle.update consumes. The harness uses it to play against a
known answer; tests use it as an oracle (the answer must always survive
its own feedback).

Algorithm (two-pass, duplicate-safe):
  1) First pass marks all greens and counts the remaining (unmatched) letters
     from the answer.
  2) Second pass marks yellows only if the letter still has remaining count.
"""

from __future__ import annotations

from collections import Counter

from wordlenarrow.errors import InvalidArgument


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback status for `guess` against `answer`.

    Examples:
      score("belle", "level") -> "bgyyy"
      score("lemon", "level") -> "ggbbb"
    """
    if len(guess) != len(answer):
        raise InvalidArgument(f"Guess [{guess}] and answer [{answer}] must be the same length")

    pattern = ["b"] * len(guess)

    # Pass 1: greens, and the answer's unmatched letters.
    remaining: Counter[str] = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "g"
        else:
            remaining[a] += 1

    # Pass 2: yellows, capped by the true multiplicity in the answer.
    for i, g in enumerate(guess):
        if pattern[i] == "g":
            continue
        if remaining[g] > 0:
            pattern[i] = "y"
            remaining[g] -= 1

    return "".join(pattern)
