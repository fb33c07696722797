"""
The solver: turns guess/feedback pairs into store constraints.

Wordle owns a fixed word size and exactly one candidate store. Each call to
update(guess, status) decodes the status into per-letter constraints, applies
them to the store and returns how many candidates survive.

Duplicate letters are the only subtle part. The game marks the *excess*
copies of a repeated letter black while the other copies get yellow/green,
so a black letter does not always mean "absent". When a black letter also
shows up yellow or green elsewhere in the guess, its yellow/green copies
become an occurrence ceiling instead of a blanket exclusion:

  guess "apple", status for the two p's = 'y' and 'b'
    -> the answer has p but not at index 1, and fewer than two p's

Once a black letter has been handled, every position holding that letter is
consumed and skipped by the rest of the scan.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Set

from wordlenarrow.errors import InvalidArgument
from wordlenarrow.words import DEFAULT_STORE, Words, create_words
from wordlenarrow.words.base import Entry, validate_word_size

from .feedback import Feedback, Status, parse_feedback, status_text

log = logging.getLogger(__name__)


class Wordle:
    def __init__(self, word_size: int, words: Words):
        self._word_size = validate_word_size(word_size)
        if words.word_size != self._word_size:
            raise InvalidArgument(
                f"store word size [{words.word_size}] does not match solver word size [{self._word_size}]"
            )
        self._words = words

    @classmethod
    def from_entries(cls, word_size: int, entries: Iterable[Entry],
                     store_id: str = DEFAULT_STORE) -> "Wordle":
        """Build a solver over a fresh store of the given kind."""
        return cls(word_size, create_words(store_id, entries, word_size))

    @classmethod
    def from_file(cls, word_size: int, path: Path | str,
                  store_id: str = DEFAULT_STORE) -> "Wordle":
        """Build a solver from a `word` / `word,count` dictionary file."""
        from wordlenarrow.datasets import load_dictionary

        return cls.from_entries(word_size, load_dictionary(path, word_size), store_id)

    def update(self, guess: str, status: Status) -> int:
        """
        Apply the feedback for one guess and return the number of candidates left.

        Args:
          guess  : the word that was tried, exactly word_size characters
          status : its feedback, e.g. "bbggy" (or a sequence of Feedback)

        Raises InvalidArgument (before touching the store) when either length
        is wrong or the status holds anything but 'b', 'y', 'g'.
        """
        n = self._word_size
        if not isinstance(guess, str):
            raise InvalidArgument(f"guess must be a string; got {guess!r}")
        if len(guess) != n or len(status) != n:
            raise InvalidArgument(
                f"Invalid number of characters in [{guess}], and/or [{status_text(status)}], "
                f"they must contain exactly [{n}] characters"
            )
        codes = parse_feedback(status)

        consumed: Set[int] = set()
        for i in range(n):
            if i in consumed:
                continue
            c, f = guess[i], codes[i]
            if f == Feedback.GREEN:
                self._words.exists(c, i)
            elif f == Feedback.YELLOW:
                self._words.exists(c)
                self._words.does_not_exist(c, i)
            else:
                consumed |= self._apply_black(guess, codes, i)

        log.debug("update(%s, %s) -> %d candidates", guess, status_text(status), self._words.size())
        return self._words.size()

    def _apply_black(self, guess: str, codes: List[Feedback], i: int) -> Set[int]:
        """
        Constraints for a black letter at `i`, taking every other copy of
        the same letter into account. Returns the positions it consumed.
        """
        c = guess[i]
        self._words.does_not_exist(c, i)

        y_count = g_count = 0
        same: Set[int] = set()
        for j, (gc, f) in enumerate(zip(guess, codes)):
            if gc != c:
                continue
            same.add(j)
            if f == Feedback.YELLOW:
                self._words.does_not_exist(c, j)
                y_count += 1
            elif f == Feedback.GREEN:
                self._words.exists(c, j)
                g_count += 1

        if y_count == 0 and g_count == 0:
            self._words.does_not_exist(c)
        # Two separate ceilings; each is a valid upper bound on its own.
        if y_count > 0:
            self._words.remove_if_count_at_least(c, y_count + 1)
        if g_count > 0:
            self._words.remove_if_count_at_least(c, g_count + 1)
        return same

    # -- queries -------------------------------------------------------------

    @property
    def word_size(self) -> int:
        return self._word_size

    @property
    def store(self) -> Words:
        return self._words

    def words(self) -> List[str]:
        """All surviving candidates, in the store's order."""
        return self._words.all()

    def n_words(self, n: int) -> List[str]:
        """The first `n` surviving candidates (fewer if fewer remain)."""
        return self._words.take(n)

    def size(self) -> int:
        return self._words.size()

    def __repr__(self) -> str:
        return f"Wordle(word_size={self._word_size}, words={self._words!r})"
