"""
Interactive Wordle client.

Loop:
  1) show how many candidates remain and a (sampled) handful of them
  2) read the word that was played (auto mode: play the top-ranked candidate)
  3) read the status the game showed for it
  4) stop on all-green, or when the dictionary has nothing left to offer;
     otherwise feed the pair to Wordle.update and go again

Input/output are injectable (`input_fn`, `output_fn`) so the loop can be
driven by a script in tests, and sampling takes a seeded random.Random.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, List, Sequence

from wordlenarrow.engine import ALLOWED_STATUS_CHARS, Wordle, is_found
from wordlenarrow.errors import InvalidArgument

log = logging.getLogger(__name__)

DEFAULT_DISPLAY_LIMIT = 10


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def sample_words(words: Sequence[str], limit: int, rng: random.Random) -> List[str]:
    """
    Pick at most `limit` words for display.

    Returns every word when there are few enough; otherwise a random sample,
    kept in the order the store ranked them.
    """
    if len(words) <= limit:
        return list(words)
    picked = sorted(rng.sample(range(len(words)), limit))
    return [words[i] for i in picked]


class WordleClient:
    def __init__(
            self,
            wordle: Wordle,
            display_limit: int = DEFAULT_DISPLAY_LIMIT,
            *,
            auto: bool = False,
            rng: random.Random | None = None,
            input_fn: Callable[[str], str] = input,
            output_fn: Callable[[str], None] = print,
    ):
        if display_limit < 0:
            raise InvalidArgument(f"display limit must be non-negative; got {display_limit}")
        self.wordle = wordle
        self.display_limit = display_limit
        self.auto = auto
        self.rng = rng or random.Random()
        self._input = input_fn
        self._output = output_fn
        self._output(f"Welcome! word size is: [{wordle.word_size}], display limit is: [{display_limit}]")

    def run(self) -> bool:
        """
        Play until the word is found (True) or no candidates remain (False).
        """
        self.print_update()
        if self.wordle.size() == 0:
            self._output("Unable to find any suitable words from dictionary")
            return False

        word = self.get_word()
        status = self.get_status()
        while not is_found(status):
            self.wordle.update(word, status)
            if self.wordle.size() == 0:
                self._output("Unable to find any suitable words from dictionary")
                return False

            self.print_update()
            word = self.get_word()
            status = self.get_status()

        self._output("Congratulations! you eventually found the word!")
        return True

    # -- input -------------------------------------------------------------

    def get_word(self) -> str:
        """
        The word that was played. In auto mode that is the top-ranked
        candidate; otherwise it is read from the user, with one extra chance
        if what they typed looks like a status string.
        """
        if self.auto:
            word = self.wordle.n_words(1)[0]
            self._output(f"Try this word: {word}")
            return word

        word = self._read("Enter the selected word: ", _is_letter)
        if all(ch in ALLOWED_STATUS_CHARS for ch in word):
            ans = self._read("Did you just enter status instead of words (y/n)? ", lambda ch: ch in "yn", size=1)
            if ans == "y":
                return self._read("Okay! Try again (last chance though)! Enter the selected word: ", _is_letter)
        return word

    def get_status(self) -> str:
        return self._read("Enter the status of previous word: ", lambda ch: ch in ALLOWED_STATUS_CHARS)

    def _read(self, prompt: str, valid: Callable[[str], bool], size: int | None = None) -> str:
        """Prompt until the reply has `size` characters, all passing `valid`."""
        size = self.wordle.word_size if size is None else size
        while True:
            reply = self._input(prompt).strip().lower()
            if len(reply) == size and all(valid(ch) for ch in reply):
                return reply
            log.debug("rejected input %r", reply)
            self._output(f"Invalid input [{reply}], expected exactly [{size}] valid characters")

    # -- output ------------------------------------------------------------

    def print_update(self) -> None:
        words = self.wordle.words()
        if len(words) > self.display_limit:
            self._output(f"There are {len(words)} possible words, try one of these: ")
        else:
            self._output(f"Only following {len(words)} possible words remaining: ")

        for word in sample_words(words, self.display_limit, self.rng):
            self._output(word)
