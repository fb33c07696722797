"""
Frequency-ranked candidate store.

Entries are (word, count) pairs kept in descending order of count, so the
most common surviving words are always at the front:

  - take(n) is a plain prefix of the maintained order (no re-ranking)
  - every filter is a stable list comprehension, so the order survives
    any sequence of removals without sorting again

The constructor establishes the order once with a stable sort; words with
equal counts keep their dictionary order. Bare words (no frequency) rank
with count 0.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Tuple

from .base import Entry, Words, register, split_entry

WordCount = Tuple[str, int]


@register
class FrequentWords(Words):
    id = "frequent"
    name = "Frequency ranked"

    def __init__(self, entries: Iterable[Entry], word_size: int = 5):
        super().__init__(word_size)
        kept = [split_entry(e) for e in entries]
        kept = [(w, n) for w, n in kept if self._keeps(w)]
        self._entries: List[WordCount] = sorted(kept, key=lambda e: -e[1])

    def _filter(self, drop: Callable[[str], bool]) -> None:
        self._entries = [e for e in self._entries if not drop(e[0])]

    def data(self) -> List[WordCount]:
        """Surviving (word, count) pairs, highest count first."""
        return list(self._entries)

    def all(self) -> List[str]:
        return [w for w, _ in self._entries]

    def take(self, n: int) -> List[str]:
        self._validate_take(n)
        return [w for w, _ in self._entries[:n]]

    def size(self) -> int:
        return len(self._entries)
