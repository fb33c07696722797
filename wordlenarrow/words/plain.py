"""
Plain candidate store.

Keeps surviving words in a list in dictionary (insertion) order. Frequencies,
if the dictionary carries them, are dropped on construction.
"""

from __future__ import annotations

from typing import Callable, Iterable, List

from .base import Entry, Words, register, words_of


@register
class PlainWords(Words):
    id = "plain"
    name = "Plain list"

    def __init__(self, entries: Iterable[Entry], word_size: int = 5):
        super().__init__(word_size)
        # Own working copy; mismatched lengths never enter the store.
        self._words: List[str] = [w for w in words_of(entries) if self._keeps(w)]

    def _filter(self, drop: Callable[[str], bool]) -> None:
        self._words = [w for w in self._words if not drop(w)]

    def all(self) -> List[str]:
        return list(self._words)

    def size(self) -> int:
        return len(self._words)
