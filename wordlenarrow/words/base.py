"""
Candidate store base class and registry.

A store holds the words that are still possible answers and exposes the
filtering primitives the solver builds its constraints from:

  - exists(c)                 : keep words containing c
  - exists(c, pos)            : keep words with c at pos
  - does_not_exist(c)         : keep words without c
  - does_not_exist(c, pos)    : keep words without c at pos
  - remove_if_count_at_least  : drop words with c occurring n+ times

Every primitive only removes entries; nothing is ever added or rewritten
after construction. Concrete stores implement three hooks (`_filter`,
`all`, `size`) and register themselves with @register under an `id`.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Iterator, List, Tuple, Type, Union

from wordlenarrow.errors import IndexOutOfRange, InvalidArgument

log = logging.getLogger(__name__)

# A dictionary entry: a bare word or a (word, frequency) pair.
Entry = Union[str, Tuple[str, int]]

# ---- Global store registry ----
REGISTRY: Dict[str, Type["Words"]] = {}


def register(cls: Type["Words"]) -> Type["Words"]:
    """
    Decorator: @register on a store class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate store id: {sid}")
    REGISTRY[sid] = cls
    return cls


def validate_word_size(word_size: int) -> int:
    """Word sizes must be positive integers (bools are rejected too)."""
    if isinstance(word_size, bool) or not isinstance(word_size, int) or word_size <= 0:
        raise InvalidArgument(f"word size must be a positive integer; got {word_size!r}")
    return word_size


def split_entry(entry: Entry) -> Tuple[str, int]:
    """
    Normalize a dictionary entry into (word, count); bare words count as 0.
    """
    if isinstance(entry, str):
        return entry, 0
    word, count = entry
    count = int(count)
    if count < 0:
        raise InvalidArgument(f"frequency of [{word}] must be non-negative; got {count}")
    return word, count


# ---- Base class that stores inherit ----
class Words:
    id = "base"
    name = "Base"

    def __init__(self, word_size: int):
        self._word_size = validate_word_size(word_size)

    # -- hooks for subclasses ------------------------------------------------

    def _filter(self, drop: Callable[[str], bool]) -> None:
        """Remove, in place and order-preserving, every entry whose word matches `drop`."""
        raise NotImplementedError("Override in subclass")

    def all(self) -> List[str]:
        raise NotImplementedError("Override in subclass")

    def size(self) -> int:
        raise NotImplementedError("Override in subclass")

    # -- constraint primitives -----------------------------------------------

    def exists(self, c: str, pos: int | None = None) -> None:
        """
        Keep only words containing `c` (anywhere, or exactly at `pos`).
        """
        c = self._validate_char(c)
        if pos is None:
            self._apply(f"exists({c!r})", lambda w: c not in w)
        else:
            self._validate_index(pos)
            self._apply(f"exists({c!r}, {pos})", lambda w: w[pos] != c)

    def does_not_exist(self, c: str, pos: int | None = None) -> None:
        """
        Keep only words that do not contain `c` (anywhere, or at `pos`).
        """
        c = self._validate_char(c)
        if pos is None:
            self._apply(f"does_not_exist({c!r})", lambda w: c in w)
        else:
            self._validate_index(pos)
            self._apply(f"does_not_exist({c!r}, {pos})", lambda w: w[pos] == c)

    def remove_if_count_at_least(self, c: str, n: int) -> None:
        """
        Drop every word in which `c` occurs `n` or more times.
        n == 0 therefore empties the store.
        """
        c = self._validate_char(c)
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise InvalidArgument(f"occurrence count must be a non-negative integer; got {n!r}")
        self._apply(f"remove_if_count_at_least({c!r}, {n})", lambda w: w.count(c) >= n)

    # -- queries -------------------------------------------------------------

    @property
    def word_size(self) -> int:
        return self._word_size

    def take(self, n: int) -> List[str]:
        """
        Up to `n` surviving words, as a prefix of all().
        """
        self._validate_take(n)
        return self.all()[:n]

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[str]:
        return iter(self.all())

    def __contains__(self, word: object) -> bool:
        return word in self.all()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(word_size={self._word_size}, size={self.size()})"

    # -- helpers -------------------------------------------------------------

    def _apply(self, label: str, drop: Callable[[str], bool]) -> None:
        before = self.size()
        self._filter(drop)
        log.debug("%s %s: %d -> %d", self.id, label, before, self.size())

    def _keeps(self, word: str) -> bool:
        return len(word) == self._word_size

    def _validate_index(self, pos: int) -> None:
        if isinstance(pos, bool) or not isinstance(pos, int):
            raise IndexOutOfRange(f"Index [{pos!r}] must be an integer")
        if not 0 <= pos < self._word_size:
            raise IndexOutOfRange(f"Index [{pos}] must be less than word size [{self._word_size}]")

    @staticmethod
    def _validate_take(n: int) -> None:
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise InvalidArgument(f"number of requested words must be a non-negative integer; got {n!r}")

    @staticmethod
    def _validate_char(c: str) -> str:
        if not isinstance(c, str) or len(c) != 1:
            raise InvalidArgument(f"expected a single character; got {c!r}")
        return c


def words_of(entries: Iterable[Entry]) -> List[str]:
    """Strip frequencies off a sequence of entries."""
    return [split_entry(e)[0] for e in entries]
