from __future__ import annotations
from typing import Iterable, List
from .base import Entry, Words, REGISTRY, register

from .plain import PlainWords  # noqa: F401
from .frequent import FrequentWords  # noqa: F401

DEFAULT_STORE = FrequentWords.id


def create_words(store_id: str, entries: Iterable[Entry], word_size: int) -> Words:
    """
    Factory: instantiate a registered candidate store by id.
    """
    try:
        cls = REGISTRY[store_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown store id: {store_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(entries, word_size)


def get_store_ids() -> List[str]:
    """
    Return all registered store ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["Words", "PlainWords", "FrequentWords", "DEFAULT_STORE", "create_words", "get_store_ids",
           "register"]
