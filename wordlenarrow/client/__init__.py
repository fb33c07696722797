from .core import DEFAULT_DISPLAY_LIMIT, WordleClient, sample_words

__all__ = ["DEFAULT_DISPLAY_LIMIT", "WordleClient", "sample_words"]
