import random

import pytest

from wordlenarrow.client import WordleClient, sample_words
from wordlenarrow.engine import Wordle
from wordlenarrow.errors import InvalidArgument


def _scripted(replies):
    it = iter(replies)

    def _input(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError(prompt) from None

    return _input


def _client(entries, replies, *, word_size=5, display_limit=3, auto=False):
    out = []
    wordle = Wordle.from_entries(word_size, entries)
    client = WordleClient(wordle, display_limit, auto=auto, rng=random.Random(0),
                          input_fn=_scripted(replies), output_fn=out.append)
    return client, out


def test_sample_words_keeps_rank_order():
    words = [f"w{i:02d}" for i in range(20)]
    picked = sample_words(words, 5, random.Random(1))
    assert len(picked) == 5
    assert picked == sorted(picked)
    assert sample_words(words[:3], 5, random.Random(1)) == words[:3]


def test_sample_words_is_deterministic_with_seed():
    words = [f"w{i:02d}" for i in range(50)]
    assert sample_words(words, 7, random.Random(42)) == sample_words(words, 7, random.Random(42))


def test_run_until_found(freq_entries):
    client, out = _client(freq_entries, ["stink", "bbbgg", "drunk", "bgbgg", "crank", "ggggg"])
    assert client.run() is True
    assert out[0] == "Welcome! word size is: [5], display limit is: [3]"
    assert out[1].startswith(f"There are {len(freq_entries)} possible words")
    assert "Only following 3 possible words remaining: " in out
    assert out[-1] == "Congratulations! you eventually found the word!"
    assert client.wordle.size() == 3


def test_run_reports_exhaustion(freq_entries):
    client, out = _client(freq_entries, ["stink", "bbbbb", "plank", "ggggb"])
    assert client.run() is False
    assert out[-1] == "Unable to find any suitable words from dictionary"
    assert client.wordle.size() == 0


def test_invalid_input_is_reprompted(freq_entries):
    client, out = _client(freq_entries, ["toolong", "st1nk", "stink", "bbbgx", "bbb", "bbbgg",
                                         "crank", "ggggg"])
    assert client.run() is True
    assert sum(1 for line in out if line.startswith("Invalid input")) == 4


def test_status_typed_as_word_gets_another_chance(small_words):
    client, out = _client(small_words, ["byg", "y", "abf", "ggb", "abr", "ggg"], word_size=3)
    assert client.run() is True
    assert client.wordle.words() == ["abc", "abr"]


def test_status_looking_word_can_be_confirmed():
    # 'bgy' is not a real status here: the user says it really was the word
    client, out = _client(["bgy", "acd"], ["bgy", "n", "bbb", "acd", "ggg"], word_size=3)
    assert client.run() is True
    assert client.wordle.words() == ["acd"]


def test_auto_mode_plays_top_candidate(freq_entries):
    client, out = _client(freq_entries, ["bbbbb", "ggggg"], auto=True)
    assert client.run() is True
    assert "Try this word: about" in out
    assert "about" not in client.wordle.words()


def test_eof_propagates(small_words):
    client, _ = _client(small_words, [], word_size=3)
    with pytest.raises(EOFError):
        client.run()


@pytest.mark.parametrize("auto", [True, False])
def test_empty_dictionary_stops_before_first_guess(auto):
    # no 5-letter words: nothing to suggest and nothing to read
    client, out = _client(["abc", "abd"], [], auto=auto)
    assert client.run() is False
    assert out[-1] == "Unable to find any suitable words from dictionary"
    assert not any(line.startswith("Try this word") for line in out)


def test_non_ascii_letters_are_rejected(small_words):
    client, out = _client(small_words, ["abé", "abf", "ggb", "abr", "ggg"], word_size=3)
    assert client.run() is True
    assert "Invalid input [abé], expected exactly [3] valid characters" in out


def test_negative_display_limit_is_rejected(small_words):
    with pytest.raises(InvalidArgument):
        _client(small_words, [], word_size=3, display_limit=-1)


def test_zero_display_limit_lists_nothing(small_words):
    client, out = _client(small_words, ["abf", "ggb", "abr", "ggg"], word_size=3, display_limit=0)
    assert client.run() is True
    assert "There are 5 possible words, try one of these: " in out
    assert not any(w in out for w in small_words)
