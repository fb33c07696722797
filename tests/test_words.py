import pytest

from wordlenarrow.errors import IndexOutOfRange, InvalidArgument
from wordlenarrow.words import FrequentWords, PlainWords, create_words, get_store_ids


def _is_descending(data):
    counts = [c for _, c in data]
    return all(a >= b for a, b in zip(counts, counts[1:]))


# --- construction ---

@pytest.mark.parametrize("cls", [PlainWords, FrequentWords])
def test_drops_words_of_other_lengths(cls):
    words = cls(["abc", "abcd", "ab", "xyz", ""], 3)
    assert words.all() == ["abc", "xyz"]
    assert words.size() == 2 and len(words) == 2
    assert words.word_size == 3


@pytest.mark.parametrize("cls", [PlainWords, FrequentWords])
@pytest.mark.parametrize("bad", [0, -1, 2.5, True, "5"])
def test_rejects_bad_word_size(cls, bad):
    with pytest.raises(InvalidArgument):
        cls(["abc"], bad)


def test_store_owns_a_copy_of_its_input():
    src = ["abc", "abd"]
    words = PlainWords(src, 3)
    words.does_not_exist("c")
    assert src == ["abc", "abd"]
    assert words.all() == ["abd"]


def test_frequent_sorts_descending_and_keeps_ties_in_input_order():
    words = FrequentWords([("bbb", 1), ("aaa", 5), ("ccc", 5), ("ddd", 9)], 3)
    assert words.all() == ["ddd", "aaa", "ccc", "bbb"]
    assert words.data()[0] == ("ddd", 9)


def test_frequent_accepts_bare_words_with_zero_count():
    words = FrequentWords(["xyz", ("abc", 3)], 3)
    assert words.data() == [("abc", 3), ("xyz", 0)]


def test_frequent_rejects_negative_count():
    with pytest.raises(InvalidArgument):
        FrequentWords([("abc", -1)], 3)


def test_plain_accepts_pairs_and_drops_counts():
    words = PlainWords([("abc", 3), "xyz"], 3)
    assert words.all() == ["abc", "xyz"]


# --- constraint primitives ---

@pytest.mark.parametrize("cls", [PlainWords, FrequentWords])
def test_exists_anywhere_and_at_position(cls, words_5):
    words = cls(words_5, 5)
    words.exists("a")
    assert words.size() > 0
    assert all("a" in w for w in words)

    words.exists("a", 1)
    assert all(w[1] == "a" for w in words)


@pytest.mark.parametrize("cls", [PlainWords, FrequentWords])
def test_does_not_exist_anywhere_and_at_position(cls, words_5):
    words = cls(words_5, 5)
    words.does_not_exist("b", 1)
    assert all(w[1] != "b" for w in words)

    words.does_not_exist("e")
    assert words.size() > 0
    assert all("e" not in w for w in words)


@pytest.mark.parametrize("cls", [PlainWords, FrequentWords])
def test_remove_if_count_at_least(cls):
    words = cls(["apple", "plane", "ppppp", "crane"], 5)
    words.remove_if_count_at_least("p", 2)
    assert words.all() == ["plane", "crane"]

    words.remove_if_count_at_least("p", 1)
    assert words.all() == ["crane"]

    words.remove_if_count_at_least("z", 0)  # every word has >= 0 z's
    assert words.size() == 0


@pytest.mark.parametrize("cls", [PlainWords, FrequentWords])
def test_no_match_is_a_silent_noop(cls, small_words):
    words = cls(small_words, 3)
    words.does_not_exist("z")
    words.remove_if_count_at_least("z", 1)
    assert words.all() == small_words

    words.exists("z")
    assert words.size() == 0
    words.exists("a", 0)  # still fine on an empty store
    assert words.all() == []


@pytest.mark.parametrize("cls", [PlainWords, FrequentWords])
@pytest.mark.parametrize("pos", [3, 4, -1])
def test_positional_ops_reject_out_of_range(cls, small_words, pos):
    words = cls(small_words, 3)
    with pytest.raises(IndexOutOfRange, match="must be less than word size"):
        words.exists("a", pos)
    with pytest.raises(IndexOutOfRange):
        words.does_not_exist("a", pos)
    assert words.all() == small_words


@pytest.mark.parametrize("cls", [PlainWords, FrequentWords])
@pytest.mark.parametrize("c", ["", "ab", 7, None])
def test_char_argument_must_be_one_character(cls, small_words, c):
    words = cls(small_words, 3)
    with pytest.raises(InvalidArgument):
        words.exists(c)


def test_index_out_of_range_is_an_index_error(small_words):
    with pytest.raises(IndexError):
        PlainWords(small_words, 3).exists("a", 3)


# --- queries ---

@pytest.mark.parametrize("cls", [PlainWords, FrequentWords])
def test_take_is_a_prefix_of_all(cls, freq_entries):
    words = cls(freq_entries, 5)
    assert words.take(3) == words.all()[:3]
    assert words.take(0) == []
    assert words.take(10_000) == words.all()
    with pytest.raises(InvalidArgument):
        words.take(-1)


def test_frequent_take_returns_highest_counts(freq_entries):
    words = FrequentWords(list(reversed(freq_entries)), 5)
    assert words.take(3) == ["about", "other", "which"]


def test_frequent_order_survives_every_operation(freq_entries):
    words = FrequentWords(freq_entries, 5)
    ops = [
        lambda: words.does_not_exist("z"),
        lambda: words.exists("n"),
        lambda: words.does_not_exist("i", 2),
        lambda: words.remove_if_count_at_least("n", 2),
        lambda: words.exists("k", 4),
    ]
    for op in ops:
        before = words.size()
        op()
        assert words.size() <= before
        assert _is_descending(words.data())
        survivors = words.all()
        # relative order of survivors matches the dictionary ranking
        ranked = [w for w, _ in freq_entries if w in survivors]
        assert survivors == ranked
    assert words.take(2) == words.all()[:2]


def test_container_protocol(small_words):
    words = PlainWords(small_words, 3)
    assert "abc" in words and "zzz" not in words
    assert list(words) == small_words
    assert "PlainWords(word_size=3, size=5)" == repr(words)


# --- registry ---

def test_registry_and_factory(small_words):
    assert get_store_ids() == ["frequent", "plain"]
    assert isinstance(create_words("plain", small_words, 3), PlainWords)
    assert isinstance(create_words("frequent", small_words, 3), FrequentWords)
    with pytest.raises(ValueError, match="Unknown store id"):
        create_words("nope", small_words, 3)
