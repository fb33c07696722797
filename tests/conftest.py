import pytest

# Small 5-letter frequency dictionary, highest count first.
FREQ_5 = [
    ("about", 1226734006), ("other", 978481319), ("which", 810514085), ("their", 782849411),
    ("there", 701170205), ("could", 512235356), ("would", 493049310), ("water", 164036451),
    ("think", 160315380), ("thank", 98233514), ("apple", 47371010), ("level", 44830372),
    ("drink", 31230115), ("blank", 30235114), ("crane", 20035172), ("frank", 18452217),
    ("raise", 17451382), ("trace", 16732811), ("stare", 8417212), ("lemon", 7983771),
    ("plank", 6510114), ("crank", 5993013), ("sleep", 5844132), ("trunk", 5300114),
    ("drunk", 4887733), ("prank", 3017226), ("chunk", 2985118), ("brink", 2603317),
    ("blink", 2211780), ("stink", 1790330), ("shank", 1444215), ("skunk", 1303302),
    ("clink", 998115), ("flunk", 803312), ("plunk", 512019), ("spunk", 440178),
    ("knock", 401177), ("scoop", 389102), ("label", 301010), ("lilac", 250002),
    ("lapel", 120111), ("local", 118000), ("llama", 97000), ("lanai", 50001),
]


@pytest.fixture
def freq_entries():
    return list(FREQ_5)


@pytest.fixture
def words_5():
    return [w for w, _ in FREQ_5]


@pytest.fixture
def small_words():
    return ["abc", "bcd", "pqr", "abf", "abr"]
