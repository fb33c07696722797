from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List, Tuple

from wordlenarrow.errors import InvalidArgument

log = logging.getLogger(__name__)

SEPARATOR = ","


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def parse_entry(line: str, lineno: int = 0) -> Tuple[str, int]:
    """
    Parse one dictionary line: "word" or "word,count".

    The word is stripped and lowercased; a bare word gets count 0.
    Raises InvalidArgument if the count is not a non-negative integer.
    """
    word, sep, count = line.partition(SEPARATOR)
    word = word.strip().lower()
    if not sep:
        return word, 0
    try:
        n = int(count.strip())
    except ValueError as e:
        raise InvalidArgument(f"line {lineno}: invalid frequency [{count.strip()}] for [{word}]") from e
    if n < 0:
        raise InvalidArgument(f"line {lineno}: frequency for [{word}] must be non-negative; got {n}")
    return word, n


def load_dictionary(p: Path | str, word_size: int | None = None) -> List[Tuple[str, int]]:
    """
    Load a dictionary file into (word, count) pairs, in file order.

    - blank lines are skipped
    - duplicate words keep their first occurrence
    - with `word_size`, words of any other length are dropped here already
      (the stores would drop them anyway)
    """
    lines = read_lines(p)
    out: List[Tuple[str, int]] = []
    seen = set()
    for lineno, raw in enumerate(lines, start=1):
        if not raw.strip():
            continue
        word, count = parse_entry(raw, lineno)
        if not word or word in seen:
            continue
        if word_size is not None and len(word) != word_size:
            continue
        seen.add(word)
        out.append((word, count))

    log.info("Read %d dictionary entries from %s", len(out), p)
    return out
