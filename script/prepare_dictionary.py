"""
Build an N-letter frequency dictionary from a `word,count` CSV.

Features:
- Keeps lowercase alphabetic words of exactly N letters (input is lowercased).
- Skips a header row (any line whose count column is not an integer).
- De-duplicates (first occurrence wins) while preserving input order.
- Sorts by count descending (stable, so ties keep input order), which is the
  order the frequency-ranked store serves suggestions in.

Usage:
    python -m script.prepare_dictionary --in unigram_freq.csv --N 5 \
        --out data/5_words_freq.txt
"""

import argparse
from pathlib import Path

from wordlenarrow.datasets import read_lines, write_lines


def parse_rows(lines: list[str], N: int) -> list[tuple[str, int]]:
    seen, out = set(), []
    for ln in lines:
        word, sep, count = ln.partition(",")
        word = word.strip().lower()
        if not sep or not count.strip().isdigit():
            continue
        if len(word) != N or not word.isalpha() or word in seen:
            continue
        seen.add(word)
        out.append((word, int(count.strip())))
    return out


def main(argv=None):
    ap = argparse.ArgumentParser(description="Build an N-letter word,count dictionary sorted by frequency.")
    ap.add_argument("--in", dest="inp", required=True, help="input CSV with word,count rows")
    ap.add_argument("--out", dest="out", help="output file (default: <N>_words_freq.txt next to input)")
    ap.add_argument("--N", type=int, default=5, help="word length")
    args = ap.parse_args(argv)

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp.with_name(f"{args.N}_words_freq.txt")

    lines = read_lines(inp)
    rows = sorted(parse_rows(lines, args.N), key=lambda r: -r[1])
    write_lines((f"{w},{c}" for w, c in rows), outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(rows)} words)")


if __name__ == "__main__":
    main()
