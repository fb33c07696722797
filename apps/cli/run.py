# apps/cli/run.py
"""
CLI entry point for batch evaluation of the constraint solver.

This script:
  1) Validates the dictionary (prints counts + SHA, checks frequency order).
  2) Loads the dictionary and the list of hidden answers to play against.
  3) Plays every answer (top-ranked candidate each turn, status scored
     locally) with a live progress indicator and writes:
       - CSV:  per-case results + guess/status history columns
       - JSON: manifest with config, dictionary report, summary, git commit
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from wordlenarrow.datasets import load_dictionary, pretty_summary, read_lines, validate_dictionary
from wordlenarrow.harness import (
    WORDLE_MAX_TURNS, git_commit_or_unknown, run_batch, summarize, timestamp_id, write_csv,
    write_manifest,
)
from wordlenarrow.words import DEFAULT_STORE, get_store_ids


def _load_answers(path: str) -> list[str]:
    """
    Read a newline-separated answer list, normalize to lowercase, drop blanks.
    """
    return [w.strip().lower() for w in read_lines(path) if w.strip()]


def _plain_progress(interval: float = 1.0):
    """
    Per-game callback writing `[idx/total] pct | elapsed | ETA` to stderr,
    at most once per `interval` seconds and always for the last game.
    """
    start = time.time()
    last_print = 0.0

    def report(idx: int, total: int, _result: dict) -> None:
        nonlocal last_print
        now = time.time()
        if (now - last_print >= interval) or (idx == total):
            elapsed = now - start
            rate = (idx / elapsed) if elapsed > 0 else 0.0
            remaining = (total - idx) / rate if rate > 0 else 0.0
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(
                f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
            )
            sys.stderr.flush()
            last_print = now

    return report


def main(argv: list[str] | None = None) -> int:
    """
    Parse CLI args, validate the dictionary, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordle-narrow: batch evaluation")
    ap.add_argument("--N", type=int, default=5, help="word length (e.g., 5 or 6)")
    ap.add_argument("--dictionary", default="data/5_words_freq.txt",
                    help="dictionary file: one `word` or `word,count` per line")
    ap.add_argument("--answers", help="hidden answers to play against (default: every dictionary word)")
    ap.add_argument("--store", default=DEFAULT_STORE, choices=get_store_ids(),
                    help="candidate store backing the solver")
    ap.add_argument("--sample", type=int, help="play only the first K answers")
    ap.add_argument("--max-turns", type=int, default=WORDLE_MAX_TURNS,
                    help="turn budget per game (0 = play until found or exhausted)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, plain otherwise)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate the dictionary and print a one-liner summary
    rep = validate_dictionary(args.N, args.dictionary)
    print(pretty_summary(rep))
    if not rep["exists"]:
        print(f"Dictionary not found: {args.dictionary}", file=sys.stderr)
        return 2

    # 2) Load entries and answers
    entries = load_dictionary(args.dictionary, args.N)
    answers = _load_answers(args.answers) if args.answers else [w for w, _ in entries]
    max_turns = args.max_turns or None

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    # 3) Run batch with live progress
    results = run_batch(answers, entries=entries, word_size=args.N, store_id=args.store,
                        max_turns=max_turns, sample=args.sample, progress=(mode == "bar"),
                        on_case=_plain_progress() if mode == "plain" else None)
    if mode == "plain" and results:
        sys.stderr.write("\n")
        sys.stderr.flush()
    summary = summarize(results)

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), N=args.N, max_turns=max_turns)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "num_cases": len(results),
        "store_id": args.store,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(
        f"solved {summary['num_success']}/{summary['num_cases']} "
        f"({100.0 * summary['success_rate']:.1f}%) | mean {summary['mean_guesses']:.3f} "
        f"| median {summary['median_guesses']:.1f} | p90 {summary['p90_guesses']:.1f} "
        f"| max {summary['max_guesses']}"
    )
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
