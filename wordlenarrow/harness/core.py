"""
Evaluation harness core primitives.

- run_case:  play one game against a known answer with a fresh solver.
- run_batch: play many games in sequence (optionally a sample prefix).
- summarize: numpy summary of a batch (success rate, guess distribution).

Every turn plays the top-ranked surviving candidate, scores it against the
hidden answer locally and feeds the status back through Wordle.update, so a
batch run exercises exactly the constraint logic the interactive client uses.

These functions are UI-agnostic so they can be reused by a CLI app, a
notebook, or tests without changes.
"""

from __future__ import annotations
import logging
import time
from typing import Callable, Dict, Iterable, List, Tuple

import numpy as np
from tqdm import tqdm

from wordlenarrow.engine import Wordle, is_found, score
from wordlenarrow.words import DEFAULT_STORE
from wordlenarrow.words.base import Entry

log = logging.getLogger(__name__)

# Wordle's own turn budget; run_case accepts None for "until exhausted".
WORDLE_MAX_TURNS = 6


def _check_turns(max_turns: int | None) -> None:
    if max_turns is not None and max_turns <= 0:
        raise ValueError(f"max_turns must be positive (or None); got {max_turns}")


def run_case(
        answer: str,
        *,
        entries: Iterable[Entry],
        word_size: int,
        store_id: str = DEFAULT_STORE,
        max_turns: int | None = WORDLE_MAX_TURNS,
) -> Dict:
    """
    Play one game until the answer is guessed, the candidates run out, or
    the turn budget is spent.

    Args:
        answer:     the hidden word for this case
        entries:    dictionary entries (words or (word, count) pairs)
        word_size:  word length
        store_id:   which candidate store backs the solver
        max_turns:  turn budget, or None for no limit

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float), remaining (int),
            history (list[(guess, status)]), answer (str)
    """
    _check_turns(max_turns)
    wordle = Wordle.from_entries(word_size, entries, store_id)
    history: List[Tuple[str, str]] = []
    success = False

    t0 = time.perf_counter()
    turn = 0
    while wordle.size() > 0 and (max_turns is None or turn < max_turns):
        turn += 1
        guess = wordle.n_words(1)[0]
        status = score(guess, answer)
        history.append((guess, status))

        if is_found(status):
            success = True
            break

        wordle.update(guess, status)

    dt = (time.perf_counter() - t0) * 1000.0
    if not success:
        log.debug("failed on %s after %d guesses (%d left)", answer, len(history), wordle.size())
    return {
        "success": success, "guesses": len(history), "time_ms": dt,
        "remaining": wordle.size(), "history": history, "answer": answer,
    }


def run_batch(
        answers: List[str],
        *,
        entries: List[Entry],
        word_size: int,
        store_id: str = DEFAULT_STORE,
        max_turns: int | None = WORDLE_MAX_TURNS,
        sample: int | None = None,
        progress: bool = False,
        on_case: Callable[[int, int, Dict], None] | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K answers
    (after filtering to length word_size) are used to speed up quick experiments.

    progress=True wraps the games in a tqdm bar. on_case(idx, total, result) is
    called after every game (idx is 1-based) for callers that report progress
    their own way.
    """
    _check_turns(max_turns)

    pool = [w for w in answers if len(w) == word_size]
    if sample is not None:
        pool = pool[:sample]

    iterator = tqdm(pool, ncols=80, desc=store_id, unit="game") if progress else pool
    out: List[Dict] = []
    total = len(pool)
    for idx, ans in enumerate(iterator, 1):
        r = run_case(ans, entries=entries, word_size=word_size, store_id=store_id, max_turns=max_turns)
        r["store_id"] = store_id
        out.append(r)
        if on_case is not None:
            on_case(idx, total, r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch: success rate over all cases, guess statistics over the
    successful ones (NaN when nothing was solved).
    """
    n = len(results)
    solved = np.array([r["guesses"] for r in results if r["success"]], dtype=float)
    if solved.size:
        mean, median, p90, worst = (float(np.mean(solved)), float(np.median(solved)),
                                    float(np.percentile(solved, 90)), int(np.max(solved)))
    else:
        mean = median = p90 = float("nan")
        worst = 0
    return {
        "num_cases": n,
        "num_success": int(solved.size),
        "success_rate": (solved.size / n) if n else 0.0,
        "mean_guesses": mean,
        "median_guesses": median,
        "p90_guesses": p90,
        "max_guesses": worst,
    }
