"""
I/O utilities for evaluation runs.

Responsibilities:
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import math
import subprocess
import datetime as dt


def write_csv(results: List[Dict], path: str, N: int, max_turns: int | None = None) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      store, N, answer, success, guesses, remaining, time_ms,
      guess_1, patt_1, ..., guess_T, patt_T

    T is `max_turns`, or the longest history in `results` when no budget
    was set.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    turns = max_turns if max_turns is not None else max((len(r.get("history", [])) for r in results), default=0)
    fields = ["store", "N", "answer", "success", "guesses", "remaining", "time_ms"]
    for i in range(1, turns + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "store": r.get("store_id", "?"),
                "N": N,
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "remaining": r.get("remaining", ""),
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, turns + 1):
                if i <= len(hist):
                    g, patt = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = patt
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""

            w.writerow(row)

    return str(p)


def _json_safe(obj):
    # NaN is not valid JSON; summaries use it for "nothing solved".
    if isinstance(obj, float) and math.isnan(obj):
        return None
    if isinstance(obj, dict):
        return {k: _json_safe(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_json_safe(v) for v in obj]
    return obj


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Dump a batch-run manifest as indented JSON and return the path.

    apps/cli/run.py writes these keys:
      - run_id, git_commit
      - config:     the parsed CLI args (N, dictionary, answers, store, sample,
                    max_turns, outdir, progress)
      - dictionary: the DictionaryReport dict from validate_dictionary
      - num_cases, store_id
      - summary:    summarize(...) output; NaN guess stats become null
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(_json_safe(manifest), indent=2) + "\n", encoding="utf-8")
    return str(p)


def timestamp_id(now: dt.datetime | None = None) -> str:
    """UTC run id used in report file names (run_<id>.csv), e.g. 20250820T024121Z."""
    now = now or dt.datetime.now(dt.timezone.utc)
    return now.astimezone(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown(cwd: str | None = None) -> str:
    """Short HEAD hash stamped into the manifest; 'unknown' outside a git checkout."""
    try:
        out = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            cwd=cwd, check=True, capture_output=True, text=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.stdout.strip() or "unknown"
