"""
Dictionary validator for wordle-narrow.

What this module does:
- Validate a dictionary file of `word` or `word,count` lines for length N.
- Enforce formatting rules (lowercase, a–z only, exact length N, one per line,
  non-negative integer counts).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Check that counts are in descending order (what the frequency-ranked store
  expects a frequency file to look like).
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordlenarrow.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary(5, "data/5_words_freq.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordlenarrow.errors import InvalidArgument

from .io import parse_entry


@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one dictionary file."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID entries
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    has_frequencies: bool
    frequency_sorted: bool
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[Tuple[str, int]], int, bool]:
    """
    Load entries from a dictionary file and validate them.

    Rules:
      - one entry per line, `word` or `word,count`
      - word must be lowercase a–z with exact length N
      - count (if present) must be a non-negative integer
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_entries, invalid_count, any_line_had_a_count)
    """
    valid: List[Tuple[str, int]] = []
    invalid = 0
    has_freq = False

    with path.open("r", encoding="utf-8") as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.strip()
            if not line:
                invalid += 1
                continue
            word = line.partition(",")[0].strip()
            try:
                wl, count = parse_entry(line, lineno)
            except InvalidArgument:
                invalid += 1
                continue
            # require already-lowercase & alphabetic & exact length
            if wl == word and wl.isalpha() and len(wl) == N:
                valid.append((wl, count))
                has_freq = has_freq or "," in line
            else:
                invalid += 1

    return valid, invalid, has_freq


def validate_dictionary(N: int, path: str) -> Dict:
    """
    Validate a dictionary file for word length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport) with counts,
        SHA-256, duplicate/invalid flags, the frequency-order check, a strict
        `passed` boolean and a list of `issues`.
    """
    p = Path(path)
    issues: List[str] = []

    if not p.exists():
        issues.append(f"dictionary file not found: {path}")
        rep = DictionaryReport(N, path, False, 0, 0, 0, "", False, False, False, issues)
        return asdict(rep)

    entries, invalid, has_freq = _load_and_check(p, N)
    counts = [c for _, c in entries]
    unique = len({w for w, _ in entries})
    freq_sorted = all(a >= b for a, b in zip(counts, counts[1:]))

    if not entries:
        issues.append("dictionary contains 0 valid words")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid line(s)")
    if unique != len(entries):
        issues.append("dictionary contains duplicate words")
    if has_freq and not freq_sorted:
        issues.append("frequencies are not in descending order")

    passed = bool(entries) and invalid == 0 and unique == len(entries) and (freq_sorted or not has_freq)

    rep = DictionaryReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(entries),
        unique_count=unique,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        has_frequencies=has_freq,
        frequency_sorted=freq_sorted,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=7872 (uniq=7872, invalid=0, sha=abc123...) | freq_sorted=True | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) "
        f"| freq_sorted={report['frequency_sorted']} | {status}"
    )
