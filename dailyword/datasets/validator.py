"""
Word-list validator for dailyword.

Checks a (targets, dictionary) pair before a catalog is built from it:
- formatting rules (lowercase, a–z only, exact length N, one per line)
- duplicates and invalid lines; SHA-256 of the raw files
- every target is also an accepted guess (targets ⊆ dictionary)

Duplicate targets are reported but do not fail validation: a word may
legitimately come back on a later day.

Typical use:
    from dailyword.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(5, "dailyword/datasets/data/targets_5.txt",
                                "dailyword/datasets/data/dictionary_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class ListReport:
    """Diagnostics for one word-list file."""
    path: str
    exists: bool
    count: int           # valid words, in file order
    sha256: str          # of the raw bytes; "" if missing
    unique_count: int
    invalid_lines: int


@dataclass
class ValidationReport:
    N: int
    targets: ListReport
    dictionary: ListReport
    targets_subset_dictionary: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Split a list into (valid_words, invalid_count).

    Blank lines are skipped silently here (a trailing newline is normal);
    anything else that isn't N lowercase letters counts as invalid.
    """
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            if w == w.lower() and w.isascii() and w.isalpha() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1
    return valid, invalid


def _missing_report(path: str) -> ListReport:
    return ListReport(path, False, 0, "", 0, 0)


def validate_wordlists(N: int, targets_path: str, dictionary_path: str) -> Dict:
    """
    Validate the targets/dictionary lists for word length N.

    Returns a JSON-serializable dict (ValidationReport schema). `passed` is
    strict: both lists non-empty, no invalid lines, targets ⊆ dictionary.
    """
    issues: List[str] = []
    tgt_p = Path(targets_path)
    dic_p = Path(dictionary_path)

    if not tgt_p.exists() or not dic_p.exists():
        if not tgt_p.exists():
            issues.append(f"targets file not found: {targets_path}")
        if not dic_p.exists():
            issues.append(f"dictionary file not found: {dictionary_path}")
        rep = ValidationReport(
            N=N,
            targets=_missing_report(targets_path) if not tgt_p.exists() else
            ListReport(str(tgt_p), True, 0, _sha256_file(tgt_p), 0, 0),
            dictionary=_missing_report(dictionary_path) if not dic_p.exists() else
            ListReport(str(dic_p), True, 0, _sha256_file(dic_p), 0, 0),
            targets_subset_dictionary=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    targets, tgt_invalid = _scan(tgt_p, N)
    dictionary, dic_invalid = _scan(dic_p, N)
    targets_set, dictionary_set = set(targets), set(dictionary)

    tgt_report = ListReport(str(tgt_p), True, len(targets), _sha256_file(tgt_p),
                            len(targets_set), tgt_invalid)
    dic_report = ListReport(str(dic_p), True, len(dictionary), _sha256_file(dic_p),
                            len(dictionary_set), dic_invalid)

    subset_ok = targets_set.issubset(dictionary_set)
    if not subset_ok:
        missing = sorted(targets_set - dictionary_set)[:5]
        issues.append(f"targets not subset of dictionary (e.g., {missing})")

    if tgt_report.count == 0:
        issues.append("targets file contains 0 valid words")
    if dic_report.count == 0:
        issues.append("dictionary file contains 0 valid words")
    if tgt_invalid:
        issues.append(f"targets has {tgt_invalid} invalid line(s)")
    if dic_invalid:
        issues.append(f"dictionary has {dic_invalid} invalid line(s)")
    if tgt_report.count != tgt_report.unique_count:
        issues.append("targets repeat a word on more than one day")
    if dic_report.count != dic_report.unique_count:
        issues.append("dictionary contains duplicate lines")

    passed = (
            subset_ok
            and tgt_invalid == 0
            and dic_invalid == 0
            and tgt_report.count > 0
            and dic_report.count > 0
    )

    rep = ValidationReport(
        N=N,
        targets=tgt_report,
        dictionary=dic_report,
        targets_subset_dictionary=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    One-liner for the console, e.g.
        N=5 | targets=365 (uniq=365, sha=abc123...) | dictionary=900 (...) | targets⊆dictionary=True | OK
    """
    t = report["targets"]
    d = report["dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    return (
        f"N={report['N']} | targets={t['count']} (uniq={t['unique_count']}, sha={(t.get('sha256') or '')[:12]}) "
        f"| dictionary={d['count']} (uniq={d['unique_count']}, sha={(d.get('sha256') or '')[:12]}) "
        f"| targets⊆dictionary={report['targets_subset_dictionary']} | {status}"
    )
