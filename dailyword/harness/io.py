"""
I/O utilities for scripted batch runs.

- write_csv:      one row per game with per-turn guess/pattern columns.
- write_manifest: JSON dump of the run configuration and word-list report.
- timestamp_id:   compact UTC run ID string.

Patterns are prefixed with an apostrophe so spreadsheet apps keep strings
like "-GYY-" as text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import datetime as dt


def _excel_safe_pattern(patt: str) -> str:
    return "'" + patt if patt else patt


SUMMARY_FIELDS = ("target", "status", "success", "guesses", "rejected", "time_ms")


def _turn_fields(max_attempts: int) -> List[str]:
    return [name for i in range(1, max_attempts + 1) for name in (f"guess_{i}", f"patt_{i}")]


def _row(result: Dict, max_attempts: int) -> Dict:
    row = {k: result.get(k, 0) for k in SUMMARY_FIELDS}
    row["time_ms"] = round(float(result["time_ms"]), 3)
    # unused turns stay blank so every row has the same width
    turns = list(result.get("history", []))[:max_attempts]
    turns += [("", "")] * (max_attempts - len(turns))
    for i, (word, patt) in enumerate(turns, 1):
        row[f"guess_{i}"] = word
        row[f"patt_{i}"] = _excel_safe_pattern(patt)
    return row


def write_csv(results: List[Dict], path: str, max_attempts: int) -> str:
    """
    One row per game: SUMMARY_FIELDS, then guess_i/patt_i for every turn
    up to `max_attempts`. Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=[*SUMMARY_FIELDS, *_turn_fields(max_attempts)])
        w.writeheader()
        w.writerows(_row(r, max_attempts) for r in results)
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """e.g. 20250820T024121Z"""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
