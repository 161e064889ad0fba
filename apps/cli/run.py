# apps/cli/run.py
"""
CLI entry point for scripted batch runs.

This script:
  1) Validates the word lists (prints counts + SHA, checks targets ⊆ dictionary).
  2) Plays one fixed guess script against every target (or the first --sample).
  3) Shows live progress and writes:
       - CSV:  per-target results + guess/pattern history columns
       - JSON: manifest with config and word-list report

Usage:
    python -m apps.cli.run --guesses slate,crony,build --sample 50
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from tqdm import tqdm

from dailyword.datasets import validate_wordlists, pretty_summary
from dailyword.game.config import GameConfig
from dailyword.harness import run_case, sample_targets
from dailyword.harness.io import write_csv, write_manifest, timestamp_id


def _parse_guesses(text: str) -> list[str]:
    return [w.strip().lower() for w in text.split(",") if w.strip()]


def main(argv=None):
    ap = argparse.ArgumentParser(description="dailyword — play a fixed guess script against every target")
    GameConfig.add_arguments(ap)
    ap.add_argument("--guesses", required=True, type=_parse_guesses,
                    help="comma-separated guess script, e.g. slate,crony,build")
    ap.add_argument("--sample", type=int, help="run only a subset of targets (the first K in day order)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="run progress (auto=bar on a terminal, else plain text)")
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    config = GameConfig.from_args(args)

    # 1) Validate lists
    rep = validate_wordlists(config.word_length, str(config.targets_path), str(config.dictionary_path))
    print(pretty_summary(rep))
    if not rep["targets"]["exists"] or not rep["dictionary"]["exists"]:
        print("; ".join(rep["issues"]), file=sys.stderr)
        return 2

    # 2) Load
    try:
        catalog = config.load_catalog()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    # 3) Choose cases
    cases = sample_targets(catalog.targets, args.sample)
    total = len(cases)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"
    iterator = tqdm(cases, ncols=80, desc="Playing", unit="game") if mode == "bar" else cases

    # 4) Run
    results = []
    start = time.time()
    last_print = 0.0
    for idx, target in enumerate(iterator, 1):
        results.append(run_case(args.guesses, target, catalog=catalog, max_attempts=config.max_attempts))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now
    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    wins = sum(1 for r in results if r["success"])
    print(f"Solved {wins}/{total} targets with script {','.join(args.guesses)}")

    # 5) Outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_attempts=config.max_attempts)
    write_manifest({
        "run_id": run_id,
        "config": vars(args),
        "wordlists": rep,
        "num_cases": total,
        "wins": wins,
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
