"""
Rebuild the dictionary so every target word is also an accepted guess.

Features:
- Lowercases and drops blank lines in both lists.
- Adds any target missing from the dictionary.
- Dedupes and sorts the dictionary (the target list keeps its day order and
  is never rewritten).

Usage:
    python -m script.merge_wordlists \
        --targets dailyword/datasets/data/targets_5.txt \
        --dictionary dailyword/datasets/data/dictionary_5.txt
"""

import argparse
from pathlib import Path

from dailyword.datasets.io import read_words, write_lines


def main():
    ap = argparse.ArgumentParser(description="Merge target words into the dictionary list.")
    ap.add_argument("--targets", required=True, help="daily target list (read only)")
    ap.add_argument("--dictionary", required=True, help="accepted-guess list to rebuild")
    ap.add_argument("--out", help="output file (default: overwrite --dictionary)")
    args = ap.parse_args()

    targets = read_words(Path(args.targets))
    dictionary = read_words(Path(args.dictionary))
    missing = sorted(set(targets) - set(dictionary))
    merged = sorted(set(dictionary) | set(targets))

    outp = Path(args.out) if args.out else Path(args.dictionary)
    write_lines(merged, outp)
    print(f"Dictionary: {len(dictionary)} lines -> {outp} ({len(merged)} unique, {len(missing)} targets added)")


if __name__ == "__main__":
    main()
