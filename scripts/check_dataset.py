"""Validate a lawsuit dataset file offline and print what the API would serve.

Usage: python scripts/check_dataset.py [path/to/lawsuits.json]
"""
import sys
import argparse
from collections import Counter

from lawsuits.api import config
from lawsuits.errors import DatasetLoadError
from lawsuits.ingest import load_dataset
from lawsuits.mapping import to_summary


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Check a lawsuits JSON dataset")
    parser.add_argument("path", nargs="?", default=config.DATA_PATH)
    args = parser.parse_args(argv)

    try:
        records = load_dataset(args.path)
    except DatasetLoadError as e:
        print(f"[check] FAILED: {e}")
        return 1

    summaries = [to_summary(r) for r in records]
    degrees = Counter(s.grau_atual or "?" for s in summaries)
    tribunals = Counter(s.sigla_tribunal for s in summaries)
    print(f"[check] {len(records)} lawsuits in {args.path}")
    print("[check] current degree:", dict(degrees))
    print("[check] tribunals:", dict(tribunals))
    return 0


if __name__ == "__main__":
    sys.exit(main())
