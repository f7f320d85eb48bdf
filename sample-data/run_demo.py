#!/usr/bin/env python3
"""
Name Duplication Detector: End-to-End Demo

Runs the detector on the bundled sample names:
  1. Load: names.input plus the bundled nickname table
  2. Detect: three-tier scan in input order
  3. Report: print duplicates grouped by matching tier

Usage:
    python sample-data/run_demo.py
"""

from __future__ import annotations

import sys
from pathlib import Path

from name_dedup.algorithms.detector import (
    DEFAULT_RULES_PATH,
    DetectorConfig,
    DuplicateDetector,
    DuplicatePair,
    MatchTier,
)
from name_dedup.scripts.detect_duplicates import load_names

HERE = Path(__file__).resolve().parent


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


def step_load(names_path: Path) -> tuple[list[str], DuplicateDetector]:
    """Read the sample names and build a detector from the bundled rules."""
    print("=" * 65)
    print("STEP 1: LOAD")
    print("=" * 65)

    names = load_names(str(names_path))
    config = DetectorConfig.from_yaml(DEFAULT_RULES_PATH)
    detector = DuplicateDetector(config=config)

    print(f"  Source file : {names_path.name}")
    print(f"  Names       : {len(names)}")
    print(f"  Nicknames   : {len(detector.nicknames)} first names")
    print()

    return names, detector


def step_detect(names: list[str], detector: DuplicateDetector) -> list[DuplicatePair]:
    """Run the scan and return the duplicate pairs."""
    print("=" * 65)
    print("STEP 2: DETECTION")
    print("=" * 65)

    pairs = detector.check_duplicates(names)
    print(f"  Duplicates  : {len(pairs)}")
    print(f"  Distinct    : {len(names) - len(pairs)}")
    print()

    return pairs


def step_report(pairs: list[DuplicatePair]) -> None:
    """Print a human-readable duplicate report."""
    print("=" * 65)
    print("STEP 3: DUPLICATE REPORT")
    print("=" * 65)

    for tier in MatchTier.ALL:
        matches = [p for p in pairs if p.tier == tier]
        if not matches:
            print(f"\n  No {tier} duplicates.")
            continue

        print(f"\n  {tier.upper()} ({len(matches)})")
        print("  " + "-" * 63)
        for p in matches:
            print(f"  #{p.position:<3} {p.duplicate}")
            print(f"        = {p.canonical}")

    print()
    print("=" * 65)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main():
    names_path = HERE / "names.input"

    if not names_path.exists():
        print(f"Sample data not found: {names_path}")
        sys.exit(1)

    print()
    print("  Name Duplication Detector: End-to-End Demo")
    print()

    names, detector = step_load(names_path)
    pairs = step_detect(names, detector)
    step_report(pairs)


if __name__ == "__main__":
    main()
