#!/usr/bin/env python3
"""
Name Duplication Detector: Batch Duplicate Report

Reads one raw name per line, runs the three-tier detector over them in
file order and writes one line per duplicate:

    <duplicate>\t<canonical>

Strategy:
    1. Load detection rules (YAML) and the nickname table
    2. Read names, skipping blank lines
    3. Scan in input order; the first spelling seen is canonical
    4. Output: TSV or JSON pairs, optionally grouped by canonical name

Usage:
    detect-name-duplicates sample-data/names.input
    python -m name_dedup.scripts.detect_duplicates names.txt \
        --format json --group --output report.json

Dependencies:
    pip install rapidfuzz pyyaml
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from collections import Counter
from pathlib import Path
from typing import Any, TextIO

from name_dedup.algorithms.detector import (
    DEFAULT_RULES_PATH,
    DetectorConfig,
    DuplicateDetector,
    DuplicatePair,
    group_duplicates,
)
from name_dedup.algorithms.nicknames import NicknameVariationTable
from name_dedup.errors import NameDedupError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


def read_names(stream: TextIO) -> list[str]:
    """Read one name per line, dropping line endings and blank lines."""
    names = []
    for line in stream:
        line = line.rstrip("\r\n")
        if line.strip():
            names.append(line)
    return names


def load_names(source: str) -> list[str]:
    """Read names from a file path, or from stdin when ``source`` is ``-``."""
    if source == "-":
        names = read_names(sys.stdin)
        logger.info("Read %d names from stdin", len(names))
        return names

    with open(source, "r", encoding="utf-8") as f:
        names = read_names(f)
    logger.info("Read %d names from %s", len(names), source)
    return names


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


def format_tsv(pairs: list[DuplicatePair], grouped: bool = False) -> str:
    if grouped:
        lines = []
        for canonical, duplicates in group_duplicates(pairs).items():
            lines.append(canonical)
            lines.extend(f"\t{dup}" for dup in duplicates)
        return "\n".join(lines)
    return "\n".join(f"{p.duplicate}\t{p.canonical}" for p in pairs)


def format_json(pairs: list[DuplicatePair], grouped: bool = False) -> str:
    payload: Any
    if grouped:
        payload = [
            {"canonical": canonical, "duplicates": duplicates}
            for canonical, duplicates in group_duplicates(pairs).items()
        ]
    else:
        payload = [p.to_dict() for p in pairs]
    return json.dumps(payload, indent=2, ensure_ascii=False)


def write_report(text: str, output: str | None) -> None:
    """Write the report to ``output``, or to stdout when not given."""
    if output is None:
        if text:
            print(text)
        return

    out_path = Path(output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(text)
        if text:
            f.write("\n")
    logger.info("Wrote report to %s", out_path)


# ---------------------------------------------------------------------------
# Main pipeline
# ---------------------------------------------------------------------------


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Report probable duplicate person names in a list",
    )
    parser.add_argument(
        "input",
        help="File with one name per line ('-' reads stdin)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to detection_rules.yaml (default: bundled rules)",
    )
    parser.add_argument(
        "--nicknames",
        default=None,
        help="Nickname source file, overrides the one named in the rules",
    )
    parser.add_argument(
        "--format",
        choices=("tsv", "json"),
        default="tsv",
        help="Report format (default: tsv)",
    )
    parser.add_argument(
        "--group",
        action="store_true",
        help="Group duplicates under their canonical name.",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Write the report here instead of stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every match decision.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        config_path = args.config or DEFAULT_RULES_PATH
        config = DetectorConfig.from_yaml(config_path)
        logger.info("Loaded detection rules from %s", config_path)

        if args.nicknames:
            nicknames = NicknameVariationTable.load(args.nicknames)
        else:
            nicknames = config.load_nicknames()

        names = load_names(args.input)
        if not names:
            logger.error("No names found in %s. Exiting.", args.input)
            return 1

        detector = DuplicateDetector(nicknames=nicknames, config=config)

        t0 = time.time()
        pairs = detector.check_duplicates(names)
        elapsed = time.time() - t0
    except (NameDedupError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    by_tier = Counter(p.tier for p in pairs)
    logger.info("Detection complete in %.3fs", elapsed)
    logger.info("  Names      : %d", len(names))
    logger.info("  Duplicates : %d", len(pairs))
    for tier, count in sorted(by_tier.items()):
        logger.info("    %-10s %d", tier, count)

    if args.format == "json":
        text = format_json(pairs, grouped=args.group)
    else:
        text = format_tsv(pairs, grouped=args.group)

    try:
        write_report(text, args.output)
    except OSError as exc:
        logger.error("Cannot write report: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
