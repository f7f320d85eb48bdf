#!/usr/bin/env python3
"""
Name Duplication Detector: First-Name Variation Table

Loads the nickname source, a line-oriented file of the form

    William - Bill, Will, Willy, Billy
    Elizabeth - Liz, Beth, Betty

into a read-only lookup from a canonical first name to its known variants.
A canonical name may appear on several lines; the variant lists are then
concatenated in file order.  Keys are case-sensitive as written.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from ..errors import DataSourceCorruptError, NullInputError

logger = logging.getLogger(__name__)

DEFAULT_NICKNAMES_PATH = Path(__file__).resolve().parent.parent / "data" / "firstnames.txt"

_DELIMITER = "-"
_COMMENT = "#"


def parse_line(line: str, line_number: int | None = None) -> tuple[str, list[str]]:
    """
    Parse one ``Name - Variant1, Variant2`` line.

    Splits on the first ``-`` only, so variants may themselves contain a
    hyphen.  Empty variants (e.g. a trailing comma) are dropped.
    """
    if _DELIMITER not in line:
        raise DataSourceCorruptError(
            f"Missing {_DELIMITER!r} delimiter",
            line_number=line_number,
            line=line,
        )
    key, _, value = line.partition(_DELIMITER)
    key = key.strip()
    if not key:
        raise DataSourceCorruptError(
            "Missing canonical first name",
            line_number=line_number,
            line=line,
        )
    variants = [v.strip() for v in value.split(",")]
    return key, [v for v in variants if v]


class NicknameVariationTable(Mapping):
    """Immutable mapping of canonical first name → tuple of variants."""

    def __init__(self, variations: Mapping[str, Iterable[str]] | None = None):
        frozen = {key: tuple(values) for key, values in (variations or {}).items()}
        self._table = MappingProxyType(frozen)

    # -- Mapping protocol --------------------------------------------------

    def __getitem__(self, first_name: str) -> tuple[str, ...]:
        return self._table[first_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"NicknameVariationTable({len(self)} names)"

    # -- Lookup ------------------------------------------------------------

    def variants_of(self, first_name: str) -> tuple[str, ...] | None:
        """Known variants of ``first_name``, or None when there are none."""
        variants = self._table.get(first_name)
        return variants or None

    @property
    def variant_count(self) -> int:
        return sum(len(v) for v in self._table.values())

    # -- Construction ------------------------------------------------------

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "NicknameVariationTable":
        """Build a table from an in-memory mapping (synthetic tables, tests)."""
        return cls(mapping)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "NicknameVariationTable":
        """
        Build a table from source lines.

        Blank lines and ``#`` comments are skipped.  Any other line
        without a ``-`` aborts the load with DataSourceCorruptError.
        """
        table: dict[str, list[str]] = {}
        for line_number, raw in enumerate(lines, start=1):
            line = raw.strip()
            if not line or line.startswith(_COMMENT):
                continue
            key, variants = parse_line(line, line_number)
            if key in table:
                table[key].extend(variants)
            else:
                table[key] = variants
        return cls(table)

    @classmethod
    def load(cls, source: str | Path | Iterable[str]) -> "NicknameVariationTable":
        """Load a table from a file path or from an iterable of lines."""
        if source is None:
            raise NullInputError("Nickname source is None")

        if isinstance(source, (str, Path)):
            path = Path(source)
            with open(path, "r", encoding="utf-8") as f:
                table = cls.from_lines(f)
            logger.info(
                "Loaded %d first names (%d variants) from %s",
                len(table), table.variant_count, path,
            )
            return table

        return cls.from_lines(source)

    @classmethod
    def load_default(cls) -> "NicknameVariationTable":
        """Load the nickname source bundled with the package."""
        return cls.load(DEFAULT_NICKNAMES_PATH)


def load(source: str | Path | Iterable[str]) -> NicknameVariationTable:
    """Module-level shortcut for :meth:`NicknameVariationTable.load`."""
    return NicknameVariationTable.load(source)
