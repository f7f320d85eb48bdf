"""Shared fixtures for the detector test suite."""

from __future__ import annotations

import pytest

from name_dedup.algorithms.detector import DuplicateDetector
from name_dedup.algorithms.nicknames import NicknameVariationTable

# ---------------------------------------------------------------------------
# Sample inputs
# ---------------------------------------------------------------------------

COMBINATION_NAMES: list[str] = [
    "Bill Gates",
    "Gates Bill",
    "Bill Henry Gates",
    "William Gates",
    "Walter Gates",
    "William Henry Gatez",
]

EXPECTED_COMBINATION_DUPLICATES: list[tuple[str, str]] = [
    ("Gates Bill", "Bill Gates"),
    ("Bill Henry Gates", "Bill Gates"),
    ("William Gates", "Bill Gates"),
    ("William Henry Gatez", "Bill Gates"),
]


@pytest.fixture
def william_table() -> NicknameVariationTable:
    """Synthetic table knowing only William's nicknames."""
    return NicknameVariationTable.from_mapping({"William": ["Bill", "Will"]})


@pytest.fixture
def detector(william_table) -> DuplicateDetector:
    return DuplicateDetector(nicknames=william_table)


@pytest.fixture
def nickname_file(tmp_path):
    path = tmp_path / "firstnames.txt"
    path.write_text(
        "William - Bill, Will\n"
        "Robert - Bob, Rob\n"
        "William - Billy\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def names_file(tmp_path):
    path = tmp_path / "names.input"
    path.write_text("\n".join(COMBINATION_NAMES) + "\n", encoding="utf-8")
    return path
