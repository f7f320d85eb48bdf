#!/usr/bin/env python3
"""
Name Duplication Detector: Edit Distance

Levenshtein distance between two name tokens: the minimum number of
single-character insertions, deletions or substitutions turning
``source`` into ``target``, all at unit cost.

Dependencies:
    pip install rapidfuzz
"""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein

from ..errors import InvalidArgumentError, NullInputError


def _check_operands(source: str | None, target: str | None) -> None:
    if source is None or target is None:
        raise NullInputError("Null input string")
    if source == "" or target == "":
        raise InvalidArgumentError("Empty strings have no edit distance here")


def distance(source: str, target: str) -> int:
    """
    Levenshtein distance between ``source`` and ``target``.

    Case-sensitive; the caller folds case if it wants to. Both strings
    must be non-empty, since names are never empty.

    Examples:
        distance("test", "tent")    → 1
        distance("GUMBO", "GAMBOL") → 2
    """
    _check_operands(source, target)
    return Levenshtein.distance(source, target)


def within_distance(source: str, target: str, max_distance: int) -> bool:
    """
    Return True when ``distance(source, target) < max_distance``.

    The bound is strict: ``max_distance=2`` accepts exact matches and
    single-character typos. rapidfuzz stops filling the table once the
    cutoff is exceeded.
    """
    _check_operands(source, target)
    if max_distance < 1:
        raise InvalidArgumentError(f"max_distance must be at least 1, got {max_distance}")

    cutoff = max_distance - 1
    return Levenshtein.distance(source, target, score_cutoff=cutoff) <= cutoff
