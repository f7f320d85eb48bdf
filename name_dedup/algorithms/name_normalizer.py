#!/usr/bin/env python3
"""
Name Duplication Detector: Name Normalisation

Reduces raw person names to the forms the detector compares:

    strip_middle_names("Bill Henry Gates")  → "Bill Gates"
    swap_first_last("Bill Gates")           → "Gates Bill"
    last_token("Mustafa Elsayed Elbehery")  → "Elbehery"
    sort_key("Gates Bill")                  → " abegillst"

Tokens are separated by runs of whitespace.  Folding is limited to
lower-casing; no Unicode normalisation is applied.
"""

from __future__ import annotations

from ..errors import InvalidArgumentError, NullInputError


def _tokens(name: str | None, what: str = "name") -> list[str]:
    """Validate ``name`` and split it into whitespace-delimited tokens."""
    if name is None:
        raise NullInputError(f"Null {what} is not allowed")
    tokens = name.split()
    if not tokens:
        raise InvalidArgumentError(f"Empty or blank {what} is not allowed")
    return tokens


def strip_middle_names(full_name: str) -> str:
    """
    Keep only the first and last name of ``full_name``.

    Names with fewer than three tokens come back trimmed but otherwise
    untouched (inner spacing included); longer names collapse to
    ``"<first> <last>"``.
    """
    tokens = _tokens(full_name)
    if len(tokens) < 3:
        return full_name.strip()
    return f"{tokens[0]} {tokens[-1]}"


def sort_key(s: str) -> str:
    """
    Case-folded, character-sorted form of ``s``.

    Two strings share a key iff they are anagrams of each other once
    lower-cased.  The spaces are sorted along with the letters, so keys
    only compare cleanly between strings joined with single spaces.
    """
    if s is None:
        raise NullInputError("Null string is not allowed")
    if s == "":
        raise InvalidArgumentError("Empty string is not allowed")
    return "".join(sorted(s.lower()))


def swap_first_last(name: str) -> str:
    """
    Swap the parts of an already reduced ``"<first> <last>"`` name.

    A single token is returned unchanged.  More than two tokens is an
    error: apply :func:`strip_middle_names` first.
    """
    tokens = _tokens(name)
    if len(tokens) > 2:
        raise InvalidArgumentError(
            f"{name!r} contains more than a first and last name"
        )
    if len(tokens) == 1:
        return name
    first, last = tokens
    return f"{last} {first}"


def last_token(full_name: str) -> str:
    """Return the last name, or the whole trimmed name if it has one token."""
    return _tokens(full_name)[-1]


def split_first_last(reduced: str) -> tuple[str, str] | None:
    """
    Split a reduced name into ``(first, last)``.

    Returns None for a single-token name, which has no first/last pair
    to recombine.
    """
    if len(_tokens(reduced)) > 2:
        raise InvalidArgumentError(
            f"{reduced!r} still has middle names; strip them first"
        )
    form = canonical_form(reduced)
    if len(form) == 1:
        return None
    return form


def canonical_form(full_name: str) -> tuple[str, ...]:
    """``(token,)`` for a one-word name, otherwise ``(first, last)``."""
    tokens = _tokens(full_name)
    if len(tokens) == 1:
        return (tokens[0],)
    return tokens[0], tokens[-1]
