#!/usr/bin/env python3
"""
Name Duplication Detector: Three-Tier Duplicate Detection

Scans an ordered list of raw person names and reports each entry that
repeats an earlier one.  Every entry is tried against the names seen so
far in fixed priority order:

    1. identical  - same first+last characters once middle names are
                    dropped ("Bill Henry Gates" = "Bill Gates")
    2. reordered  - first and last name swapped ("Gates Bill")
    3. fuzzy      - a known nickname of the first name and/or a last name
                    within one edit of an earlier one
                    ("William Henry Gatez" = "Bill Gates")

Matching is boolean per tier; there is no confidence score.  The first
spelling seen is reported as canonical for all later duplicates, so the
scan is strictly sequential and input order matters.

Dependencies:
    pip install rapidfuzz pyyaml
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..errors import ConfigError, InvalidArgumentError, NullInputError
from .edit_distance import within_distance
from .name_normalizer import (
    last_token,
    sort_key,
    split_first_last,
    strip_middle_names,
    swap_first_last,
)
from .nicknames import NicknameVariationTable

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Defaults (overridden by detection_rules.yaml at runtime)
# ---------------------------------------------------------------------------

DEFAULT_RULES_PATH = Path(__file__).resolve().parent.parent / "data" / "detection_rules.yaml"

_DEFAULT_MAX_LAST_NAME_DISTANCE = 2


class MatchTier:
    """Names of the matching tiers, in priority order."""

    IDENTICAL = "identical"
    REORDERED = "reordered"
    FUZZY = "fuzzy"

    ALL = (IDENTICAL, REORDERED, FUZZY)


# ---------------------------------------------------------------------------
# Configuration loader
# ---------------------------------------------------------------------------


_KNOWN_KEYS: dict[str, set[str]] = {
    "nicknames": {"source"},
    "fuzzy_match": {"max_last_name_distance"},
    "registry": {"key_on_reduced_form"},
}


def _section(raw: dict[str, Any], name: str, path: Path) -> dict[str, Any]:
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: '{name}' must be a mapping")
    unknown = set(section) - _KNOWN_KEYS[name]
    if unknown:
        raise ConfigError(
            f"{path}: unknown key(s) in '{name}': {', '.join(sorted(map(str, unknown)))}"
        )
    return section


@dataclass
class DetectorConfig:
    """Loaded detector configuration from detection_rules.yaml."""

    nickname_source: Path | None = None
    max_last_name_distance: int = _DEFAULT_MAX_LAST_NAME_DISTANCE
    # False keys novel names on their full original text, True on the
    # middle-name-stripped form compared by tiers 1 and 2.
    key_on_reduced_form: bool = False

    def __post_init__(self):
        if self.nickname_source is not None:
            if not isinstance(self.nickname_source, (str, Path)):
                raise ConfigError(
                    f"nickname_source must be a path, got {self.nickname_source!r}"
                )
            self.nickname_source = Path(self.nickname_source)
        if isinstance(self.max_last_name_distance, bool) or not isinstance(
            self.max_last_name_distance, int
        ):
            raise ConfigError(
                f"max_last_name_distance must be an integer, got {self.max_last_name_distance!r}"
            )
        if self.max_last_name_distance < 1:
            raise ConfigError(
                f"max_last_name_distance must be at least 1, got {self.max_last_name_distance}"
            )
        if not isinstance(self.key_on_reduced_form, bool):
            raise ConfigError(
                f"key_on_reduced_form must be true or false, got {self.key_on_reduced_form!r}"
            )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "DetectorConfig":
        """
        Load configuration from a YAML file.

        A relative ``nicknames.source`` is resolved against the directory
        holding the YAML file.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot read detection rules from {path}: {exc}") from exc

        if not isinstance(raw, dict):
            raise ConfigError(f"{path} must contain a mapping at the top level")
        unknown = set(raw) - set(_KNOWN_KEYS)
        if unknown:
            raise ConfigError(
                f"{path}: unknown section(s): {', '.join(sorted(map(str, unknown)))}"
            )

        nicknames_raw = _section(raw, "nicknames", path)
        fuzzy_raw = _section(raw, "fuzzy_match", path)
        registry_raw = _section(raw, "registry", path)

        source = nicknames_raw.get("source")
        if source is not None:
            if not isinstance(source, str):
                raise ConfigError(f"nicknames.source must be a path, got {source!r}")
            source = Path(source)
            if not source.is_absolute():
                source = path.parent / source

        return cls(
            nickname_source=source,
            max_last_name_distance=fuzzy_raw.get(
                "max_last_name_distance", _DEFAULT_MAX_LAST_NAME_DISTANCE
            ),
            key_on_reduced_form=registry_raw.get("key_on_reduced_form", False),
        )

    def load_nicknames(self) -> NicknameVariationTable:
        """Load the configured nickname table, or the bundled one."""
        if self.nickname_source is None:
            return NicknameVariationTable.load_default()
        return NicknameVariationTable.load(self.nickname_source)


# ---------------------------------------------------------------------------
# Scan state
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DuplicatePair:
    """One detected duplicate and the first-seen name it repeats."""

    duplicate: str
    canonical: str
    tier: str = MatchTier.IDENTICAL
    position: int = -1

    def __iter__(self) -> Iterator[str]:
        # Unpacks as (duplicate, canonical).
        yield self.duplicate
        yield self.canonical

    def to_dict(self) -> dict[str, Any]:
        return {
            "duplicate": self.duplicate,
            "canonical": self.canonical,
            "tier": self.tier,
            "position": self.position,
        }


@dataclass
class Registry:
    """
    Append-only map of sort key → first-seen original name.

    One registry lives for exactly one scan.  A key, once added, is never
    replaced, so the earliest spelling stays canonical.
    """

    _entries: dict[str, str] = field(default_factory=dict)

    def lookup(self, key: str) -> str | None:
        return self._entries.get(key)

    def add(self, key: str, original: str) -> bool:
        """Insert ``key`` unless present.  Returns True if it was added."""
        if key in self._entries:
            return False
        self._entries[key] = original
        return True

    def originals(self) -> list[str]:
        """Registered original names in insertion order."""
        return list(self._entries.values())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


# ---------------------------------------------------------------------------
# Detector
# ---------------------------------------------------------------------------


class DuplicateDetector:
    """
    Three-tier duplicate detector.

    The nickname table is built once (or injected) and only read
    afterwards, so one detector can serve any number of scans.
    """

    def __init__(
        self,
        nicknames: NicknameVariationTable | None = None,
        config: DetectorConfig | None = None,
    ):
        self.config = config if config is not None else DetectorConfig()
        if nicknames is None:
            nicknames = self.config.load_nicknames()
        self.nicknames = nicknames

    def check_duplicates(self, names: Iterable[str]) -> list[DuplicatePair]:
        """
        Return the duplicates in ``names`` in the order they are found.

        Raises NullInputError for ``None`` and InvalidArgumentError for an
        empty batch.  A blank entry fails the whole batch.
        """
        if names is None:
            raise NullInputError("Input names are None")
        if isinstance(names, str):
            raise InvalidArgumentError("Expected a sequence of names, got a single string")
        names = list(names)
        if not names:
            raise InvalidArgumentError("Input names are empty")

        duplicates = list(self.iter_duplicates(names))
        logger.debug(
            "Scanned %d names: %d duplicates found", len(names), len(duplicates)
        )
        return duplicates

    def iter_duplicates(self, names: Iterable[str]) -> Iterator[DuplicatePair]:
        """Lazily yield duplicates while scanning ``names`` with a fresh registry."""
        registry = Registry()
        for position, entry in enumerate(names):
            match = self.match_entry(entry, registry)
            if match is None:
                registry.add(self._registry_key(entry), entry)
                continue

            tier, canonical = match
            logger.debug("%r duplicates %r (%s)", entry, canonical, tier)
            yield DuplicatePair(
                duplicate=entry,
                canonical=canonical,
                tier=tier,
                position=position,
            )

    def match_entry(self, entry: str, registry: Registry) -> tuple[str, str] | None:
        """
        Try one entry against ``registry``, tier by tier.

        Returns ``(tier, canonical)`` on the first hit, or None when the
        entry is new.  Does not modify the registry.
        """
        reduced = strip_middle_names(entry)

        canonical = registry.lookup(sort_key(reduced))
        if canonical is not None:
            return MatchTier.IDENTICAL, canonical

        canonical = registry.lookup(sort_key(swap_first_last(reduced)))
        if canonical is not None:
            return MatchTier.REORDERED, canonical

        canonical = self.fuzzy_match(reduced, registry)
        if canonical is not None:
            return MatchTier.FUZZY, canonical

        return None

    def fuzzy_match(self, reduced: str, registry: Registry) -> str | None:
        """
        Look for an earlier name differing by first-name nickname and/or a
        one-character last-name typo.

        ``reduced`` must already be stripped to first + last.  Single-token
        names have nothing to recombine and never match here.
        """
        parts = split_first_last(reduced)
        if parts is None:
            return None
        first_name, last_name = parts

        first_variants = self.nicknames.variants_of(first_name) or ()
        last_candidates = self.last_name_candidates(last_name, registry)

        if first_variants and last_candidates:
            probes = (f"{f} {l}" for f in first_variants for l in last_candidates)
        elif first_variants:
            probes = (f"{f} {last_name}" for f in first_variants)
        elif last_candidates:
            probes = (f"{first_name} {l}" for l in last_candidates)
        else:
            return None

        for probe in probes:
            canonical = registry.lookup(sort_key(probe))
            if canonical is not None:
                return canonical
        return None

    def last_name_candidates(self, last_name: str, registry: Registry) -> list[str]:
        """Last names of registered entries close enough to ``last_name``."""
        limit = self.config.max_last_name_distance
        candidates = []
        for original in registry.originals():
            target = last_token(original)
            if within_distance(last_name, target, limit):
                candidates.append(target)
        return candidates

    def _registry_key(self, entry: str) -> str:
        if self.config.key_on_reduced_form:
            return sort_key(strip_middle_names(entry))
        return sort_key(entry)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------


def check_duplicates(
    names: Iterable[str],
    nicknames: NicknameVariationTable | None = None,
    config: DetectorConfig | None = None,
) -> list[DuplicatePair]:
    """One-shot detection with a throwaway detector."""
    return DuplicateDetector(nicknames=nicknames, config=config).check_duplicates(names)


def group_duplicates(pairs: Iterable[DuplicatePair]) -> dict[str, list[str]]:
    """Group duplicates under their canonical name, in discovery order."""
    groups: dict[str, list[str]] = {}
    for pair in pairs:
        groups.setdefault(pair.canonical, []).append(pair.duplicate)
    return groups
