"""Name Duplication Detector: Matching Algorithms."""

from .edit_distance import (
    distance,
    within_distance,
)
from .name_normalizer import (
    canonical_form,
    last_token,
    sort_key,
    split_first_last,
    strip_middle_names,
    swap_first_last,
)
from .nicknames import (
    DEFAULT_NICKNAMES_PATH,
    NicknameVariationTable,
    load,
)
from .detector import (
    DEFAULT_RULES_PATH,
    DetectorConfig,
    DuplicateDetector,
    DuplicatePair,
    MatchTier,
    Registry,
    check_duplicates,
    group_duplicates,
)

__all__ = [
    "distance",
    "within_distance",
    "canonical_form",
    "last_token",
    "sort_key",
    "split_first_last",
    "strip_middle_names",
    "swap_first_last",
    "DEFAULT_NICKNAMES_PATH",
    "NicknameVariationTable",
    "load",
    "DEFAULT_RULES_PATH",
    "DetectorConfig",
    "DuplicateDetector",
    "DuplicatePair",
    "MatchTier",
    "Registry",
    "check_duplicates",
    "group_duplicates",
]
