"""Name Duplication Detector: probable duplicate person names in a batch."""

from .algorithms import (
    DetectorConfig,
    DuplicateDetector,
    DuplicatePair,
    NicknameVariationTable,
    check_duplicates,
)
from .errors import (
    ConfigError,
    DataSourceCorruptError,
    InvalidArgumentError,
    NameDedupError,
    NullInputError,
)

__version__ = "0.1.0"

__all__ = [
    "DetectorConfig",
    "DuplicateDetector",
    "DuplicatePair",
    "NicknameVariationTable",
    "check_duplicates",
    "ConfigError",
    "DataSourceCorruptError",
    "InvalidArgumentError",
    "NameDedupError",
    "NullInputError",
]
