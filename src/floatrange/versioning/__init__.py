"""Version model, comparers and floating ranges."""

from .comparer import (
    VersionComparer,
    VersionComparison,
    compare_release_labels,
    compare_versions,
    get_comparer,
)
from .float_behavior import FloatBehavior
from .float_range import (
    ABSOLUTE_LATEST_TEXT,
    FloatRange,
    FloatRangeParseError,
    parse_float_range,
    try_parse_float_range,
)
from .version import Version, VersionParseError

__all__ = [
    # Versions
    "Version",
    "VersionParseError",
    # Comparison
    "VersionComparer",
    "VersionComparison",
    "compare_release_labels",
    "compare_versions",
    "get_comparer",
    # Floating ranges
    "ABSOLUTE_LATEST_TEXT",
    "FloatBehavior",
    "FloatRange",
    "FloatRangeParseError",
    "parse_float_range",
    "try_parse_float_range",
]
