"""floatrange core package.

Floating version range parsing, matching and serialization for package
dependency resolution, plus a small resolver built on top of it.
"""

from .resolver import Resolver, find_best_match, find_matches
from .versioning import (
    FloatBehavior,
    FloatRange,
    FloatRangeParseError,
    Version,
    VersionComparer,
    VersionComparison,
    VersionParseError,
    parse_float_range,
    try_parse_float_range,
)

__all__ = [
    "FloatBehavior",
    "FloatRange",
    "FloatRangeParseError",
    "Resolver",
    "Version",
    "VersionComparer",
    "VersionComparison",
    "VersionParseError",
    "find_best_match",
    "find_matches",
    "parse_float_range",
    "try_parse_float_range",
]
