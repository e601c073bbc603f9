"""Which trailing part of a version a floating range lets vary."""

from __future__ import annotations

import enum


class FloatBehavior(enum.Enum):
    """Closed set of floating strategies.

    Members are independent matching rules, not ranks; never compare or do
    arithmetic on them.
    """

    NONE = "none"
    PRERELEASE = "prerelease"
    REVISION = "revision"
    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"
    ABSOLUTE_LATEST = "absolute-latest"
