"""Floating version ranges such as ``1.2.*`` or ``1.0.0-beta*``.

Supported specifiers:
- exact versions (e.g., "1.2.3") → no floating
- "*" → any stable version
- "1.*", "1.2.*", "1.2.3.*" → float the minor, patch or revision part
- "1.0.0-*", "1.0.0-beta*" → float the prerelease label of 1.0.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import assert_never

from .comparer import VersionComparer
from .float_behavior import FloatBehavior
from .version import Version

# Placeholder text for ABSOLUTE_LATEST. It has no grammar of its own and does
# not parse back into a range.
ABSOLUTE_LATEST_TEXT = ""

_SEGMENT_BEHAVIORS = {
    2: FloatBehavior.MINOR,
    3: FloatBehavior.PATCH,
    4: FloatBehavior.REVISION,
}


class FloatRangeParseError(ValueError):
    """Raised when a specifier string is not a valid floating range."""


@dataclass(frozen=True, eq=False)
class FloatRange:
    """A floating behavior plus an optional floor version.

    ``original_release_prefix`` keeps the label prefix exactly as written,
    even when it is not a valid label by itself. It does not take part in
    equality.
    """

    float_behavior: FloatBehavior
    min_version: Version | None = None
    original_release_prefix: str | None = None

    def __post_init__(self) -> None:
        if (
            self.original_release_prefix is None
            and self.min_version is not None
            and self.min_version.is_prerelease
        ):
            # use the actual label if one was not given
            object.__setattr__(self, "original_release_prefix", self.min_version.release)

    @property
    def has_min_version(self) -> bool:
        return self.min_version is not None

    def satisfies(self, version: Version) -> bool:
        """True if ``version`` falls into this floating range."""
        if version is None:
            raise TypeError("version must not be None")

        behavior = self.float_behavior
        if behavior is FloatBehavior.ABSOLUTE_LATEST:
            return True
        if behavior is FloatBehavior.MAJOR and not version.is_prerelease:
            return True

        floor = self.min_version
        if floor is None:
            return False

        if behavior is FloatBehavior.PRERELEASE:
            # the stable release of the floor version also matches
            if not VersionComparer.VERSION.equals(floor, version):
                return False
            if not version.is_prerelease:
                return True
            prefix = self.original_release_prefix or ""
            return version.release.upper().startswith(prefix.upper())
        if behavior is FloatBehavior.REVISION:
            # the revision itself is free to vary
            return (
                floor.major == version.major
                and floor.minor == version.minor
                and floor.patch == version.patch
                and not version.is_prerelease
            )
        if behavior is FloatBehavior.PATCH:
            return (
                floor.major == version.major
                and floor.minor == version.minor
                and not version.is_prerelease
            )
        if behavior is FloatBehavior.MINOR:
            return floor.major == version.major and not version.is_prerelease
        if behavior is FloatBehavior.NONE or behavior is FloatBehavior.MAJOR:
            return False
        assert_never(behavior)

    def to_canonical_string(self) -> str:
        """Render the specifier text, e.g. ``1.0.0-alpha-*`` or ``1.2.*``."""
        behavior = self.float_behavior
        if behavior is FloatBehavior.MAJOR:
            return "*"
        if behavior is FloatBehavior.ABSOLUTE_LATEST:
            return ABSOLUTE_LATEST_TEXT

        floor = self.min_version
        if floor is None:
            raise ValueError(f"{behavior.value} range has no minimum version to render")

        if behavior is FloatBehavior.NONE:
            return floor.to_normalized_string()
        if behavior is FloatBehavior.PRERELEASE:
            return f"{floor.to_numeric_string()}-{self.original_release_prefix or ''}*"
        if behavior is FloatBehavior.REVISION:
            return f"{floor.major}.{floor.minor}.{floor.patch}.*"
        if behavior is FloatBehavior.PATCH:
            return f"{floor.major}.{floor.minor}.*"
        if behavior is FloatBehavior.MINOR:
            return f"{floor.major}.*"
        assert_never(behavior)

    def __str__(self) -> str:
        return self.to_canonical_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FloatRange):
            return NotImplemented
        return self.float_behavior is other.float_behavior and VersionComparer.DEFAULT.equals(
            self.min_version, other.min_version
        )

    def __hash__(self) -> int:
        return hash((self.float_behavior, VersionComparer.DEFAULT.hash(self.min_version)))

    @classmethod
    def try_parse(cls, text: str | None, lenient: bool = False) -> FloatRange | None:
        """Parse a floating specifier, returning ``None`` when it is malformed."""
        if text is None:
            return None
        if lenient:
            text = text.strip()

        star = text.find("*")

        if text == "*":
            return cls(FloatBehavior.MAJOR, Version(0, 0))

        # "*" must be the last character and cannot appear in the metadata
        if star == -1 or star != len(text) - 1 or "+" in text:
            version = Version.try_parse(text, lenient=lenient)
            if version is None:
                return None
            return cls(FloatBehavior.NONE, version)

        actual = text[:-1]
        release_prefix: str | None = None

        if "-" not in text:
            # replace the * with a 0
            actual += "0"
            behavior = _SEGMENT_BEHAVIORS.get(len(actual.split(".")), FloatBehavior.NONE)
        else:
            behavior = FloatBehavior.PRERELEASE
            dash = text.rfind("-")
            if text.find("-") == dash:
                release_prefix = actual[dash + 1 :]
                # numeric labels start at 0, alphanumeric ones at "-"
                if not release_prefix or actual.endswith("."):
                    # 1.0.0-* floats on an empty label, which is not valid on its own
                    actual += "0"
                elif actual.endswith("-"):
                    actual += "-"

        version = Version.try_parse(actual, lenient=lenient)
        if version is None:
            return None
        return cls(behavior, version, release_prefix)

    @classmethod
    def parse(cls, text: str | None, lenient: bool = False) -> FloatRange:
        """Parse a floating specifier.

        Raises:
            FloatRangeParseError: If ``text`` is empty, ``None`` or malformed.
        """
        value = cls.try_parse(text, lenient=lenient)
        if value is None:
            raise FloatRangeParseError(f"Invalid floating version range: {text!r}")
        return value


def parse_float_range(text: str | None, lenient: bool = False) -> FloatRange:
    return FloatRange.parse(text, lenient=lenient)


def try_parse_float_range(text: str | None, lenient: bool = False) -> FloatRange | None:
    return FloatRange.try_parse(text, lenient=lenient)
