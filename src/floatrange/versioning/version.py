"""Four-part package version with optional prerelease label and metadata.

Accepted text form::

    major.minor[.patch[.revision]][-label][+metadata]

where label and metadata are dot-separated identifiers of ``[0-9A-Za-z-]``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import total_ordering

from .comparer import VersionComparer, VersionComparison, get_comparer

_NUMBER = re.compile(r"[0-9]+")
_IDENTIFIER = re.compile(r"[0-9A-Za-z-]+")


class VersionParseError(ValueError):
    """Raised when text cannot be parsed into a :class:`Version`."""


def _valid_identifiers(text: str, allow_leading_zeros: bool = True) -> bool:
    for identifier in text.split("."):
        if not _IDENTIFIER.fullmatch(identifier):
            return False
        if (
            not allow_leading_zeros
            and len(identifier) > 1
            and identifier.startswith("0")
            and identifier.isdigit()
        ):
            return False
    return True


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """Immutable version value.

    Equality, hashing and ordering follow :attr:`VersionComparer.DEFAULT`:
    numeric parts and prerelease label take part, metadata never does.
    """

    major: int
    minor: int
    patch: int = 0
    revision: int = 0
    release: str | None = None
    metadata: str | None = None
    original: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch", "revision"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
        # an empty label or metadata means "absent"
        if self.release == "":
            object.__setattr__(self, "release", None)
        if self.metadata == "":
            object.__setattr__(self, "metadata", None)

    @property
    def is_prerelease(self) -> bool:
        return self.release is not None

    @property
    def has_metadata(self) -> bool:
        return self.metadata is not None

    @property
    def is_legacy(self) -> bool:
        """True when the fourth numeric part is in use."""
        return self.revision > 0

    @property
    def release_labels(self) -> tuple[str, ...]:
        if self.release is None:
            return ()
        return tuple(self.release.split("."))

    def to_numeric_string(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.is_legacy:
            text += f".{self.revision}"
        return text

    def to_normalized_string(self) -> str:
        text = self.to_numeric_string()
        if self.release is not None:
            text += f"-{self.release}"
        return text

    def to_full_string(self) -> str:
        text = self.to_normalized_string()
        if self.metadata is not None:
            text += f"+{self.metadata}"
        return text

    def __str__(self) -> str:
        if self.original is not None:
            return self.original
        return self.to_normalized_string()

    def compare_to(
        self, other: Version | None, mode: VersionComparison = VersionComparison.DEFAULT
    ) -> int:
        """Return -1, 0 or 1 comparing this version with ``other`` under ``mode``."""
        return get_comparer(mode).compare(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return VersionComparer.DEFAULT.equals(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return VersionComparer.DEFAULT.compare(self, other) < 0

    def __hash__(self) -> int:
        return VersionComparer.DEFAULT.hash(self)

    @classmethod
    def try_parse(cls, text: str | None, lenient: bool = False) -> Version | None:
        """Parse ``text`` or return ``None`` when it is not a valid version.

        Strict parsing rejects surrounding whitespace and numeric label
        identifiers with leading zeros. Lenient parsing strips whitespace,
        accepts such identifiers and keeps the input text in :attr:`original`.
        """
        if text is None:
            return None

        value = text.strip() if lenient else text
        if not value:
            return None

        head, plus, metadata = value.partition("+")
        if plus and not _valid_identifiers(metadata):
            return None

        numbers, dash, release = head.partition("-")
        if dash and not _valid_identifiers(release, allow_leading_zeros=lenient):
            return None

        parts = numbers.split(".")
        if not 2 <= len(parts) <= 4:
            return None
        if not all(_NUMBER.fullmatch(part) for part in parts):
            return None

        values = [int(part) for part in parts] + [0] * (4 - len(parts))
        return cls(
            major=values[0],
            minor=values[1],
            patch=values[2],
            revision=values[3],
            release=release if dash else None,
            metadata=metadata if plus else None,
            original=value if lenient else None,
        )

    @classmethod
    def parse(cls, text: str | None, lenient: bool = False) -> Version:
        """Parse ``text`` into a version.

        Raises:
            VersionParseError: If ``text`` is empty, ``None`` or malformed.
        """
        version = cls.try_parse(text, lenient=lenient)
        if version is None:
            raise VersionParseError(f"Invalid version string: {text!r}")
        return version
