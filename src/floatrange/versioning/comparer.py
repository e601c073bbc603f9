"""Ordering and equality strategies for versions.

Every comparison is ordinal: prerelease labels and metadata are compared
case-insensitively on their uppercased ASCII form so results never depend on
the current locale.
"""

from __future__ import annotations

import enum
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any
from collections.abc import Callable

if TYPE_CHECKING:
    from .version import Version


class VersionComparison(enum.Enum):
    """Which parts of a version take part in a comparison."""

    DEFAULT = "default"
    VERSION = "version"
    VERSION_RELEASE = "version-release"
    VERSION_RELEASE_METADATA = "version-release-metadata"


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _is_numeric(identifier: str) -> bool:
    return identifier.isascii() and identifier.isdigit()


def _compare_identifier(x: str, y: str) -> int:
    x_numeric = _is_numeric(x)
    y_numeric = _is_numeric(y)

    if x_numeric and y_numeric:
        return _cmp(int(x), int(y))
    # numeric identifiers have lower precedence than alphanumeric ones
    if x_numeric:
        return -1
    if y_numeric:
        return 1
    return _cmp(x.upper(), y.upper())


def compare_release_labels(x: tuple[str, ...], y: tuple[str, ...]) -> int:
    """Compare two label sequences identifier by identifier."""
    for left, right in zip(x, y):
        result = _compare_identifier(left, right)
        if result:
            return result
    return _cmp(len(x), len(y))


def _numbers(version: Version) -> tuple[int, int, int, int]:
    return (version.major, version.minor, version.patch, version.revision)


class VersionComparer:
    """Compare versions under one :class:`VersionComparison` mode.

    ``None`` is accepted on either side: two absent versions are equal and an
    absent version sorts before any present one.
    """

    DEFAULT: VersionComparer
    VERSION: VersionComparer
    VERSION_RELEASE: VersionComparer
    VERSION_RELEASE_METADATA: VersionComparer

    __slots__ = ("mode",)

    def __init__(self, mode: VersionComparison = VersionComparison.DEFAULT) -> None:
        self.mode = mode

    def __repr__(self) -> str:
        return f"VersionComparer({self.mode.value!r})"

    def compare(self, x: Version | None, y: Version | None) -> int:
        if x is y:
            return 0
        if x is None:
            return -1
        if y is None:
            return 1

        result = _cmp(_numbers(x), _numbers(y))
        if result or self.mode is VersionComparison.VERSION:
            return result

        # a release without a label sorts after any prerelease of it
        if x.is_prerelease != y.is_prerelease:
            return -1 if x.is_prerelease else 1

        result = compare_release_labels(x.release_labels, y.release_labels)
        if result or self.mode is not VersionComparison.VERSION_RELEASE_METADATA:
            return result

        return _cmp((x.metadata or "").upper(), (y.metadata or "").upper())

    def equals(self, x: Version | None, y: Version | None) -> bool:
        return self.compare(x, y) == 0

    def hash(self, version: Version | None) -> int:
        if version is None:
            return hash(None)
        if self.mode is VersionComparison.VERSION:
            return hash(_numbers(version))

        labels = tuple(_hash_identifier(label) for label in version.release_labels)
        if self.mode is VersionComparison.VERSION_RELEASE_METADATA:
            return hash((_numbers(version), labels, (version.metadata or "").upper()))
        return hash((_numbers(version), labels))

    @property
    def sort_key(self) -> Callable[[Version | None], Any]:
        """Key function for ``sorted``/``max`` ordering under this comparer."""
        return cmp_to_key(self.compare)


def _hash_identifier(identifier: str) -> str | int:
    # "01" and "1" compare equal, so they must hash alike
    if _is_numeric(identifier):
        return int(identifier)
    return identifier.upper()


VersionComparer.DEFAULT = VersionComparer(VersionComparison.DEFAULT)
VersionComparer.VERSION = VersionComparer(VersionComparison.VERSION)
VersionComparer.VERSION_RELEASE = VersionComparer(VersionComparison.VERSION_RELEASE)
VersionComparer.VERSION_RELEASE_METADATA = VersionComparer(
    VersionComparison.VERSION_RELEASE_METADATA
)

_COMPARERS: dict[VersionComparison, VersionComparer] = {
    VersionComparison.DEFAULT: VersionComparer.DEFAULT,
    VersionComparison.VERSION: VersionComparer.VERSION,
    VersionComparison.VERSION_RELEASE: VersionComparer.VERSION_RELEASE,
    VersionComparison.VERSION_RELEASE_METADATA: VersionComparer.VERSION_RELEASE_METADATA,
}


def get_comparer(mode: VersionComparison | str) -> VersionComparer:
    """Return the shared comparer for a mode or its string value.

    Raises:
        ValueError: If ``mode`` is not a known comparison name.
    """
    if not isinstance(mode, VersionComparison):
        mode = VersionComparison(mode)
    return _COMPARERS[mode]


def compare_versions(
    x: Version | None,
    y: Version | None,
    mode: VersionComparison = VersionComparison.DEFAULT,
) -> int:
    return get_comparer(mode).compare(x, y)
