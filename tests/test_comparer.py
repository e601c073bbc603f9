from __future__ import annotations

import pytest

from floatrange.versioning import (
    Version,
    VersionComparer,
    VersionComparison,
    compare_release_labels,
    compare_versions,
    get_comparer,
)


def v(text: str) -> Version:
    return Version.parse(text)


def test_default_orders_prerelease_first() -> None:
    assert VersionComparer.DEFAULT.compare(v("1.0.0-beta"), v("1.0.0")) == -1
    assert VersionComparer.DEFAULT.compare(v("1.0.0"), v("1.0.0-beta")) == 1
    assert VersionComparer.DEFAULT.compare(v("1.0.1"), v("1.0.0")) == 1


def test_version_mode_ignores_label_and_metadata() -> None:
    comparer = VersionComparer.VERSION
    assert comparer.compare(v("1.0.0-beta+x"), v("1.0.0")) == 0
    assert comparer.equals(v("1.0.0-alpha"), v("1.0.0-beta"))
    assert comparer.hash(v("1.0.0-alpha")) == comparer.hash(v("1.0.0-beta"))
    assert comparer.compare(v("1.0.0.1"), v("1.0.0")) == 1


def test_version_release_matches_default() -> None:
    pairs = [("1.0.0-a", "1.0.0-b"), ("1.0.0+a", "1.0.0+b"), ("2.0", "1.9.9")]
    for left, right in pairs:
        assert VersionComparer.VERSION_RELEASE.compare(v(left), v(right)) == (
            VersionComparer.DEFAULT.compare(v(left), v(right))
        )


def test_metadata_mode_compares_metadata_ignoring_case() -> None:
    comparer = VersionComparer.VERSION_RELEASE_METADATA
    assert comparer.compare(v("1.0.0+a"), v("1.0.0+b")) == -1
    assert comparer.equals(v("1.0.0+Build"), v("1.0.0+build"))
    assert comparer.hash(v("1.0.0+Build")) == comparer.hash(v("1.0.0+build"))
    assert comparer.compare(v("1.0.0"), v("1.0.0+a")) == -1


def test_absent_versions_form_their_own_class() -> None:
    comparer = VersionComparer.DEFAULT
    assert comparer.compare(None, None) == 0
    assert comparer.equals(None, None)
    assert comparer.compare(None, v("0.0")) == -1
    assert comparer.compare(v("0.0"), None) == 1
    assert not comparer.equals(v("1.0"), None)


def test_numeric_identifiers_sort_before_alphanumeric() -> None:
    assert compare_release_labels(("1",), ("alpha",)) == -1
    assert compare_release_labels(("alpha",), ("1",)) == 1
    assert compare_release_labels(("2",), ("10",)) == -1
    assert compare_release_labels(("a",), ("a", "1")) == -1
    assert compare_release_labels(("RC",), ("rc",)) == 0


def test_leading_zero_identifiers_compare_and_hash_alike() -> None:
    a = Version.parse("1.0.0-rc.01", lenient=True)
    b = Version.parse("1.0.0-rc.1")
    assert a == b
    assert hash(a) == hash(b)


def test_get_comparer_accepts_names() -> None:
    assert get_comparer("version") is VersionComparer.VERSION
    assert get_comparer(VersionComparison.DEFAULT) is VersionComparer.DEFAULT
    with pytest.raises(ValueError):
        get_comparer("bogus")


def test_compare_versions_and_compare_to() -> None:
    assert compare_versions(v("1.0.0-beta"), v("1.0.0"), VersionComparison.VERSION) == 0
    assert v("1.0.0-beta").compare_to(v("1.0.0")) == -1
    assert v("1.0.0-beta").compare_to(v("1.0.0"), VersionComparison.VERSION) == 0


def test_sort_key() -> None:
    versions = [v("2.0.0"), v("1.0.0"), v("1.0.0-rc.1")]
    ordered = sorted(versions, key=VersionComparer.DEFAULT.sort_key)
    assert [str(x) for x in ordered] == ["1.0.0-rc.1", "1.0.0", "2.0.0"]
