from __future__ import annotations

from floatrange.models import ResolutionPreview
from floatrange.report import aggregate
from floatrange.resolver import Resolver
from floatrange.versioning import Version


def _result():
    listing = {"Alpha": [Version(1, 0, 0), Version(1, 0, 4)]}
    return Resolver().resolve({"Alpha": "1.0.*", "Beta": "2.*"}, listing)


def test_aggregate_carries_result_fields() -> None:
    result = _result()
    report = aggregate(result)

    assert report["version"] == "1"
    assert report["hasUnresolved"] is True
    assert report["dependencies"] == result.to_dict()["dependencies"]
    assert report["totals"] == {"dependencies": 2, "resolved": 1, "unresolved": 1}
    assert [entry["resolved"] for entry in report["dependencies"]] == ["1.0.4", None]
    assert "preview" not in report


def test_aggregate_with_preview() -> None:
    result = _result()
    preview = ResolutionPreview.from_pins(previous={"Alpha": "1.0.4"}, current=result.pins())
    report = aggregate(result, preview)
    assert report["preview"]["changeSummary"]["status"] == "no-change"
    assert report["preview"]["unchanged"] == [{"name": "Alpha", "version": "1.0.4"}]
