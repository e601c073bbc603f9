"""Report aggregation and schema-friendly output."""

from __future__ import annotations

from typing import Any

from .models import ResolutionPreview, ResolutionResult


def aggregate(
    result: ResolutionResult, preview: ResolutionPreview | None = None
) -> dict[str, Any]:
    """Aggregate a resolution into a single JSON-serialisable report.

    ``dependencies`` lists every requested package with its canonical range
    and resolved version (``None`` when nothing satisfied it); ``preview`` is
    included only when previously pinned versions were supplied.
    """

    report: dict[str, Any] = {
        "version": "1",
        "hasUnresolved": result.has_unresolved,
        **result.to_dict(),
    }
    if preview is not None:
        report["preview"] = preview.to_dict()

    return report
