"""Data models for dependency resolution results."""

from __future__ import annotations

from .preview import ChangeSummary, PackagePin, ResolutionPreview, UpdatedPackage
from .resolution import ResolutionResult
from .resolved_dependency import ResolvedDependency

__all__ = [
    "ChangeSummary",
    "PackagePin",
    "ResolutionPreview",
    "ResolutionResult",
    "ResolvedDependency",
    "UpdatedPackage",
]
