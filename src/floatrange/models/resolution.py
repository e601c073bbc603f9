"""Resolution result for a set of dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterable, Mapping

from .preview import ResolutionPreview
from .resolved_dependency import ResolvedDependency


@dataclass(frozen=True)
class ResolutionResult:
    """Immutable, name-sorted collection of resolved dependencies."""

    dependencies: tuple[ResolvedDependency, ...]

    def __post_init__(self) -> None:
        names = [entry.name for entry in self.dependencies]
        if len(set(names)) != len(names):
            raise ValueError("Dependency names must be unique")

    @classmethod
    def from_entries(cls, entries: Iterable[ResolvedDependency]) -> ResolutionResult:
        return cls(dependencies=tuple(sorted(entries, key=lambda entry: entry.name)))

    @property
    def totals(self) -> dict[str, int]:
        resolved = sum(1 for entry in self.dependencies if entry.resolved)
        return {
            "dependencies": len(self.dependencies),
            "resolved": resolved,
            "unresolved": len(self.dependencies) - resolved,
        }

    @property
    def has_unresolved(self) -> bool:
        return any(not entry.resolved for entry in self.dependencies)

    def by_name(self) -> dict[str, ResolvedDependency]:
        return {entry.name: entry for entry in self.dependencies}

    def pins(self) -> dict[str, str]:
        """Map each resolved dependency to its normalized version string."""
        return {
            entry.name: entry.version.to_normalized_string()
            for entry in self.dependencies
            if entry.version is not None
        }

    def preview(self, previous: Mapping[str, str]) -> ResolutionPreview:
        return ResolutionPreview.from_pins(previous=previous, current=self.pins())

    def to_dict(self) -> dict[str, object]:
        return {
            "dependencies": [entry.to_dict() for entry in self.dependencies],
            "totals": self.totals,
        }
