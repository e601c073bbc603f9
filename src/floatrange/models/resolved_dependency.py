"""Resolved dependency model."""

from __future__ import annotations

from dataclasses import dataclass

from ..versioning import FloatRange, Version


@dataclass(frozen=True)
class ResolvedDependency:
    """Outcome of resolving one dependency specifier against its candidates."""

    name: str
    specifier: str
    float_range: FloatRange | None
    version: Version | None
    candidates: int
    error: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Dependency name must be non-empty")
        if self.candidates < 0:
            raise ValueError("Candidate count must be non-negative")
        if self.error is not None and self.float_range is not None:
            raise ValueError("A dependency with a parse error cannot carry a range")
        if self.version is not None and self.float_range is None:
            raise ValueError("A resolved version requires a range")

    @property
    def resolved(self) -> bool:
        return self.version is not None

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "name": self.name,
            "specifier": self.specifier,
            "range": str(self.float_range) if self.float_range is not None else None,
            "resolved": self.version.to_full_string() if self.version is not None else None,
            "candidates": self.candidates,
        }
        if self.error is not None:
            data["error"] = self.error
        return data
