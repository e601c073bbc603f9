"""Preview of how a new resolution changes previously pinned packages."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Mapping

from ..versioning import Version

_VALID_STATUSES = {"updated", "no-change"}


@dataclass(frozen=True)
class PackagePin:
    """A package name pinned to one version string."""

    name: str
    version: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Package name must be non-empty")
        if not self.version:
            raise ValueError("Pinned version must be non-empty")

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "version": self.version}


@dataclass(frozen=True)
class UpdatedPackage:
    """A package whose pinned version changes."""

    name: str
    old_version: str
    new_version: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "from": self.old_version, "to": self.new_version}


@dataclass(frozen=True)
class ChangeSummary:
    """Counts of changes between two sets of pins."""

    added: int
    removed: int
    updated: int
    status: str

    def __post_init__(self) -> None:
        if self.added < 0 or self.removed < 0 or self.updated < 0:
            raise ValueError("Change counts must be non-negative")
        if self.status not in _VALID_STATUSES:
            raise ValueError(f"Invalid status: {self.status}")

    def to_dict(self) -> dict[str, object]:
        return {
            "added": self.added,
            "removed": self.removed,
            "updated": self.updated,
            "status": self.status,
        }

    @classmethod
    def from_counts(cls, *, added: int, removed: int, updated: int) -> ChangeSummary:
        status = "no-change" if added == 0 and removed == 0 and updated == 0 else "updated"
        return cls(added=added, removed=removed, updated=updated, status=status)


def _same_version(old: str, new: str) -> bool:
    old_version = Version.try_parse(old, lenient=True)
    new_version = Version.try_parse(new, lenient=True)
    if old_version is None or new_version is None:
        return old.strip() == new.strip()
    return old_version == new_version


@dataclass(frozen=True)
class ResolutionPreview:
    """Added, removed, unchanged and updated packages, each sorted by name."""

    added: tuple[PackagePin, ...]
    removed: tuple[PackagePin, ...]
    unchanged: tuple[PackagePin, ...]
    updated: tuple[UpdatedPackage, ...]

    @classmethod
    def from_pins(
        cls, *, previous: Mapping[str, str], current: Mapping[str, str]
    ) -> ResolutionPreview:
        added: list[PackagePin] = []
        unchanged: list[PackagePin] = []
        updated: list[UpdatedPackage] = []

        for name in sorted(current):
            new = current[name]
            old = previous.get(name)
            if old is None:
                added.append(PackagePin(name, new))
            elif _same_version(old, new):
                unchanged.append(PackagePin(name, new))
            else:
                updated.append(UpdatedPackage(name, old, new))

        removed = [
            PackagePin(name, previous[name]) for name in sorted(previous) if name not in current
        ]

        return cls(
            added=tuple(added),
            removed=tuple(removed),
            unchanged=tuple(unchanged),
            updated=tuple(updated),
        )

    @property
    def change_summary(self) -> ChangeSummary:
        return ChangeSummary.from_counts(
            added=len(self.added), removed=len(self.removed), updated=len(self.updated)
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "added": [pin.to_dict() for pin in self.added],
            "removed": [pin.to_dict() for pin in self.removed],
            "unchanged": [pin.to_dict() for pin in self.unchanged],
            "updated": [entry.to_dict() for entry in self.updated],
            "changeSummary": self.change_summary.to_dict(),
        }
