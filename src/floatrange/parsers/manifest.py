"""Parse a JSON manifest and extract dependency specifiers across sections."""

from __future__ import annotations

import json
from pathlib import Path

SECTIONS = (
    "dependencies",
    "devDependencies",
)


class ManifestError(ValueError):
    """Raised when a manifest is not shaped like a dependency manifest."""


def parse(path: Path) -> list[tuple[str, str]]:
    """Return list of (package, specifier) from all dependency sections.

    Sections: dependencies, devDependencies.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ManifestError(f"{path}: manifest must be a JSON object")

    pairs: list[tuple[str, str]] = []
    for section in SECTIONS:
        deps = data.get(section) or {}
        if not isinstance(deps, dict):
            raise ManifestError(f"{path}: '{section}' must be an object")
        for name, specifier in deps.items():
            pairs.append((name, str(specifier)))

    return pairs
