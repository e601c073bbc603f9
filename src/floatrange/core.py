"""Core resolution entrypoint.

Reads a manifest and a candidate listing, resolves every dependency and
returns a report dict. Used by ``scripts/resolve.py``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .config import Settings
from .parsers.listing import load_candidates
from .parsers.manifest import parse as parse_manifest
from .report import aggregate
from .resolver import Resolver

logger = logging.getLogger(__name__)


def load_previous_pins(path: Path) -> dict[str, str]:
    """Read a ``name -> version`` JSON object of previously pinned versions."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
        raise ValueError(f"{path}: previous pins must map package names to version strings")
    return {str(name): version for name, version in data.items()}


def resolve_manifest(
    manifest: Path,
    listing: Path,
    settings: Settings | None = None,
    previous: Path | None = None,
) -> dict[str, Any]:
    """Resolve a manifest's dependencies against a listing.

    Params:
        manifest: JSON manifest with ``dependencies``/``devDependencies``
        listing: JSON or YAML candidate listing
        settings: parsing/comparison settings; defaults when None
        previous: optional JSON file of previously pinned versions; when
            given the report carries a preview of the changes

    Returns: dict report (see ``report.aggregate``)
    """
    settings = settings or Settings()

    dependencies: dict[str, str] = {}
    for name, specifier in parse_manifest(manifest):
        if name in dependencies and dependencies[name] != specifier:
            logger.warning(
                "%s declared twice (%r, %r); using the later one",
                name,
                dependencies[name],
                specifier,
            )
        dependencies[name] = specifier

    candidates = load_candidates(listing, lenient=settings.lenient)

    resolver = Resolver(comparer=settings.comparer, lenient=settings.lenient)
    result = resolver.resolve(dependencies, candidates)

    preview = None
    if previous is not None:
        preview = result.preview(load_previous_pins(previous))

    return aggregate(result, preview)
