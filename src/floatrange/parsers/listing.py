"""Parse candidate version listings from JSON or YAML files.

Two shapes are accepted::

    {"packages": [{"name": "Foo", "versions": ["1.0.0", "1.1.0"]}]}
    {"Foo": ["1.0.0", "1.1.0"]}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from ..validators.listing import ListingValidationError, validate_listing
from ..versioning import Version

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


class ListingError(ValueError):
    """Raised when a listing file cannot be read or has an unsupported shape."""


def _load_document(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            return yaml.safe_load(text) or {}
        return json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ListingError(f"{path}: failed to parse listing: {exc}") from exc


def _coerce_listing_payload(data: Any) -> dict[str, list[str]]:
    """Normalise both listing shapes into a package -> versions mapping."""
    packages = data.get("packages")
    if isinstance(packages, list):
        normalised: dict[str, list[str]] = {}
        for entry in packages:
            normalised.setdefault(entry["name"], []).extend(entry["versions"])
        return normalised
    return {str(name): list(versions) for name, versions in data.items()}


def parse(path: Path) -> dict[str, list[str]]:
    """Return package -> version strings from a listing file.

    Raises:
        ListingError: If the file cannot be parsed or fails schema validation.
    """
    document = _load_document(path)
    try:
        validate_listing(document)
    except ListingValidationError as exc:
        raise ListingError(f"{path}: invalid listing:{exc}") from exc
    return _coerce_listing_payload(document)


def load_candidates(path: Path, lenient: bool = False) -> dict[str, list[Version]]:
    """Return package -> parsed candidate versions.

    Version strings that do not parse are skipped with a warning.
    """
    candidates: dict[str, list[Version]] = {}
    skipped = 0
    for name, versions in parse(path).items():
        parsed: list[Version] = []
        for text in versions:
            version = Version.try_parse(text, lenient=lenient)
            if version is None:
                logger.warning("%s: skipping invalid version %r for %s", path, text, name)
                skipped += 1
                continue
            parsed.append(version)
        candidates[name] = parsed

    logger.debug("Loaded %d packages from %s (%d versions skipped)", len(candidates), path, skipped)
    return candidates
