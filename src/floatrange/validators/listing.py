"""Check candidate version listings against the bundled listing schema.

A listing is either ``{"packages": [{"name": ..., "versions": [...]}]}`` or a
plain mapping of package name to version strings. Also usable as a CLI::

    python -m floatrange.validators.listing --input listing.json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from collections.abc import Iterable
from typing import Any

from jsonschema import Draft202012Validator

LISTING_SCHEMA_PATH = Path(__file__).resolve().parents[1] / "schemas" / "listing.schema.json"


class ListingValidationError(ValueError):
    """Raised when a candidate listing does not have a supported shape."""


def _load_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _location(path: Iterable[Any]) -> str:
    # packages/0/versions/2 -> packages[0].versions[2]
    location = ""
    for part in path:
        if isinstance(part, int):
            location += f"[{part}]"
        else:
            location += f".{part}" if location else str(part)
    return location or "listing"


def _format_errors(errors: Iterable) -> str:
    return "\n".join(f"- {_location(error.path)}: {error.message}" for error in errors)


def _package_count(document: Any) -> int:
    if isinstance(document, dict) and "packages" in document:
        return len(document["packages"])
    return len(document)


def validate_listing(document: Any, schema_path: Path = LISTING_SCHEMA_PATH) -> None:
    """Raise ListingValidationError naming every package entry the schema rejects."""
    validator = Draft202012Validator(_load_json(schema_path))
    errors = sorted(validator.iter_errors(document), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise ListingValidationError("\n" + _format_errors(errors))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Check that a candidate version listing has a supported shape"
    )
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="JSON listing of package names and their candidate versions",
    )
    parser.add_argument(
        "--schema",
        type=Path,
        default=LISTING_SCHEMA_PATH,
        help="Listing schema to check against (defaults to the bundled one)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        document = _load_json(args.input)
        validate_listing(document, args.schema)
    except FileNotFoundError as exc:
        print(f"ERROR: listing file not found: {exc.filename}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as exc:
        print(f"ERROR: listing {args.input} is not valid JSON: {exc}", file=sys.stderr)
        return 1
    except ListingValidationError as exc:
        print(f"ERROR: candidate listing {args.input} rejected:{exc}", file=sys.stderr)
        return 1

    print(f"Candidate listing {args.input} OK ({_package_count(document)} packages)")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
