#!/usr/bin/env python3
"""Local CLI entrypoint to resolve a manifest against a candidate listing.

Usage:
  python scripts/resolve.py --manifest deps.json --listing listing.yaml \
      [--settings settings.json] [--previous pins.json] [--allow-unresolved]

Exit codes: 0 on success, 1 on input or settings errors, 10 when a
dependency could not be resolved (unless --allow-unresolved is given or
FLOATRANGE_ALLOW_UNRESOLVED is set).
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from floatrange.config import ConfigError, load_settings
from floatrange.core import resolve_manifest


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--manifest", type=Path, required=True)
    parser.add_argument("--listing", type=Path, required=True)
    parser.add_argument("--settings", type=Path, default=None)
    parser.add_argument("--previous", type=Path, default=None)
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--allow-unresolved", action="store_true")
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.settings)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        report = resolve_manifest(
            args.manifest, args.listing, settings=settings, previous=args.previous
        )
    except (OSError, ValueError) as exc:  # includes ListingError, ManifestError
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(report, indent=2))

    if report.get("hasUnresolved") and not args.allow_unresolved:
        allow_env = os.getenv("FLOATRANGE_ALLOW_UNRESOLVED", "").strip().lower()
        if allow_env in {"1", "true", "yes", "y"}:
            return 0
        return 10

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
