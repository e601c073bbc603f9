"""Pick the best candidate version for floating dependency specifiers.

Candidate listings are owned by the caller; they are only iterated and never
retained.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from .models import ResolutionResult, ResolvedDependency
from .versioning import FloatBehavior, FloatRange, FloatRangeParseError, Version, VersionComparer

logger = logging.getLogger(__name__)


def accepts(
    float_range: FloatRange,
    candidate: Version,
    comparer: VersionComparer = VersionComparer.DEFAULT,
) -> bool:
    """True if ``candidate`` is acceptable for ``float_range``.

    An exact specifier accepts a candidate equal to its version under
    ``comparer``; floating specifiers defer to :meth:`FloatRange.satisfies`.
    """
    if candidate is None:
        raise TypeError("candidate must not be None")
    if float_range.float_behavior is FloatBehavior.NONE:
        return comparer.equals(float_range.min_version, candidate)
    return float_range.satisfies(candidate)


def find_matches(
    float_range: FloatRange,
    candidates: Iterable[Version],
    comparer: VersionComparer = VersionComparer.DEFAULT,
) -> list[Version]:
    """Return the candidates accepted by ``float_range``, lowest first.

    Candidates that are equal under ``comparer`` are collapsed to the first
    one seen.
    """
    matches: list[Version] = []
    for candidate in candidates:
        if not accepts(float_range, candidate, comparer):
            continue
        if any(comparer.equals(candidate, seen) for seen in matches):
            continue
        matches.append(candidate)
    return sorted(matches, key=comparer.sort_key)


def find_best_match(
    float_range: FloatRange,
    candidates: Iterable[Version],
    comparer: VersionComparer = VersionComparer.DEFAULT,
) -> Version | None:
    """Return the highest candidate accepted by ``float_range``, or None."""
    best: Version | None = None
    for candidate in candidates:
        if not accepts(float_range, candidate, comparer):
            continue
        if best is None or comparer.compare(candidate, best) > 0:
            best = candidate
    return best


class Resolver:
    """Resolve named dependency specifiers against candidate listings."""

    def __init__(
        self,
        comparer: VersionComparer = VersionComparer.DEFAULT,
        lenient: bool = False,
    ) -> None:
        self.comparer = comparer
        self.lenient = lenient

    def resolve_one(
        self, name: str, specifier: str, candidates: Iterable[Version]
    ) -> ResolvedDependency:
        candidate_list = list(candidates)
        try:
            float_range = FloatRange.parse(specifier, lenient=self.lenient)
        except FloatRangeParseError as exc:
            logger.warning("Skipping %s: %s", name, exc)
            return ResolvedDependency(
                name=name,
                specifier=specifier,
                float_range=None,
                version=None,
                candidates=len(candidate_list),
                error=str(exc),
            )

        version = find_best_match(float_range, candidate_list, self.comparer)
        if version is None:
            logger.warning(
                "No candidate for %s satisfies %r (%d considered)",
                name,
                str(float_range),
                len(candidate_list),
            )
        else:
            logger.debug("Resolved %s %r to %s", name, specifier, version)

        return ResolvedDependency(
            name=name,
            specifier=specifier,
            float_range=float_range,
            version=version,
            candidates=len(candidate_list),
        )

    def resolve(
        self,
        dependencies: Mapping[str, str],
        listing: Mapping[str, Iterable[Version]],
    ) -> ResolutionResult:
        """Resolve every dependency; missing listing entries have no candidates."""
        entries = [
            self.resolve_one(name, specifier, listing.get(name, ()))
            for name, specifier in dependencies.items()
        ]
        result = ResolutionResult.from_entries(entries)
        totals = result.totals
        logger.info(
            "Resolved %d of %d dependencies", totals["resolved"], totals["dependencies"]
        )
        return result
