"""Turn a chosen set of package ids into a described combination."""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Iterable, Sequence, Set

from .models import (
    BestCombination,
    BestCombinationElement,
    BestCombinationPackage,
    BestCombinationSubset,
)

__all__ = [
    "compute_three_stage_coverage",
    "build_coverage_map",
    "map_to_best_combination",
]


def compute_three_stage_coverage(values: Iterable[int]) -> int:
    """Collapse 0/1 coverage flags to 0 (none), 1 (partial) or 2 (full)."""
    values = list(values)
    if not values or all(v == 0 for v in values):
        return 0
    if all(v == 1 for v in values):
        return 2
    return 1


def build_coverage_map(
    elements: Iterable[BestCombinationElement],
) -> dict[str, tuple[int, int]]:
    """Map each tournament name to its (live, highlights) three-stage coverage."""
    grouped: dict[str, list[BestCombinationElement]] = defaultdict(list)
    for element in elements:
        grouped[element.tournament_name].append(element)

    return {
        name: (
            compute_three_stage_coverage(e.live for e in group),
            compute_three_stage_coverage(e.highlights for e in group),
        )
        for name, group in grouped.items()
    }


def _round_half_away(value: float) -> int:
    return math.floor(value + 0.5)


def map_to_best_combination(
    current_cover: Sequence[int],
    subsets: Iterable[BestCombinationSubset],
    universe: Set[int],
    index: int,
) -> BestCombination:
    """Describe the packages whose ids are in ``current_cover``.

    Each package id is counted once; packages are sorted by id and the
    coverage is the rounded percentage of ``universe`` they cover.
    """
    chosen = set(current_cover)
    packages: list[BestCombinationPackage] = []
    monthly_total = 0
    yearly_total = 0
    covered: set[int] = set()
    processed: set[int] = set()

    for subset in subsets:
        pid = subset.streaming_package_id
        if pid not in chosen or pid in processed:
            continue
        processed.add(pid)

        packages.append(
            BestCombinationPackage(
                id=pid,
                name=subset.name,
                coverage=build_coverage_map(subset.elements),
                monthly_price_cents=subset.monthly_price_cents,
                monthly_price_yearly_subscription_in_cents=(
                    subset.monthly_price_yearly_subscription_in_cents
                ),
            )
        )
        monthly_total += subset.monthly_price_cents or 0
        yearly_total += subset.monthly_price_yearly_subscription_in_cents
        covered.update(e.game_id for e in subset.elements if e.game_id in universe)

    coverage = _round_half_away(len(covered) / len(universe) * 100.0) if universe else 0
    packages.sort(key=lambda package: package.id)

    return BestCombination(
        packages=packages,
        combined_monthly_price_cents=monthly_total,
        combined_monthly_price_yearly_subscription_in_cents=yearly_total,
        combined_coverage=coverage,
        index=index,
    )