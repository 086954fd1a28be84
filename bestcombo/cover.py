"""Building blocks of the set-cover search: coverage, cost and candidate ranking."""

from __future__ import annotations

from collections.abc import Iterable, Sequence, Set

from .models import BestCombinationSubset

__all__ = [
    "UNPRICED_COST",
    "covered_elements",
    "subset_cost",
    "rank_candidates",
]

# Cost given to a package without a monthly price, so that it ranks last.
UNPRICED_COST = float(2**64 - 1)


def covered_elements(
    current_cover: Iterable[int],
    subsets: Sequence[BestCombinationSubset],
) -> set[int]:
    """Return the game ids covered by the packages whose ids are in ``current_cover``.

    For each id the first subset carrying it is used. Raises ``KeyError`` if an
    id matches no subset.
    """
    first_by_id: dict[int, BestCombinationSubset] = {}
    for subset in subsets:
        first_by_id.setdefault(subset.streaming_package_id, subset)

    covered: set[int] = set()
    for package_id in current_cover:
        try:
            subset = first_by_id[package_id]
        except KeyError:
            raise KeyError(f"no subset with streaming package id {package_id}") from None
        covered.update(subset.element_ids())
    return covered


def subset_cost(subset: BestCombinationSubset, use_yearly_price: bool = False) -> float:
    """Return the price used to rank a package.

    With ``use_yearly_price`` the monthly price of the yearly subscription is
    used; otherwise the plain monthly price, or ``UNPRICED_COST`` when the
    package has none.
    """
    if use_yearly_price:
        return float(subset.monthly_price_yearly_subscription_in_cents)
    if subset.monthly_price_cents is None:
        return UNPRICED_COST
    return float(subset.monthly_price_cents)


def rank_candidates(
    subsets: Sequence[BestCombinationSubset],
    covered: Set[int],
    use_yearly_price: bool = False,
) -> list[tuple[int, float]]:
    """Rank the subsets that add coverage by cost per newly covered game.

    Returns ``(position, ratio)`` pairs, ``position`` being the index into
    ``subsets``, in ascending order of ratio. Subsets that cover nothing new
    are left out; ties keep the input order.
    """
    candidates: list[tuple[int, float]] = []
    for position, subset in enumerate(subsets):
        uncovered = len(subset.element_ids() - covered)
        if uncovered > 0:
            candidates.append((position, subset_cost(subset, use_yearly_price) / uncovered))
    candidates.sort(key=lambda candidate: candidate[1])
    return candidates