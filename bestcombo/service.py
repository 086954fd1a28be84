"""Search for the cheapest combinations of packages that cover a set of games."""

from __future__ import annotations

from collections.abc import Iterable, Sequence, Set

from .cover import covered_elements, rank_candidates
from .mapper import map_to_best_combination
from .models import BestCombination, BestCombinationSubset

__all__ = ["get_best_combinations"]


def get_best_combinations(
    universe: Iterable[int],
    subsets: Iterable[BestCombinationSubset],
    limit: int,
    use_yearly_price: bool = False,
) -> list[BestCombination]:
    """Return up to ``limit`` distinct combinations of packages covering ``universe``.

    The search is a greedy backtracking walk that tries packages in ascending
    order of cost per newly covered game. When the universe cannot be covered
    fully, the combinations closest to a full cover are returned instead. The
    problem is NP-hard, so the worst-case running time is exponential.
    """
    search = _Search(
        universe=frozenset(universe),
        subsets=list(subsets),
        limit=limit,
        use_yearly_price=use_yearly_price,
    )
    search.run()
    return search.results


class _Search:
    def __init__(
        self,
        universe: Set[int],
        subsets: Sequence[BestCombinationSubset],
        limit: int,
        use_yearly_price: bool,
    ) -> None:
        self.universe = universe
        self.subsets = subsets
        self.limit = limit
        self.use_yearly_price = use_yearly_price
        self.results: list[BestCombination] = []
        self.cover: list[int] = []

    def run(self) -> None:
        self._explore()

    def _record(self) -> bool:
        """Add the current cover as a result unless already present.

        Returns True if it was added.
        """
        candidate = map_to_best_combination(
            self.cover, self.subsets, self.universe, len(self.results)
        )
        if any(existing.is_duplicate_of(candidate) for existing in self.results):
            return False
        self.results.append(candidate)
        return True

    def _explore(self) -> bool:
        """Extend the current cover; return True once the search should stop."""
        covered = covered_elements(self.cover, self.subsets)

        if covered == self.universe or len(self.cover) >= len(self.subsets):
            return self._record() and len(self.results) >= self.limit

        candidates = rank_candidates(self.subsets, covered, self.use_yearly_price)

        branch_explored = True
        for position, _ratio in candidates:
            self.cover.append(self.subsets[position].streaming_package_id)
            if self._explore():
                return True
            self.cover.pop()

            branch_explored = False
            if len(self.results) >= self.limit:
                return True

        # Nothing could extend this cover: keep it as the closest approximation.
        if branch_explored and self.cover:
            self._record()

        return False