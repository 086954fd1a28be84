"""Value types describing streaming packages and computed combinations."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = [
    "BestCombinationElement",
    "BestCombinationSubset",
    "BestCombinationPackage",
    "BestCombination",
]


@dataclass(frozen=True, order=True)
class BestCombinationElement:
    """Coverage of a single game by a package."""

    game_id: int
    tournament_name: str
    live: int
    highlights: int


@dataclass(frozen=True)
class BestCombinationSubset:
    """A streaming package together with the games it covers.

    ``elements`` is stored sorted and without duplicates.
    """

    streaming_package_id: int
    name: str
    elements: tuple[BestCombinationElement, ...]
    monthly_price_cents: int | None
    monthly_price_yearly_subscription_in_cents: int

    def __init__(
        self,
        streaming_package_id: int,
        name: str,
        elements: Iterable[BestCombinationElement],
        monthly_price_cents: int | None,
        monthly_price_yearly_subscription_in_cents: int,
    ) -> None:
        object.__setattr__(self, "streaming_package_id", streaming_package_id)
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "elements", tuple(sorted(set(elements))))
        object.__setattr__(self, "monthly_price_cents", monthly_price_cents)
        object.__setattr__(
            self,
            "monthly_price_yearly_subscription_in_cents",
            monthly_price_yearly_subscription_in_cents,
        )

    def element_ids(self) -> set[int]:
        """Return the game ids this package covers."""
        return {element.game_id for element in self.elements}


@dataclass
class BestCombinationPackage:
    """A chosen package with per-tournament (live, highlights) coverage."""

    id: int
    name: str
    coverage: dict[str, tuple[int, int]] = field(default_factory=dict)
    monthly_price_cents: int | None = None
    monthly_price_yearly_subscription_in_cents: int = 0


@dataclass
class BestCombination:
    """A combination of packages with its prices and coverage percentage."""

    packages: list[BestCombinationPackage] = field(default_factory=list)
    combined_monthly_price_cents: int = 0
    combined_monthly_price_yearly_subscription_in_cents: int = 0
    combined_coverage: int = 0
    index: int = 0

    def is_duplicate_of(self, other: BestCombination) -> bool:
        """True if both combinations hold the same packages, whatever their index."""
        return self.packages == other.packages