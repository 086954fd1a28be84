import pytest

from bestcombo.mapper import (
    build_coverage_map,
    compute_three_stage_coverage,
    map_to_best_combination,
)
from bestcombo.models import (
    BestCombination,
    BestCombinationElement,
    BestCombinationPackage,
    BestCombinationSubset,
)


@pytest.mark.parametrize(
    "values, expected",
    [([], 0), ([0, 0], 0), ([0, 1], 1), ([1, 1], 2)],
)
def test_three_stage_coverage_computation(values, expected):
    assert compute_three_stage_coverage(values) == expected


def test_build_coverage_map():
    elements = {
        BestCombinationElement(1, "A", 1, 1),
        BestCombinationElement(2, "A", 1, 1),
        BestCombinationElement(3, "B", 0, 1),
        BestCombinationElement(4, "B", 1, 0),
        BestCombinationElement(5, "C", 0, 0),
    }
    expected = {"A": (2, 2), "B": (1, 1), "C": (0, 0)}
    assert build_coverage_map(elements) == expected


def test_mapper():
    current_cover = [1, 2, 4]
    subsets = [
        BestCombinationSubset(1, "S1", [BestCombinationElement(1, "A", 1, 1)], 10, 10),
        BestCombinationSubset(
            2,
            "S2",
            [BestCombinationElement(1, "A", 1, 1), BestCombinationElement(3, "A", 1, 0)],
            None,
            10,
        ),
    ]
    universe = {1, 2, 3}

    result = map_to_best_combination(current_cover, subsets, universe, 0)
    expected = BestCombination(
        packages=[
            BestCombinationPackage(1, "S1", {"A": (2, 2)}, 10, 10),
            BestCombinationPackage(2, "S2", {"A": (2, 1)}, None, 10),
        ],
        combined_monthly_price_cents=10,
        combined_monthly_price_yearly_subscription_in_cents=20,
        combined_coverage=67,
        index=0,
    )
    assert result == expected


def test_mapper_with_duplicate_ids():
    current_cover = [1]
    subset = BestCombinationSubset(1, "S1", [BestCombinationElement(1, "A", 1, 1)], 10, 10)
    subsets = [subset, subset]
    universe = {1}

    result = map_to_best_combination(current_cover, subsets, universe, 0)
    expected = BestCombination(
        packages=[BestCombinationPackage(1, "S1", {"A": (2, 2)}, 10, 10)],
        combined_monthly_price_cents=10,
        combined_monthly_price_yearly_subscription_in_cents=10,
        combined_coverage=100,
        index=0,
    )
    assert result == expected


def test_mapper_empty_cover_and_universe():
    subsets = [
        BestCombinationSubset(
            1,
            "S1",
            [
                BestCombinationElement(1, "", 1, 1),
                BestCombinationElement(2, "", 1, 0),
                BestCombinationElement(3, "", 1, 0),
            ],
            10,
            10,
        )
    ]
    result = map_to_best_combination([], subsets, set(), 0)
    assert result == BestCombination([], 0, 0, 0, 0)


def test_mapper_sorts_packages_and_keeps_index():
    subsets = [
        BestCombinationSubset(3, "S3", [BestCombinationElement(2, "", 1, 1)], 5, 5),
        BestCombinationSubset(1, "S1", [BestCombinationElement(1, "", 1, 1)], 5, 5),
    ]
    result = map_to_best_combination([3, 1], subsets, {1, 2}, 7)
    assert [p.id for p in result.packages] == [1, 3]
    assert result.index == 7
    assert result.combined_coverage == 100


def test_mapper_ignores_elements_outside_universe():
    subsets = [
        BestCombinationSubset(
            1,
            "S1",
            [BestCombinationElement(1, "", 0, 0), BestCombinationElement(9, "", 0, 0)],
            5,
            10,
        ),
        BestCombinationSubset(2, "S2", [BestCombinationElement(2, "", 0, 0)], 5, 10),
    ]
    result = map_to_best_combination([1, 2], subsets, {1, 2, 3}, 0)
    assert result.combined_coverage == 67
    assert result.combined_monthly_price_cents == 10
    assert result.combined_monthly_price_yearly_subscription_in_cents == 20