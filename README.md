# bestcombo

`bestcombo` picks combinations of streaming packages that together show as many
of a chosen set of games as they can, at as little cost as possible.

Each package is a `BestCombinationSubset`. It lists the games it offers as
`BestCombinationElement` entries. Each entry records the game id, the tournament
name, and whether the game is shown live and as highlights (`0` or `1`). A
package also has a monthly price, which may be `None`, and a monthly price for a
yearly subscription. Given the set of game ids you want covered, the search
returns up to `limit` distinct combinations, in the order it finds them.

If no combination covers every game, the search returns the combinations that
get closest instead.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using it

```python
from bestcombo.models import BestCombinationElement, BestCombinationSubset
from bestcombo.service import get_best_combinations

subsets = [
    BestCombinationSubset(1, "S1", [BestCombinationElement(1, "A", 1, 1)], 5, 5),
    BestCombinationSubset(2, "S2", [BestCombinationElement(1, "A", 1, 1)], 5, 5),
    BestCombinationSubset(3, "S3", [BestCombinationElement(2, "B", 1, 0)], 5, 5),
]

for combo in get_best_combinations({1, 2}, subsets, limit=5):
    print(combo.index, [p.id for p in combo.packages],
          combo.combined_monthly_price_cents, combo.combined_coverage)
```

`BestCombinationSubset` stores its elements sorted and without duplicates.
`element_ids()` returns the set of game ids that the package covers.

Every `BestCombination` holds:

- `packages`: the chosen `BestCombinationPackage` entries, sorted by id. Each
  entry has a `coverage` map from tournament name to a `(live, highlights)`
  pair. In each pair, `0` means no coverage, `1` means partial coverage and `2`
  means full coverage.
- `combined_monthly_price_cents` and
  `combined_monthly_price_yearly_subscription_in_cents`: the summed prices. A
  package without a monthly price adds zero to the monthly sum.
- `combined_coverage`: the share of the wanted games that are covered, as a
  whole percentage rounded half up.
- `index`: the position of the combination in the result list.

Two combinations count as the same when they hold the same packages
(`BestCombination.is_duplicate_of`). The search never returns the same
combination twice.

### Ranking by price

By default, a package is ranked by its monthly price divided by the number of
games it would add. A package with no monthly price gets a very large cost, so
it comes last. Pass `use_yearly_price=True` to rank by the monthly price of a
yearly subscription instead.

This setting can also come from the environment. `bestcombo.config.load_config`
(or `Config.from_env`) reads `USE_YEARLY_PRICE`, which must be `true` or
`false` and defaults to `false`. It also reads `MONGODB_URI`, `REDIS_URL`,
`RABBITMQ_URL` and `TASK_QUEUE_NAME`, which are required. Variable names are
matched case-insensitively. A missing required value, or a boolean that is
neither `true` nor `false`, raises `bestcombo.config.ConfigError`. You can pass
any mapping in place of `os.environ`.

```python
from bestcombo.config import load_config

config = load_config()
results = get_best_combinations(universe, subsets, 3, config.use_yearly_price)
```

### Building blocks

- `bestcombo.mapper.map_to_best_combination(current_cover, subsets, universe, index)`
  turns a list of chosen package ids into a `BestCombination`.
- `bestcombo.mapper.compute_three_stage_coverage` and
  `bestcombo.mapper.build_coverage_map` compute the `0`/`1`/`2` coverage values.
- `bestcombo.cover.covered_elements` returns the game ids covered by a list of
  package ids. It raises `KeyError` for an id that matches no package.
- `bestcombo.cover.subset_cost` returns the price used for ranking.
- `bestcombo.cover.rank_candidates` returns `(position, ratio)` pairs for the
  packages that would add new games, cheapest per game first.

The search is a greedy backtracking over an NP-hard problem. It works well on
realistic inputs, but its worst case is exponential.

## What it does not do

`bestcombo` is the computation only.

- It does not read packages or games from a database.
- It does not consume jobs from a message queue, and it does not cache results.
- It has no server and no command-line tool.

The connection settings in `Config` are read and checked, but nothing in the
package connects to anything. You build the `BestCombinationSubset` list
yourself and call `get_best_combinations`.