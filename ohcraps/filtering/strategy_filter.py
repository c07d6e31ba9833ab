"""
Search and bucket filters for the strategy browser.

Filters are ANDed together. A strategy's parsed ranges are compared
against each bucket:

- Table minimum $5 / $10: the range contains the amount
- Table minimum $15+: the range reaches 15 or more
- Buy-in buckets: the range overlaps the bucket's fixed range

Strategies whose amounts could not be parsed carry the range (0, 0) and
drop out of every bucket except the lowest buy-in bucket.
"""

from collections.abc import Iterable

from ohcraps.models.filters import BuyInFilter, TableMinFilter
from ohcraps.models.strategy import Strategy


def matches_search(strategy: Strategy, search: str) -> bool:
    """Case-insensitive substring match on the name. Blank search matches all."""
    query = search.strip().casefold()
    if not query:
        return True
    return query in strategy.name.casefold()


def matches_table_min(strategy: Strategy, bucket: TableMinFilter) -> bool:
    if bucket is TableMinFilter.FIVE:
        return strategy.table_min_min <= 5 <= strategy.table_min_max
    if bucket is TableMinFilter.TEN:
        return strategy.table_min_min <= 10 <= strategy.table_min_max
    return strategy.table_min_max >= 15


def matches_buy_in(strategy: Strategy, bucket: BuyInFilter) -> bool:
    low, high = bucket.bounds
    return strategy.buy_in_min <= high and strategy.buy_in_max >= low


def filter_strategies(
    strategies: Iterable[Strategy],
    search: str = "",
    table_min: TableMinFilter | None = None,
    buy_in: BuyInFilter | None = None,
) -> list[Strategy]:
    """
    Apply search text and optional bucket filters.

    Args:
        strategies: Strategies to filter
        search: Name substring (case-insensitive); blank disables
        table_min: Table-minimum bucket, or None to disable
        buy_in: Buy-in bucket, or None to disable

    Returns:
        Matching strategies in their input order.
    """
    result: list[Strategy] = []

    for strategy in strategies:
        if not matches_search(strategy, search):
            continue
        if table_min is not None and not matches_table_min(strategy, table_min):
            continue
        if buy_in is not None and not matches_buy_in(strategy, buy_in):
            continue
        result.append(strategy)

    return result
