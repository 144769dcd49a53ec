"""Holdings aggregation: current snapshot -> category totals and grand total."""

from collections.abc import Iterable

from loguru import logger

from finpro.financial.models import CategoryTotal, HoldingRecord, HoldingsSummary, coerce_money


def aggregate_holdings(records: Iterable[HoldingRecord]) -> HoldingsSummary:
    """Sum balances per category, preserving first-seen category order.

    Args:
        records: Latest known balance per account.

    Returns:
        HoldingsSummary whose category totals sum exactly to ``total_assets``.
    """
    by_category: dict[str, int] = {}
    for record in records:
        balance = coerce_money(record.balance)
        by_category[record.category] = by_category.get(record.category, 0) + balance

    totals = tuple(CategoryTotal(category, balance) for category, balance in by_category.items())
    total_assets = sum(t.balance for t in totals)
    logger.debug(f"Aggregated {len(totals)} categories, total {total_assets:,}")
    return HoldingsSummary(totals=totals, total_assets=total_assets)


def guarded_total(total_assets: int) -> int:
    """Denominator for weight calculations; never zero."""
    return max(total_assets, 1)
