"""
TimeBucketer - Calendar-month bucketing of purchase and sale events.

Functional Core - pure business logic. "Today" is an argument; it defaults
to the system date only when the caller does not supply one.

Key behaviors:
- Monthly series is anchored to the earliest purchase/sale date and always
  runs through the current month, so quiet recent months show as zero
- Fixed-window series always has exactly ``window_months`` buckets
- Buckets are keyed by (year, month); equal month names in different years
  never collide
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from datetime import date

from src.components.dates import MonthKey, add_months, iter_months, parse_local_date
from src.domain.entities import Vehicle

from .models import MonthlyActivity, MonthlySales

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_MONTHS = 12


def _sale_date(vehicle: Vehicle) -> date | None:
    sale = vehicle.sale_facts
    return parse_local_date(sale.sale_date) if sale is not None else None


def build_monthly_series(
    vehicles: Iterable[Vehicle],
    today: date | None = None,
) -> tuple[MonthlyActivity, ...]:
    """
    Monthly purchase/sale counts from the earliest activity to this month.

    Returns an empty tuple when no vehicle has a usable date. Activity dated
    after the current month has no bucket and is not counted.
    """
    reference = today or date.today()

    purchases: Counter[MonthKey] = Counter()
    sales: Counter[MonthKey] = Counter()
    for vehicle in vehicles:
        purchased = parse_local_date(vehicle.purchase_date)
        if purchased is not None:
            purchases[MonthKey.of(purchased)] += 1
        sold = _sale_date(vehicle)
        if sold is not None:
            sales[MonthKey.of(sold)] += 1

    seen = set(purchases) | set(sales)
    if not seen:
        return ()

    first = min(min(seen).first_day, reference)
    series = tuple(
        MonthlyActivity(month=key, purchases=purchases[key], sales=sales[key])
        for key in iter_months(first, reference)
    )

    current = MonthKey.of(reference)
    skipped = sum(n for key, n in (purchases + sales).items() if key > current)
    if skipped:
        logger.debug("Skipped %d future-dated events beyond %s", skipped, current)

    return series


def build_fixed_window_series(
    vehicles: Iterable[Vehicle],
    today: date | None = None,
    window_months: int = DEFAULT_WINDOW_MONTHS,
) -> tuple[MonthlySales, ...]:
    """Sales per month for the ``window_months`` months ending this month."""
    if window_months < 1:
        msg = f"window_months must be at least 1, got {window_months}"
        raise ValueError(msg)

    reference = today or date.today()
    first = add_months(reference, -(window_months - 1))
    keys = list(iter_months(first, reference))
    window = set(keys)

    sales: Counter[MonthKey] = Counter()
    for vehicle in vehicles:
        sold = _sale_date(vehicle)
        if sold is None:
            continue
        key = MonthKey.of(sold)
        if key in window:
            sales[key] += 1

    return tuple(MonthlySales(month=key, sales=sales[key]) for key in keys)


def peak_sales_month(series: Sequence[MonthlySales]) -> MonthKey | None:
    """Earliest month holding the highest sale count, if that count is positive."""
    best: MonthlySales | None = None
    for bucket in series:
        if best is None or bucket.sales > best.sales:
            best = bucket
    if best is None or best.sales == 0:
        return None
    return best.month
