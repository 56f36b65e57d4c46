"""Money formatting for terminal and report output."""

from __future__ import annotations

from src.rules.models import CurrencyRules


def _group_western(digits: str) -> str:
    return f"{int(digits):,}"


def _group_indian(digits: str) -> str:
    # Last three digits, then pairs: 12,34,567
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs) + "," + tail


def format_amount(amount: float, grouping: str = "western", decimals: int = 0) -> str:
    """Group digits of ``amount`` without a currency symbol."""
    rendered = f"{abs(amount):.{decimals}f}"
    whole, _, fraction = rendered.partition(".")
    grouped = _group_indian(whole) if grouping == "indian" else _group_western(whole)
    sign = "-" if amount < 0 and float(rendered) != 0 else ""
    return f"{sign}{grouped}.{fraction}" if fraction else f"{sign}{grouped}"


def format_currency(amount: float | None, currency: CurrencyRules | None = None) -> str:
    """
    Render money with the configured symbol and grouping.

    ``None`` renders as a dash, for figures that do not exist (e.g. profit
    of unsold stock).
    """
    if amount is None:
        return "-"
    rules = currency or CurrencyRules()
    text = format_amount(amount, rules.grouping, rules.decimals)
    if text.startswith("-"):
        return f"-{rules.symbol}{text[1:]}"
    return f"{rules.symbol}{text}"
