"""Bracketed cumulative-rate lookup (land transfer tax, tax-like tables).

Each bracket taxes the slice of the amount in (previous bound, upper bound]
at its own rate. The last bracket is unbounded.

Pure functions. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal

from maplecalc.engine.errors import DomainError
from maplecalc.engine.money import INFINITY, ZERO


@dataclass(frozen=True)
class Bracket:
    upper_bound: Decimal  # Decimal("Infinity") for the top bracket
    rate: Decimal


@dataclass(frozen=True)
class Rebate:
    amount: Decimal  # Maximum rebate
    max_price: Decimal  # Eligibility ceiling (inclusive)
    label: str = ""


@dataclass(frozen=True)
class BracketLine:
    label: str
    lower_bound: Decimal
    upper_bound: Decimal
    rate: Decimal
    taxable: Decimal
    tax: Decimal

    @property
    def applies(self) -> bool:
        return self.taxable > 0


@dataclass(frozen=True)
class BracketResult:
    amount: Decimal
    total: Decimal
    lines: tuple[BracketLine, ...]

    @property
    def effective_rate(self) -> Decimal:
        if self.amount == 0:
            return ZERO
        return self.total / self.amount


def _dollars(value: Decimal) -> str:
    return f"${value:,.0f}"


def bracket_label(lower: Decimal, upper: Decimal) -> str:
    if lower == 0:
        return f"First {_dollars(upper)}" if upper.is_finite() else "All amounts"
    if not upper.is_finite():
        return f"Over {_dollars(lower)}"
    return f"{_dollars(lower + 1)} - {_dollars(upper)}"


def validate_brackets(brackets: list[Bracket] | tuple[Bracket, ...]) -> None:
    """Brackets must ascend strictly and end with an unbounded bracket."""
    if not brackets:
        raise DomainError("Bracket table is empty")
    previous = ZERO
    for bracket in brackets:
        if bracket.upper_bound <= previous:
            raise DomainError("Brackets must be sorted by ascending upper bound")
        if bracket.rate < 0:
            raise DomainError("Bracket rates cannot be negative")
        previous = bracket.upper_bound
    if brackets[-1].upper_bound != INFINITY:
        raise DomainError("The last bracket must be unbounded")


def bracketed_amount(amount: Decimal, brackets: list[Bracket] | tuple[Bracket, ...]) -> BracketResult:
    """Cumulative piecewise amount with a per-bracket breakdown.

    Brackets above the amount are still listed (taxable 0) for display.
    """
    if amount < 0:
        raise DomainError("Amount cannot be negative")
    validate_brackets(brackets)

    lines: list[BracketLine] = []
    total = ZERO
    lower = ZERO

    for bracket in brackets:
        taxable = max(ZERO, min(amount, bracket.upper_bound) - lower)
        tax = taxable * bracket.rate
        total += tax
        lines.append(BracketLine(
            label=bracket_label(lower, bracket.upper_bound),
            lower_bound=lower,
            upper_bound=bracket.upper_bound,
            rate=bracket.rate,
            taxable=taxable,
            tax=tax,
        ))
        lower = bracket.upper_bound

    return BracketResult(amount=amount, total=total, lines=tuple(lines))


def apply_rebate(tax: Decimal, amount: Decimal, rebate: Rebate | None) -> Decimal:
    """Rebate owed: min(tax, rebate) at or below the price ceiling, else nothing.

    No phase-out above the ceiling.
    """
    if rebate is None or amount > rebate.max_price:
        return ZERO
    return min(tax, rebate.amount)


def marginal_rate(amount: Decimal, brackets: list[Bracket] | tuple[Bracket, ...]) -> Decimal:
    """Rate applied to the next dollar above ``amount``."""
    validate_brackets(brackets)
    for bracket in brackets:
        if amount < bracket.upper_bound:
            return bracket.rate
    return brackets[-1].rate
