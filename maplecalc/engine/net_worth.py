"""Net worth statement with a Statistics Canada median benchmark.

Pure functions. No I/O.
"""

from decimal import Decimal
from typing import Mapping

from maplecalc.engine.errors import DomainError
from maplecalc.engine.money import ZERO
from maplecalc.models.inputs import AgeGroup, NetWorthInputs
from maplecalc.models.results import CategoryTotal, NetWorthResult

# category key -> (label, item keys)
ASSET_CATEGORIES: dict[str, tuple[str, tuple[str, ...]]] = {
    "cash": ("Cash & Savings", ("chequing", "savings", "tfsa", "cash_other")),
    "investments": (
        "Investments",
        ("rrsp", "fhsa", "resp", "pension", "nonreg", "gic", "crypto", "other_inv"),
    ),
    "property": ("Real Estate", ("primary", "rental", "cottage", "land")),
    "personal": ("Personal Assets", ("vehicle", "business", "lifeins", "valuables", "other_pers")),
}

LIABILITY_CATEGORIES: dict[str, tuple[str, tuple[str, ...]]] = {
    "mortgage_liab": ("Mortgages", ("mort_primary", "mort_rental", "mort_other")),
    "vehicle_liab": ("Vehicle Loans", ("car_loan", "lease")),
    "credit_liab": ("Credit & Lines", ("cc1", "loc", "bnpl")),
    "other_liab": ("Other Debts", ("student", "personal_loan", "taxes", "other_debt")),
}

# Median net worth by age of family head (approximate)
BENCHMARKS: dict[AgeGroup, tuple[str, Decimal]] = {
    AgeGroup.UNDER_35: ("Under 35", Decimal("48000")),
    AgeGroup.AGE_35_44: ("35-44", Decimal("234000")),
    AgeGroup.AGE_45_54: ("45-54", Decimal("521000")),
    AgeGroup.AGE_55_64: ("55-64", Decimal("690000")),
    AgeGroup.AGE_65_PLUS: ("65+", Decimal("543000")),
}


def _breakdown(
    values: Mapping[str, Decimal], categories: dict[str, tuple[str, tuple[str, ...]]]
) -> tuple[CategoryTotal, ...]:
    """Subtotals per category. Unknown item keys land in the last category."""
    known = {item for _, items in categories.values() for item in items}
    unknown = sum((v for k, v in values.items() if k not in known), ZERO)
    last = list(categories)[-1]

    totals = []
    for key, (label, items) in categories.items():
        total = sum((values.get(item, ZERO) for item in items), ZERO)
        if key == last:
            total += unknown
        totals.append(CategoryTotal(key=key, label=label, total=total))
    return tuple(totals)


def net_worth(inputs: NetWorthInputs) -> NetWorthResult:
    if any(v < 0 for v in inputs.assets.values()) or any(v < 0 for v in inputs.liabilities.values()):
        raise DomainError("Amounts cannot be negative")

    total_assets = sum(inputs.assets.values(), ZERO)
    total_liabilities = sum(inputs.liabilities.values(), ZERO)
    worth = total_assets - total_liabilities
    debt_ratio = total_liabilities / total_assets if total_assets > 0 else ZERO
    label, median = BENCHMARKS[inputs.age_group]

    return NetWorthResult(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=worth,
        debt_ratio=debt_ratio,
        benchmark_label=label,
        benchmark_median=median,
        versus_median=worth - median,
        asset_breakdown=_breakdown(inputs.assets, ASSET_CATEGORIES),
        liability_breakdown=_breakdown(inputs.liabilities, LIABILITY_CATEGORIES),
    )
