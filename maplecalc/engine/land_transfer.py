"""Provincial and Toronto municipal land transfer tax.

Pure functions. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal

from maplecalc.engine.brackets import Bracket, Rebate, apply_rebate, bracketed_amount, marginal_rate
from maplecalc.engine.errors import MissingInputError
from maplecalc.engine.money import INFINITY, ZERO
from maplecalc.models.inputs import LandTransferInputs, Province
from maplecalc.models.results import LandTransferResult


@dataclass(frozen=True)
class LandTransferTable:
    name: str
    brackets: tuple[Bracket, ...] = ()
    rebate: Rebate | None = None
    notes: str | None = None

    @property
    def has_tax(self) -> bool:
        return bool(self.brackets)


def _brackets(*pairs: tuple[str, str]) -> tuple[Bracket, ...]:
    return tuple(
        Bracket(upper_bound=INFINITY if upper == "inf" else Decimal(upper), rate=Decimal(rate))
        for upper, rate in pairs
    )


ONTARIO_BRACKETS = _brackets(
    ("55000", "0.005"),
    ("250000", "0.010"),
    ("400000", "0.015"),
    ("2000000", "0.020"),
    ("inf", "0.025"),
)

PROVINCIAL_TABLES: dict[Province, LandTransferTable] = {
    Province.ON: LandTransferTable(
        name="Ontario",
        brackets=ONTARIO_BRACKETS,
        rebate=Rebate(Decimal("4000"), Decimal("368000"), "First-Time Home Buyer Rebate (max $4,000)"),
        notes="Toronto buyers pay an additional Municipal Land Transfer Tax (MLTT) on top of the provincial tax.",
    ),
    Province.BC: LandTransferTable(
        name="British Columbia",
        brackets=_brackets(
            ("200000", "0.010"),
            ("2000000", "0.020"),
            ("3000000", "0.030"),
            ("inf", "0.050"),
        ),
        rebate=Rebate(Decimal("8000"), Decimal("500000"), "First-Time Home Buyer Exemption (max $8,000)"),
        notes="Foreign buyers pay an additional 20% Foreign Buyer Tax in certain regions.",
    ),
    Province.QC: LandTransferTable(
        name="Quebec",
        brackets=_brackets(
            ("53200", "0.005"),
            ("266200", "0.010"),
            ("528300", "0.015"),
            ("1056500", "0.020"),
            ("inf", "0.025"),
        ),
        notes="Welcome tax rates vary by municipality. Montreal rates shown.",
    ),
    Province.MB: LandTransferTable(
        name="Manitoba",
        brackets=_brackets(
            ("30000", "0.000"),
            ("90000", "0.005"),
            ("150000", "0.010"),
            ("200000", "0.015"),
            ("inf", "0.020"),
        ),
        rebate=Rebate(Decimal("4500"), Decimal("150000"), "First-Time Home Buyer Rebate (max $4,500)"),
    ),
    Province.PE: LandTransferTable(
        name="Prince Edward Island",
        brackets=_brackets(("30000", "0.000"), ("inf", "0.010")),
        rebate=Rebate(Decimal("2000"), Decimal("200000"), "First-Time Home Buyer Rebate (max $2,000)"),
        notes="PEI charges 1% on amounts over $30,000.",
    ),
    Province.NS: LandTransferTable(
        name="Nova Scotia",
        notes=(
            "No provincial land transfer tax. Municipal deed transfer taxes apply "
            "and vary by municipality (typically 1-1.5% of purchase price)."
        ),
    ),
    Province.NB: LandTransferTable(
        name="New Brunswick",
        brackets=_brackets(("inf", "0.010")),
        notes="Flat 1% on the greater of purchase price or assessed value.",
    ),
    Province.AB: LandTransferTable(
        name="Alberta",
        notes="No land transfer tax. A small land title transfer fee applies (approximately $400-$600).",
    ),
    Province.SK: LandTransferTable(
        name="Saskatchewan",
        notes="No land transfer tax. A title transfer fee applies (approximately $500-$800).",
    ),
    Province.NL: LandTransferTable(
        name="Newfoundland & Labrador",
        notes="No provincial land transfer tax. A registration fee applies.",
    ),
    Province.NT: LandTransferTable(
        name="Northwest Territories",
        brackets=_brackets(("1000000", "0.015"), ("inf", "0.020")),
    ),
    Province.NU: LandTransferTable(name="Nunavut", notes="Nunavut does not have a land transfer tax."),
    Province.YT: LandTransferTable(
        name="Yukon", notes="Yukon does not have a provincial land transfer tax."
    ),
}

# Toronto MLTT mirrors the Ontario schedule
TORONTO_TABLE = LandTransferTable(
    name="Toronto",
    brackets=ONTARIO_BRACKETS,
    rebate=Rebate(Decimal("4475"), Decimal("400000"), "Toronto First-Time Buyer Rebate (max $4,475)"),
)


def _tax_and_rebate(
    table: LandTransferTable, price: Decimal, first_time_buyer: bool
) -> tuple[Decimal, Decimal]:
    if not table.has_tax:
        return ZERO, ZERO
    tax = bracketed_amount(price, table.brackets).total
    rebate = apply_rebate(tax, price, table.rebate) if first_time_buyer else ZERO
    return tax, rebate


def land_transfer_tax(inputs: LandTransferInputs) -> LandTransferResult:
    """Provincial tax plus, for Toronto purchases, the municipal tax, net of rebates."""
    price = inputs.purchase_price
    if price <= 0:
        raise MissingInputError("Enter the purchase price")

    table = PROVINCIAL_TABLES[inputs.province]
    prov_tax, prov_rebate = _tax_and_rebate(table, price, inputs.first_time_buyer)

    in_toronto = inputs.toronto and inputs.province is Province.ON
    if in_toronto:
        muni_tax, muni_rebate = _tax_and_rebate(TORONTO_TABLE, price, inputs.first_time_buyer)
    else:
        muni_tax, muni_rebate = ZERO, ZERO

    prov_net = max(ZERO, prov_tax - prov_rebate)
    muni_net = max(ZERO, muni_tax - muni_rebate)
    total_net = prov_net + muni_net

    breakdown = bracketed_amount(price, table.brackets).lines if table.has_tax else ()

    return LandTransferResult(
        province=inputs.province.value,
        province_name=table.name,
        has_tax=table.has_tax,
        purchase_price=price,
        provincial_tax=prov_tax,
        provincial_rebate=prov_rebate,
        provincial_net=prov_net,
        municipal_tax=muni_tax,
        municipal_rebate=muni_rebate,
        municipal_net=muni_net,
        total_tax=prov_tax + muni_tax,
        total_rebate=prov_rebate + muni_rebate,
        total_net=total_net,
        effective_rate=total_net / price,
        marginal_rate=marginal_rate(price, table.brackets) if table.has_tax else ZERO,
        brackets=breakdown,
        rebate_label=table.rebate.label if table.rebate else None,
        notes=table.notes,
    )
