from decimal import Decimal

import pytest

from maplecalc.engine.errors import DomainError
from maplecalc.engine.net_worth import net_worth
from maplecalc.models.inputs import AgeGroup, NetWorthInputs


@pytest.fixture
def homeowner() -> NetWorthInputs:
    return NetWorthInputs(
        assets={
            "chequing": Decimal("5000"),
            "tfsa": Decimal("20000"),
            "primary": Decimal("500000"),
            "art": Decimal("1000"),
        },
        liabilities={
            "mort_primary": Decimal("300000"),
            "cc1": Decimal("2000"),
        },
        age_group=AgeGroup.AGE_35_44,
    )


class TestNetWorth:
    def test_totals(self, homeowner):
        result = net_worth(homeowner)
        assert result.total_assets == Decimal("526000")
        assert result.total_liabilities == Decimal("302000")
        assert result.net_worth == Decimal("224000")
        assert result.debt_ratio == Decimal("302000") / Decimal("526000")

    def test_benchmark(self, homeowner):
        result = net_worth(homeowner)
        assert result.benchmark_label == "35-44"
        assert result.versus_median == Decimal("-10000")

    def test_asset_breakdown(self, homeowner):
        totals = {c.key: c.total for c in net_worth(homeowner).asset_breakdown}
        assert totals == {
            "cash": Decimal("25000"),
            "investments": Decimal("0"),
            "property": Decimal("500000"),
            "personal": Decimal("1000"),  # Unknown keys land in the last category
        }

    def test_liability_breakdown(self, homeowner):
        totals = {c.key: c.total for c in net_worth(homeowner).liability_breakdown}
        assert totals["mortgage_liab"] == Decimal("300000")
        assert totals["credit_liab"] == Decimal("2000")

    def test_empty(self):
        result = net_worth(NetWorthInputs())
        assert result.net_worth == Decimal("0")
        assert result.debt_ratio == Decimal("0")

    def test_negative_worth(self):
        result = net_worth(NetWorthInputs(
            assets={"chequing": Decimal("1000")},
            liabilities={"student": Decimal("30000")},
            age_group=AgeGroup.UNDER_35,
        ))
        assert result.net_worth == Decimal("-29000")
        assert result.versus_median == Decimal("-77000")

    def test_negative_amount(self):
        with pytest.raises(DomainError):
            net_worth(NetWorthInputs(assets={"chequing": Decimal("-5")}))
