from decimal import Decimal

import pytest

from maplecalc.engine.errors import MissingInputError
from maplecalc.engine.land_transfer import PROVINCIAL_TABLES, land_transfer_tax
from maplecalc.engine.money import to_cents
from maplecalc.models.inputs import LandTransferInputs, Province


def _ltt(province: Province, price: str, **kwargs):
    return land_transfer_tax(LandTransferInputs(province=province, purchase_price=Decimal(price), **kwargs))


class TestOntario:
    def test_300k(self, ontario_purchase):
        result = land_transfer_tax(ontario_purchase)
        assert result.provincial_tax == Decimal("2975")
        assert result.total_net == Decimal("2975")
        assert result.municipal_tax == Decimal("0")
        assert result.marginal_rate == Decimal("0.015")
        assert to_cents(result.effective_rate * 100) == Decimal("0.99")

    def test_first_time_rebate_clears_tax_at_ceiling(self):
        result = _ltt(Province.ON, "368000", first_time_buyer=True)
        assert result.provincial_tax == Decimal("3995")
        assert result.provincial_rebate == Decimal("3995")
        assert result.total_net == Decimal("0")

    def test_no_rebate_one_dollar_over_ceiling(self):
        result = _ltt(Province.ON, "368001", first_time_buyer=True)
        assert result.provincial_rebate == Decimal("0")
        assert result.total_net == result.provincial_tax

    def test_rebate_capped_at_4000(self):
        result = _ltt(Province.ON, "300000", first_time_buyer=True)
        assert result.provincial_rebate == Decimal("2975")
        assert result.rebate_label.startswith("First-Time Home Buyer Rebate")

    def test_breakdown_lines(self, ontario_purchase):
        result = land_transfer_tax(ontario_purchase)
        applied = [line for line in result.brackets if line.applies]
        assert [line.label for line in applied] == [
            "First $55,000", "$55,001 - $250,000", "$250,001 - $400,000",
        ]
        assert sum(line.tax for line in result.brackets) == result.provincial_tax


class TestToronto:
    def test_municipal_mirrors_provincial(self):
        result = _ltt(Province.ON, "500000", toronto=True)
        assert result.provincial_tax == Decimal("6475")
        assert result.municipal_tax == Decimal("6475")
        assert result.total_net == Decimal("12950")

    def test_first_time_buyer_pays_nothing_at_300k(self):
        result = _ltt(Province.ON, "300000", toronto=True, first_time_buyer=True)
        assert result.municipal_rebate == Decimal("2975")
        assert result.total_rebate == Decimal("5950")
        assert result.total_net == Decimal("0")

    def test_municipal_rebate_capped(self):
        result = _ltt(Province.ON, "400000", toronto=True, first_time_buyer=True)
        assert result.municipal_tax == Decimal("4475")
        assert result.municipal_rebate == Decimal("4475")
        assert result.provincial_rebate == Decimal("0")

    def test_toronto_flag_ignored_outside_ontario(self):
        result = _ltt(Province.BC, "600000", toronto=True)
        assert result.municipal_tax == Decimal("0")


class TestOtherProvinces:
    def test_bc(self):
        result = _ltt(Province.BC, "600000", first_time_buyer=True)
        assert result.provincial_tax == Decimal("10000")
        assert result.provincial_rebate == Decimal("0")
        assert result.marginal_rate == Decimal("0.020")

    def test_manitoba_first_time(self):
        result = _ltt(Province.MB, "150000", first_time_buyer=True)
        assert result.provincial_tax == Decimal("900")
        assert result.provincial_rebate == Decimal("900")
        assert result.total_net == Decimal("0")

    def test_new_brunswick_flat(self):
        assert _ltt(Province.NB, "250000").total_net == Decimal("2500")

    def test_pei_exempt_first_30k(self):
        assert _ltt(Province.PE, "230000").provincial_tax == Decimal("2000")

    @pytest.mark.parametrize("province", [Province.AB, Province.SK, Province.NS, Province.NU])
    def test_no_tax_provinces(self, province):
        result = _ltt(province, "500000", first_time_buyer=True)
        assert not result.has_tax
        assert result.total_net == Decimal("0")
        assert result.marginal_rate == Decimal("0")
        assert result.brackets == ()
        assert result.notes

    def test_every_province_has_a_table(self):
        assert set(PROVINCIAL_TABLES) == set(Province)


class TestInvalidInputs:
    def test_zero_price(self):
        with pytest.raises(MissingInputError):
            _ltt(Province.ON, "0")

    def test_idempotent(self, ontario_purchase):
        assert land_transfer_tax(ontario_purchase) == land_transfer_tax(ontario_purchase)
