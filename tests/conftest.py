"""Canonical test fixtures used across the engine and API tests.

Card: $5,000 at 19.99%, 2% / $10 minimum.
Home: $600K purchase, 10% down, 5% over 25 years.
"""

import pytest
from decimal import Decimal

from maplecalc.models.inputs import (
    CreditCardInputs,
    EmergencyFundInputs,
    FHSAInputs,
    LandTransferInputs,
    MortgageInputs,
    Province,
    TFSAInputs,
)


@pytest.fixture
def card_inputs() -> CreditCardInputs:
    """$5,000 balance with typical issuer minimums."""
    return CreditCardInputs(
        balance=Decimal("5000"),
        annual_rate=Decimal("0.1999"),
        minimum_percent=Decimal("0.02"),
        minimum_floor=Decimal("10"),
    )


@pytest.fixture
def mortgage_inputs() -> MortgageInputs:
    """$600K home, $60K down (insured at 3.10%)."""
    return MortgageInputs(
        home_price=Decimal("600000"),
        down_payment=Decimal("60000"),
        annual_rate=Decimal("0.05"),
        amortization_years=25,
        term_years=5,
        property_tax=Decimal("4800"),
        condo_fee=Decimal("0"),
        home_insurance=Decimal("100"),
    )


@pytest.fixture
def ontario_purchase() -> LandTransferInputs:
    return LandTransferInputs(province=Province.ON, purchase_price=Decimal("300000"))


@pytest.fixture
def tfsa_inputs() -> TFSAInputs:
    """$7,000 a year at 7% for 25 years, born 1990."""
    return TFSAInputs(
        current_balance=Decimal("0"),
        annual_contribution=Decimal("7000"),
        annual_return=Decimal("0.07"),
        years=25,
        birth_year=1990,
    )


@pytest.fixture
def fhsa_inputs() -> FHSAInputs:
    return FHSAInputs(
        income=Decimal("90000"),
        annual_contribution=Decimal("8000"),
        annual_return=Decimal("0.05"),
        province=Province.ON,
    )


@pytest.fixture
def emergency_inputs() -> EmergencyFundInputs:
    """$3,000/month of essentials, stable job, no dependents."""
    return EmergencyFundInputs(
        expenses={
            "rent": Decimal("1800"),
            "groceries": Decimal("600"),
            "utilities": Decimal("200"),
            "transport": Decimal("400"),
        },
        current_savings=Decimal("5000"),
        monthly_savings=Decimal("500"),
    )
