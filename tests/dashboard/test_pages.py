"""Page callbacks called directly, after the app has registered its pages."""

from maplecalc.config import settings
from maplecalc.dashboard.app import app  # noqa: F401
from maplecalc.dashboard.pages import credit_card, land_transfer
from maplecalc.engine.errors import DomainError, NumericError


def _text(node) -> str:
    if node is None:
        return ""
    if isinstance(node, str):
        return node
    if isinstance(node, (list, tuple)):
        return " ".join(_text(n) for n in node)
    return _text(getattr(node, "children", None))


class TestCreditCardPage:
    def test_renders_payoff(self):
        out = _text(credit_card.render_payoff(5000, 19.99, 2, 10, 200, 0))
        assert "Time on minimums" in out
        assert "Time at fixed payment" in out

    def test_honours_configured_period_cap(self, monkeypatch):
        monkeypatch.setattr(settings, "payoff_period_cap", 24)
        out = _text(credit_card.render_payoff(5000, 19.99, 2, 10, 0, 0))
        assert "Never" in out
        assert "Time at fixed payment" not in out

    def test_empty_balance(self):
        out = _text(credit_card.render_payoff(None, 19.99, 2, 10, 0, 0))
        assert out == "Enter your card balance to see your payoff timeline."

    def test_any_calculation_error_is_shown(self, monkeypatch):
        def fail(*args, **kwargs):
            raise NumericError()

        monkeypatch.setattr(credit_card, "credit_card_payoff", fail)
        assert _text(credit_card.render_payoff(5000, 19.99, 2, 10, 0, 0)) == "Calculation error"


class TestLandTransferPage:
    def test_non_positive_price_is_empty_state(self):
        out = _text(land_transfer.render_land_transfer("ON", -1, []))
        assert out == "Enter a purchase price to estimate your land transfer tax."

    def test_calculation_error_is_shown(self, monkeypatch):
        def fail(*args, **kwargs):
            raise DomainError("Price out of range")

        monkeypatch.setattr(land_transfer, "land_transfer_tax", fail)
        assert _text(land_transfer.render_land_transfer("ON", 500000, [])) == "Price out of range"
