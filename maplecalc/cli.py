"""Terminal reports for the most-used calculators.

Usage:
    python -m maplecalc.cli payoff 5000 --rate 19.99 --fixed 200
    python -m maplecalc.cli tfsa --contribution 7000 --rate 7 --years 25 --birth-year 1990
    python -m maplecalc.cli ltt 750000 --province ON --toronto --first-time
"""

import argparse
import sys

from maplecalc.config import settings
from maplecalc.engine.credit_card import credit_card_payoff
from maplecalc.engine.errors import CalculationError
from maplecalc.engine.land_transfer import land_transfer_tax
from maplecalc.engine.money import fmt_money, fmt_months, parse_decimal, percent
from maplecalc.engine.tfsa import tfsa_growth
from maplecalc.models.inputs import CreditCardInputs, LandTransferInputs, Province, TFSAInputs
from maplecalc.models.results import CreditCardResult, LandTransferResult, TFSAResult


def _header(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


def print_payoff(result: CreditCardResult) -> None:
    _header(f"Credit Card Payoff: {fmt_money(result.balance, cents=True)}")
    scenarios = [result.minimum, result.fixed]
    if result.extra is not None:
        scenarios.append(result.extra)
    for s in scenarios:
        if s.amortizes:
            detail = f"{fmt_months(s.months):>14}  {fmt_money(s.total_interest):>10} interest"
        else:
            detail = f"{'never':>14}  payment does not outpace interest"
        print(f"  {s.label:<24} {fmt_money(s.first_payment, cents=True):>10}/mo  {detail}")
    if result.interest_saved_fixed is not None:
        print(f"\n  Fixed payment saves {fmt_money(result.interest_saved_fixed)} "
              f"and {fmt_months(result.months_saved_fixed)}")
    print("\n  Payoff targets:")
    for t in result.targets:
        print(f"    {t.periods:>3} months  {fmt_money(t.payment, cents=True):>10}/mo  "
              f"{fmt_money(t.total_interest):>8} interest")
    print()


def print_tfsa(result: TFSAResult) -> None:
    _header("TFSA Growth Projection")
    print(f"  Final balance:      {fmt_money(result.final_balance)}")
    print(f"  Total invested:     {fmt_money(result.total_invested)}")
    print(f"  Tax-free growth:    {fmt_money(result.total_growth)}")
    print(f"  Est. tax saved:     {fmt_money(result.tax_savings)}")
    print(f"  Room remaining:     {fmt_money(result.remaining_room)} of {fmt_money(result.lifetime_room)}")
    if result.exceeds_room:
        print("  Warning: contribution exceeds your remaining room")
    if result.goal_reachable is not None:
        needed = (
            f"{result.required_return:.2%}" if result.required_return is not None else "out of reach"
        )
        print(f"  Return for goal:    {needed}")
    print("\n  Milestones:")
    for year, balance in result.milestones:
        print(f"    Year {year:>2}  {fmt_money(balance):>12}")
    print()


def print_land_transfer(result: LandTransferResult) -> None:
    _header(f"Land Transfer Tax: {result.province_name}")
    if not result.has_tax:
        print(f"  No land transfer tax. {result.notes or ''}")
        print()
        return
    for line in result.brackets:
        if line.applies:
            print(f"  {line.label:<28} {line.rate:>7.2%}  {fmt_money(line.tax, cents=True):>12}")
    print(f"\n  Provincial tax:     {fmt_money(result.provincial_tax, cents=True)}")
    if result.provincial_rebate:
        print(f"  Provincial rebate: -{fmt_money(result.provincial_rebate, cents=True)}")
    if result.municipal_tax:
        print(f"  Toronto MLTT:       {fmt_money(result.municipal_tax, cents=True)}")
        if result.municipal_rebate:
            print(f"  Toronto rebate:    -{fmt_money(result.municipal_rebate, cents=True)}")
    print(f"  Total payable:      {fmt_money(result.total_net, cents=True)}")
    print(f"  Effective rate:     {result.effective_rate:.2%}")
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="maplecalc", description="Canadian personal-finance calculators")
    sub = parser.add_subparsers(dest="command", required=True)

    payoff = sub.add_parser("payoff", help="Credit card payoff timeline")
    payoff.add_argument("balance", help="Card balance")
    payoff.add_argument("--rate", default="19.99", help="Annual interest rate in percent (default: 19.99)")
    payoff.add_argument("--min-percent", default="2", help="Minimum payment percent (default: 2)")
    payoff.add_argument("--min-floor", default="10", help="Minimum payment floor (default: 10)")
    payoff.add_argument("--fixed", default="0", help="Fixed monthly payment (default: first minimum)")
    payoff.add_argument("--extra", default="0", help="Extra monthly payment on top of fixed")

    tfsa = sub.add_parser("tfsa", help="TFSA growth projection")
    tfsa.add_argument("--balance", default="0", help="Current balance")
    tfsa.add_argument("--contribution", default="0", help="Annual contribution")
    tfsa.add_argument("--rate", default="8.5", help="Annual return in percent (default: 8.5)")
    tfsa.add_argument("--years", type=int, default=25, help="Years of growth (default: 25)")
    tfsa.add_argument("--birth-year", type=int, help="Birth year, for contribution room")
    tfsa.add_argument("--contributed", default="0", help="Contributions made to date")
    tfsa.add_argument("--goal", help="Target balance")

    ltt = sub.add_parser("ltt", help="Land transfer tax")
    ltt.add_argument("price", help="Purchase price")
    ltt.add_argument("--province", choices=[p.value for p in Province], default="ON")
    ltt.add_argument("--first-time", action="store_true", help="First-time home buyer")
    ltt.add_argument("--toronto", action="store_true", help="Property is in Toronto")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.command == "payoff":
            print_payoff(credit_card_payoff(
                CreditCardInputs(
                    balance=parse_decimal(args.balance, "balance"),
                    annual_rate=percent(parse_decimal(args.rate, "rate")),
                    minimum_percent=percent(parse_decimal(args.min_percent, "min-percent")),
                    minimum_floor=parse_decimal(args.min_floor, "min-floor"),
                    fixed_payment=parse_decimal(args.fixed, "fixed"),
                    extra_payment=parse_decimal(args.extra, "extra"),
                ),
                period_cap=settings.payoff_period_cap,
            ))
        elif args.command == "tfsa":
            print_tfsa(tfsa_growth(
                TFSAInputs(
                    current_balance=parse_decimal(args.balance, "balance"),
                    annual_contribution=parse_decimal(args.contribution, "contribution"),
                    annual_return=percent(parse_decimal(args.rate, "rate")),
                    years=args.years,
                    birth_year=args.birth_year,
                    contributed_to_date=parse_decimal(args.contributed, "contributed"),
                    goal=parse_decimal(args.goal, "goal") if args.goal else None,
                ),
                current_year=settings.tax_year,
            ))
        elif args.command == "ltt":
            print_land_transfer(land_transfer_tax(LandTransferInputs(
                province=Province(args.province),
                purchase_price=parse_decimal(args.price, "price"),
                first_time_buyer=args.first_time,
                toronto=args.toronto,
            )))
    except CalculationError as e:
        print(f"error: {e.detail}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
