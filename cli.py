"""Simple CLI for the tip calculator.

Usage examples:
  python cli.py tip --amount 50 --percent 18
  python cli.py tip --amount 33.33 --percent 20 --round-up --locale en_US
"""
import logging
from argparse import ArgumentParser
from tipcalculator.core import DEFAULT_TIP_PERCENT, compute_tip
from tipcalculator.form import parse_number


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="tip-calc")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd")

    p_tip = sub.add_parser("tip", help="Calculate the tip for a bill")
    p_tip.add_argument("--amount", required=True, help="Bill amount (e.g., 50.00)")
    p_tip.add_argument("--percent", default=None, help=f"Tip percent (default {DEFAULT_TIP_PERCENT:g})")
    p_tip.add_argument("--round-up", action="store_true", help="Round the tip up to a whole currency unit")
    p_tip.add_argument("--locale", default=None, help="Locale for currency formatting (e.g., en_US, de_DE)")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.cmd == "tip":
        amount = parse_number(args.amount)
        percent = DEFAULT_TIP_PERCENT if args.percent is None else parse_number(args.percent)
        tip = compute_tip(amount, percent, args.round_up, locale=args.locale)
        print(f"Tip Amount: {tip}")
    else:
        parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
