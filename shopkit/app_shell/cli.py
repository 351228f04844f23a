import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

from shopkit.adapters import (
    DevEmailAdapter,
    FlatRateShippingAdapter,
    PaymentStubAdapter,
    StaticExchangeRateAdapter,
    SystemClock,
)
from shopkit.components import accounts, availability, checkout, eligibility, pricing, validation
from shopkit.core.ports.clock import ClockPort
from shopkit.rules import Rules, resolve_rules

logger = logging.getLogger("shopkit.cli")


@dataclass
class ShellContext:
    """Rules plus the adapters the shell wires into components."""

    rules: Rules
    clock: ClockPort = field(default_factory=SystemClock)
    rates: StaticExchangeRateAdapter = field(default_factory=StaticExchangeRateAdapter)
    shipping: FlatRateShippingAdapter = field(default_factory=FlatRateShippingAdapter)
    payment: PaymentStubAdapter = field(default_factory=PaymentStubAdapter)
    mailer: DevEmailAdapter = field(default_factory=DevEmailAdapter)


def get_context(rules_path: str | None) -> ShellContext:
    try:
        rules = resolve_rules(Path(rules_path) if rules_path else None)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)
    return ShellContext(rules=rules)


def handle_coupons(ctx: ShellContext, args: argparse.Namespace) -> None:
    config = pricing.load_config_from_rules(ctx.rules)
    for coupon in pricing.get_coupons(config):
        print(f"{coupon.code}\t{coupon.discount:.0%}")


def handle_discount(ctx: ShellContext, args: argparse.Namespace) -> None:
    config = pricing.load_config_from_rules(ctx.rules)
    print(pricing.calculate_discount(args.price, args.code, config))


def handle_can_drive(ctx: ShellContext, args: argparse.Namespace) -> None:
    config = eligibility.load_config_from_rules(ctx.rules)
    print(eligibility.can_drive(args.age, args.country, config))


def handle_validate_user(ctx: ShellContext, args: argparse.Namespace) -> None:
    config = validation.load_config_from_rules(ctx.rules)
    print(validation.validate_user_input(args.username, args.age, config))
    print(f"Username format ok: {validation.is_valid_username(args.username, config)}")


def handle_status(ctx: ShellContext, args: argparse.Namespace) -> None:
    hours = availability.load_config_from_rules(ctx.rules)
    prices = pricing.load_config_from_rules(ctx.rules)
    online = availability.is_online(ctx.clock, hours)
    print(f"Online: {online} (hours {hours.opening_hour:02d}:00-{hours.closing_hour:02d}:00)")
    print(f"Holiday discount: {pricing.get_discount(ctx.clock, prices):.0%}")


def handle_shipping(ctx: ShellContext, args: argparse.Namespace) -> None:
    print(checkout.get_shipping_info(args.destination, ctx.shipping))


def handle_convert(ctx: ShellContext, args: argparse.Namespace) -> None:
    config = checkout.load_config_from_rules(ctx.rules)
    try:
        converted = checkout.get_price_in_currency(args.price, args.currency, ctx.rates, config)
    except checkout.CurrencyNotSupportedError as e:
        logger.error(str(e))
        sys.exit(1)
    print(f"{converted:.2f} {args.currency}")


def handle_order(ctx: ShellContext, args: argparse.Namespace) -> None:
    order = checkout.Order(total_amount=args.amount)
    card = checkout.CreditCard(credit_card_number=args.card)
    result = asyncio.run(checkout.submit_order(order, card, ctx.payment))
    print(result.as_dict())


def handle_signup(ctx: ShellContext, args: argparse.Namespace) -> None:
    signed_up = asyncio.run(accounts.sign_up(args.email, ctx.mailer))
    print("Signed up." if signed_up else "Invalid email address.")


HANDLERS = {
    "coupons": handle_coupons,
    "discount": handle_discount,
    "can-drive": handle_can_drive,
    "validate-user": handle_validate_user,
    "status": handle_status,
    "shipping": handle_shipping,
    "convert": handle_convert,
    "order": handle_order,
    "signup": handle_signup,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="shopkit storefront rules CLI")
    parser.add_argument("--rules", help="Path to rules.yaml")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("coupons", help="List coupon codes")

    discount_parser = subparsers.add_parser("discount", help="Apply a discount code")
    discount_parser.add_argument("price", type=float)
    discount_parser.add_argument("code")

    drive_parser = subparsers.add_parser("can-drive", help="Check driving eligibility")
    drive_parser.add_argument("age", type=int)
    drive_parser.add_argument("country", help="Country code, e.g. US or UK")

    user_parser = subparsers.add_parser("validate-user", help="Validate username and age")
    user_parser.add_argument("username")
    user_parser.add_argument("age", type=int)

    subparsers.add_parser("status", help="Store hours and today's holiday discount")

    shipping_parser = subparsers.add_parser("shipping", help="Shipping quote")
    shipping_parser.add_argument("destination")

    convert_parser = subparsers.add_parser("convert", help="Convert a price")
    convert_parser.add_argument("price", type=float)
    convert_parser.add_argument("currency")

    order_parser = subparsers.add_parser("order", help="Submit an order (stub payment)")
    order_parser.add_argument("amount", type=float)
    order_parser.add_argument("--card", default="4242424242424242")

    signup_parser = subparsers.add_parser("signup", help="Sign up (dev email)")
    signup_parser.add_argument("email")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    ctx = get_context(args.rules)
    HANDLERS[args.command](ctx, args)


if __name__ == "__main__":
    main()
