"""
Command line checkout against the reference shop.

    $ acme-basket B01 B01 R01 R01 R01
    Subtotal:  $114.75
    Discount:  -$16.48
    Delivery:  $0.00
    Total:     $98.27
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from acme._types import Ok, Error
from acme.basket import Basket
from acme.presets import acme_basket, acme_catalogue

logger = logging.getLogger("acme.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="acme-basket",
        description="Price a basket of Acme widgets",
    )
    parser.add_argument(
        "codes",
        nargs="*",
        metavar="CODE",
        help="Product codes to add, in order (e.g. R01 G01)",
    )
    parser.add_argument(
        "--products", "-p",
        action="store_true",
        help="List the catalogue and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log pricing decisions",
    )
    return parser


def print_products() -> None:
    for product in sorted(acme_catalogue(), key=lambda p: p.code):
        print(f"  [{product.code}] {product.name:14} {product.price.format():>8}")


def print_breakdown(basket: Basket) -> None:
    priced = basket.breakdown()
    print(f"Subtotal:  {priced.subtotal}")
    print(f"Discount:  {-priced.discount}")
    print(f"Delivery:  {priced.delivery}")
    print(f"Total:     {priced.total}")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.products:
        print_products()
        return 0

    basket = acme_basket()
    for code in args.codes:
        match basket.add(code.upper()):
            case Ok(_):
                pass
            case Error(e):
                logger.error("[%s] %s", e.kind.name, e.message)
                return 1

    print_breakdown(basket)
    return 0


if __name__ == "__main__":
    sys.exit(main())
