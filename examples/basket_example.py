"""
Basket — reference checkouts for the Acme widget shop.

Catalogue:  R01 $32.95, G01 $24.95, B01 $7.95
Delivery:   under $50 → $4.95, under $90 → $2.95, otherwise free
Offer:      buy one red widget, get the second half price
"""

from acme.presets import acme_basket
from examples._infra import banner, fill

BASKETS = (
    ["B01", "G01"],
    ["R01", "R01"],
    ["R01", "G01"],
    ["B01", "B01", "R01", "R01", "R01"],
    [],
    ["R01", "ZZZ"],
)


def main() -> None:
    for codes in BASKETS:
        banner(f"Basket: {', '.join(codes) or '(empty)'}")
        basket = fill(acme_basket(), codes)

        priced = basket.breakdown()
        print(f"\n  Subtotal {priced.subtotal}")
        print(f"  Discount {-priced.discount}")
        print(f"  Delivery {priced.delivery}")
        print(f"  Total    {priced.total}")


if __name__ == "__main__":
    main()
