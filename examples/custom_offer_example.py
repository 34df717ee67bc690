"""
Custom offer — any object with `name` and `apply(items)` is an Offer.

Builds a delivery schedule with the fluent builder and shows how the
builder rejects a schedule without a catch-all tier.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from kungfu import Ok, Error

from acme import Basket, Money
from acme import delivery as D
from acme import offers as O
from acme.catalogue import Product
from acme.presets import acme_catalogue
from examples._infra import banner, fill


@dataclass(frozen=True, slots=True)
class MultiBuy:
    """Every `every`-th unit of a product is free."""

    product_code: str
    every: int

    @property
    def name(self) -> str:
        return f"{self.every}-for-{self.every - 1} on {self.product_code}"

    def apply(self, items: Sequence[Product]) -> Money:
        matching = [i for i in items if i.code == self.product_code]
        free = len(matching) // self.every
        return matching[0].price * free if free else Money.zero()


def main() -> None:
    banner("Builder: schedule without catch-all")
    match D.delivery().below(Money(5000), Money(495)).build():
        case Ok(_):
            print("  unexpected: built")
        case Error(e):
            print(f"  ✗ [{e.kind.name}] {e.message}")

    banner("Builder: flat $3.00 under $20, otherwise free")
    match D.delivery().below(Money(2000), Money(300)).otherwise(Money.zero()).build():
        case Ok(rules):
            pass
        case Error(e):
            raise e

    offers = (O.BuyOneGetOneHalfPrice("R01"), MultiBuy("B01", every=3))
    basket = fill(Basket(acme_catalogue(), rules, offers), ["B01", "B01", "B01", "R01", "R01"])
    priced = basket.breakdown()
    print(f"\n  Discount {-priced.discount}")
    print(f"  Total    {priced.total}")


if __name__ == "__main__":
    main()
