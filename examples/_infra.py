"""Shared infrastructure for examples."""

from __future__ import annotations

from acme import Basket, Ok, Error


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def fill(basket: Basket, codes: list[str]) -> Basket:
    for code in codes:
        match basket.add(code):
            case Ok(product):
                print(f"  + {product.code}  {product.name:14} {product.price}")
            case Error(e):
                print(f"  ✗ {code}: [{e.kind.name}] {e.message}")
    return basket
