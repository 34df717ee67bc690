"""
Shared fixtures for acme tests.
"""

from collections.abc import Callable
from typing import Any

import pytest

from acme import Ok, Error, Money, PricingError, Result
from acme.basket import Basket
from acme.catalogue import Catalogue, Product
from acme.delivery import DeliveryRules, Tier
from acme.presets import acme_basket


def _unwrap_ok(result: Result[Any, PricingError]) -> Any:
    match result:
        case Ok(value):
            return value
        case Error(e):
            pytest.fail(f"expected Ok, got Error({e!r})")


def _unwrap_err(result: Result[Any, PricingError]) -> PricingError:
    match result:
        case Ok(value):
            pytest.fail(f"expected Error, got Ok({value!r})")
        case Error(e):
            return e


@pytest.fixture
def unwrap_ok() -> Callable[[Result[Any, PricingError]], Any]:
    return _unwrap_ok


@pytest.fixture
def unwrap_err() -> Callable[[Result[Any, PricingError]], PricingError]:
    return _unwrap_err


@pytest.fixture
def red() -> Product:
    return Product("R01", "Red Widget", Money(3295))


@pytest.fixture
def green() -> Product:
    return Product("G01", "Green Widget", Money(2495))


@pytest.fixture
def blue() -> Product:
    return Product("B01", "Blue Widget", Money(795))


@pytest.fixture
def catalogue(red: Product, green: Product, blue: Product) -> Catalogue:
    return Catalogue([red, green, blue])


@pytest.fixture
def delivery_rules() -> DeliveryRules:
    return DeliveryRules(
        [
            Tier(Money(495), threshold=Money(5000)),
            Tier(Money(295), threshold=Money(9000)),
            Tier(Money(0)),
        ]
    )


@pytest.fixture
def basket() -> Basket:
    return acme_basket()
