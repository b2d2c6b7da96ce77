"""Entity Validation — pure checks and the validated wrapper guarantees.

Tests cover:
    - check_seller / check_product report the first violated rule
    - price must be finite and strictly positive
    - every combination of (name, price, timestamp order) validates iff all hold
    - ValidatedSeller / ValidatedProduct cannot be built or altered directly
"""

import dataclasses
import itertools
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from marketplace.core.errors import ValidationFailedError
from marketplace.core.product import Product, new_product
from marketplace.core.seller import Seller, new_seller
from marketplace.core.validation import (
    ValidatedProduct, ValidatedSeller,
    check_product, check_seller,
    new_validated_product, new_validated_seller,
)

T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)
T1 = T0 + timedelta(hours=1)


def _seller(name="John Doe", created=T0, updated=T0) -> Seller:
    return dataclasses.replace(
        new_seller("seed", now=T0), name=name, created_at=created, updated_at=updated,
    )


def _product(name="Widget", price=Decimal("19.99"), created=T0, updated=T0) -> Product:
    seller = new_validated_seller(_seller())
    return dataclasses.replace(
        new_product("seed", Decimal("1"), seller, now=T0),
        name=name, price=price, created_at=created, updated_at=updated,
    )


# ─── check_seller ────────────────────────────────────────────────

def test_check_seller_accepts_valid_seller():
    assert check_seller(_seller()) is None


def test_check_seller_rejects_empty_name():
    error = check_seller(_seller(name=""))
    assert error.field == "name"
    assert error.reason == "must not be empty"


def test_check_seller_rejects_whitespace_name():
    assert check_seller(_seller(name="   ")).field == "name"


def test_check_seller_rejects_created_after_updated():
    error = check_seller(_seller(created=T1, updated=T0))
    assert error.field == "created_at"


def test_check_seller_accepts_updated_after_created():
    assert check_seller(_seller(created=T0, updated=T1)) is None


# ─── check_product ───────────────────────────────────────────────

def test_check_product_accepts_valid_product():
    assert check_product(_product()) is None


@pytest.mark.parametrize("price", [
    Decimal("0"), Decimal("-1"), Decimal("-0.01"),
    Decimal("NaN"), Decimal("Infinity"), Decimal("-Infinity"),
])
def test_check_product_rejects_non_positive_or_non_finite_price(price):
    error = check_product(_product(price=price))
    assert error.field == "price"
    assert error.reason == "must be greater than 0"


def test_check_product_accepts_smallest_positive_price():
    assert check_product(_product(price=Decimal("0.01"))) is None


@pytest.mark.parametrize("price", [Decimal("0.001"), Decimal("10.005"), Decimal("0.009")])
def test_check_product_rejects_sub_cent_price(price):
    error = check_product(_product(price=price))
    assert error.field == "price"
    assert error.reason == "must have at most 2 decimal places"


def test_check_product_accepts_trailing_zero_scale():
    assert check_product(_product(price=Decimal("10.500"))) is None


def test_check_product_price_upper_bound():
    assert check_product(_product(price=Decimal("9999999999.99"))) is None
    error = check_product(_product(price=Decimal("10000000000")))
    assert error.field == "price"
    assert error.reason == "must be less than 10000000000"


def test_check_product_reports_name_before_price():
    assert check_product(_product(name="", price=Decimal("0"))).field == "name"


def test_check_product_reports_price_before_timestamps():
    error = check_product(_product(price=Decimal("0"), created=T1, updated=T0))
    assert error.field == "price"


def test_validity_holds_iff_every_rule_holds():
    names = ["Widget", "", "  "]
    prices = [Decimal("19.99"), Decimal("0"), Decimal("-5")]
    orders = [(T0, T0), (T0, T1), (T1, T0)]
    for name, price, (created, updated) in itertools.product(names, prices, orders):
        product = _product(name=name, price=price, created=created, updated=updated)
        expected = bool(name.strip()) and price > 0 and created <= updated
        assert (check_product(product) is None) is expected, (name, price, created, updated)


# ─── validated wrappers ──────────────────────────────────────────

def test_new_validated_seller_wraps_entity():
    seller = _seller()
    validated = new_validated_seller(seller)
    assert validated.is_valid
    assert validated.seller is seller
    assert validated.id == seller.id
    assert validated.name == "John Doe"


def test_new_validated_seller_raises_violation():
    with pytest.raises(ValidationFailedError) as exc:
        new_validated_seller(_seller(name=""))
    assert exc.value.field == "name"


def test_new_validated_product_raises_violation():
    with pytest.raises(ValidationFailedError) as exc:
        new_validated_product(_product(price=Decimal("-1")))
    assert exc.value.field == "price"


def test_new_validated_product_wraps_entity():
    product = _product()
    validated = new_validated_product(product)
    assert validated.product is product
    assert validated.name == "Widget"


def test_direct_construction_is_rejected():
    with pytest.raises(TypeError):
        ValidatedSeller(_seller())
    with pytest.raises(TypeError):
        ValidatedProduct(_product())


def test_direct_construction_rejects_forged_token():
    with pytest.raises(TypeError):
        ValidatedSeller(_seller(), _token=object())


def test_wrappers_are_read_only():
    validated = new_validated_seller(_seller())
    with pytest.raises(AttributeError):
        validated._entity = _seller(name="")
    with pytest.raises(AttributeError):
        validated.extra = 1


def test_wrappers_are_not_dataclasses():
    assert not dataclasses.is_dataclass(new_validated_product(_product()))


def test_wrappers_compare_by_entity():
    seller = _seller()
    assert new_validated_seller(seller) == new_validated_seller(seller)
    assert hash(new_validated_seller(seller)) == hash(new_validated_seller(seller))
