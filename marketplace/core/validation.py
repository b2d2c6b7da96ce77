"""Entity Validation — pure invariant checks and the validated wrapper types.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - check_* returns the first violation or None; order is name, price, timestamps
    - A valid price is exactly representable in the price column, so what is
      returned to the client is what a later read returns
    - ValidatedSeller / ValidatedProduct can only be built by new_validated_*;
      direct construction raises TypeError, and the wrappers are read-only
    - A failed new_validated_* raises the violation and returns nothing partial

Design Decisions:
    - Wrapper over inheritance: a ValidatedProduct is not a Product, so no code
      can pass an unchecked Product where a validated one is required
    - Plain __slots__ class over dataclass: dataclasses.replace() would copy
      the construction token and let callers bypass the checks
"""

from datetime import datetime
from decimal import Decimal

from marketplace.core.errors import ValidationFailedError
from marketplace.core.product import Product
from marketplace.core.seller import Seller

_VALIDATION_TOKEN = object()

# products.price is NUMERIC(12, 2)
PRICE_STEP = Decimal("0.01")
PRICE_LIMIT = Decimal(10) ** 10


# ─── Checks ──────────────────────────────────────────────────────

def check_name(name: str) -> ValidationFailedError | None:
    if not name or not name.strip():
        return ValidationFailedError("name", "must not be empty")
    return None


def check_timestamps(
    created_at: datetime, updated_at: datetime,
) -> ValidationFailedError | None:
    if created_at > updated_at:
        return ValidationFailedError(
            "created_at", "must not be after updated_at",
        )
    return None


def check_seller(seller: Seller) -> ValidationFailedError | None:
    """Seller rules: non-empty name, created_at <= updated_at."""
    return (
        check_name(seller.name)
        or check_timestamps(seller.created_at, seller.updated_at)
    )


def check_product(product: Product) -> ValidationFailedError | None:
    """Product rules: non-empty name, finite price > 0 that fits NUMERIC(12, 2),
    created_at <= updated_at.
    """
    error = check_name(product.name)
    if error:
        return error
    # is_finite first: ordering comparisons on Decimal NaN raise
    if not product.price.is_finite() or product.price <= 0:
        return ValidationFailedError("price", "must be greater than 0")
    if product.price >= PRICE_LIMIT:
        return ValidationFailedError("price", f"must be less than {PRICE_LIMIT}")
    if product.price % PRICE_STEP:
        return ValidationFailedError("price", "must have at most 2 decimal places")
    return check_timestamps(product.created_at, product.updated_at)


# ─── Validated wrappers ──────────────────────────────────────────

class _Validated:
    __slots__ = ("_entity",)

    def __init__(self, entity: object, *, _token: object = None):
        if _token is not _VALIDATION_TOKEN:
            raise TypeError(
                f"{type(self).__name__} can only be created by its "
                f"new_validated_* factory",
            )
        object.__setattr__(self, "_entity", entity)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    @property
    def is_valid(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._entity == other._entity

    def __hash__(self) -> int:
        return hash((type(self), self._entity))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entity!r})"


class ValidatedSeller(_Validated):
    """A Seller known to satisfy check_seller at construction time."""
    __slots__ = ()

    @property
    def seller(self) -> Seller:
        return self._entity

    @property
    def id(self):
        return self._entity.id

    @property
    def name(self) -> str:
        return self._entity.name


class ValidatedProduct(_Validated):
    """A Product known to satisfy check_product at construction time."""
    __slots__ = ()

    @property
    def product(self) -> Product:
        return self._entity

    @property
    def id(self):
        return self._entity.id

    @property
    def name(self) -> str:
        return self._entity.name


def new_validated_seller(seller: Seller) -> ValidatedSeller:
    error = check_seller(seller)
    if error:
        raise error
    return ValidatedSeller(seller, _token=_VALIDATION_TOKEN)


def new_validated_product(product: Product) -> ValidatedProduct:
    error = check_product(product)
    if error:
        raise error
    return ValidatedProduct(product, _token=_VALIDATION_TOKEN)
