"""SQLAlchemy Repositories — implementations of core/repository_protocols.py.

Invariants:
    - One AsyncSession per repository instance, shared within a request
    - Every write commits on its own (no transaction spans two repositories)
    - ORM rows are mapped to frozen core entities before being returned
"""

from marketplace.infrastructure.repositories.seller_repository import (  # noqa: F401
    SqlSellerRepository,
)
from marketplace.infrastructure.repositories.product_repository import (  # noqa: F401
    SqlProductRepository,
)
from marketplace.infrastructure.repositories.idempotency_repository import (  # noqa: F401
    SqlIdempotencyRepository,
)
