"""Idempotency Record — cached outcome of a mutating command, keyed by client token.

Invariants:
    - key is non-empty (callers with an empty key never build a record)
    - response starts empty and status_code starts None
    - set_response is the only mutation; id, key, request, created_at never change

Design Decisions:
    - Mutable dataclass (unlike entities): the record is filled in after the
      command completes, and the store persists the filled record once
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from marketplace.core.domain_types import IdempotencyRecordId, utc_now


@dataclass
class IdempotencyRecord:
    id: IdempotencyRecordId
    key: str
    request: str
    response: str = ""
    status_code: int | None = None
    created_at: datetime = field(default_factory=utc_now)

    @property
    def has_response(self) -> bool:
        return self.status_code is not None

    def set_response(self, response: str, status_code: int) -> None:
        self.response = response
        self.status_code = status_code


def new_idempotency_record(key: str, request: str) -> IdempotencyRecord:
    if not key:
        raise ValueError("idempotency key must not be empty")
    return IdempotencyRecord(
        id=IdempotencyRecordId(uuid4()), key=key, request=request,
    )
