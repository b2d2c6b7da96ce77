"""Idempotent Command Runner — replay-or-execute wrapper around every mutating command.

Invariants:
    - Empty key: the operation runs, nothing is looked up or cached
    - Non-empty key, record found: the stored response is decoded into the
      command's result type and returned; the operation never runs
    - Non-empty key, no record: the operation runs, then its result is
      serialized onto a fresh IdempotencyRecord and persisted
    - Lookup failures propagate; cache-write failures are logged and swallowed
      (the business write has already committed)
    - Commands sharing a key are serialized through KeyedLocks, so within one
      process the business effect runs at most once per key

Design Decisions:
    - Per-key asyncio.Lock held across lookup + operation + cache write: the
      second caller re-checks the store after the first caller finishes and
      replays its result instead of repeating the side effect
    - _key_locks is module-level: deliberate exception to no-global-state,
      services are built per request but the locks must outlive them.
      Across processes the unique constraint on the key is the only guard
    - A stored response that does not decode into the requested result type
      (key reused for a different command) is a conflict, not a server error
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable

from pydantic import ValidationError

from marketplace.core.domain_types import idempotency_enabled
from marketplace.core.errors import DuplicateIdempotencyKeyError, MarketplaceError
from marketplace.core.idempotency_record import (
    IdempotencyRecord, new_idempotency_record,
)
from marketplace.core.repository_protocols import IdempotencyRepository
from marketplace.schemas.commands import ResultT, Command

logger = logging.getLogger(__name__)


class KeyedLocks:
    """One asyncio.Lock per in-flight key, discarded when nobody holds or waits."""

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._locks)

    def __contains__(self, key: str) -> bool:
        return key in self._locks

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._users[key] = self._users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if not self._users[key]:
                del self._users[key]
                del self._locks[key]


_key_locks = KeyedLocks()


class IdempotentCommandRunner:
    """Wraps a command operation with idempotency lookup and response caching."""

    def __init__(
        self,
        idempotency_repository: IdempotencyRepository,
        locks: KeyedLocks | None = None,
    ):
        self._records = idempotency_repository
        self._locks = locks if locks is not None else _key_locks

    async def run(
        self,
        command: Command,
        result_type: type[ResultT],
        operation: Callable[[], Awaitable[ResultT]],
        status_code: int,
    ) -> ResultT:
        key = command.idempotency_key
        if not idempotency_enabled(key):
            return await operation()

        async with self._locks.hold(key):
            cached = await self.replay(key, result_type)
            if cached is not None:
                return cached

            record = new_idempotency_record(key, command.model_dump_json())
            result = await operation()
            await self._remember(record, result, status_code)
            return result

    async def replay(self, key: str, result_type: type[ResultT]) -> ResultT | None:
        """Decode the cached result for key, or None when the key is unknown."""
        record = await self._records.find_by_key(key)
        if record is None:
            return None
        if not record.has_response:
            raise DuplicateIdempotencyKeyError(key)
        try:
            result = result_type.model_validate_json(record.response)
        except ValidationError as e:
            logger.warning(
                f"Cached response for key does not decode as {result_type.__name__}",
                extra={"idempotency_key": key},
            )
            raise DuplicateIdempotencyKeyError(key) from e
        logger.info(
            f"Replaying cached {result_type.__name__}",
            extra={"idempotency_key": key},
        )
        return result

    async def _remember(
        self, record: IdempotencyRecord, result: ResultT, status_code: int,
    ) -> None:
        record.set_response(result.model_dump_json(), status_code)
        try:
            await self._records.create(record)
        except MarketplaceError as e:
            logger.warning(
                f"Failed to cache idempotent response: {e.message}",
                extra={"idempotency_key": record.key, "error_code": e.code},
            )
