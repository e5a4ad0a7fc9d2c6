"""Query Client — keyed result cache for queries, invalidated by mutations.

Invariants:
    - A disabled Query resolves to the IDLE result and never calls its fn
    - Only SUCCESS results are served from cache; ERROR results are kept for
      inspection but the next fetch retries the request
    - invalidate(prefix) drops every key whose leading elements equal prefix
    - mutate() invalidates exactly the keys listed for its MutationKind, and
      only after the mutation succeeded

Design Decisions:
    - Tuple keys with prefix matching: ("transactions",) covers every
      ("transactions", account_id) variant
    - Failures are values (QueryResult.error) for queries, exceptions for mutations:
      a screen renders a failed query, a form reacts to a failed submit
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable

from finboard.client.errors import ClientError
from finboard.client.invalidation import MutationKind, invalidation_keys

logger = logging.getLogger(__name__)

QueryKey = tuple


class QueryStatus(str, Enum):
    IDLE = "idle"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class QueryResult:
    status: QueryStatus
    data: Any = None
    error: ClientError | None = None

    @property
    def is_idle(self) -> bool:
        return self.status is QueryStatus.IDLE

    @property
    def is_success(self) -> bool:
        return self.status is QueryStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.status is QueryStatus.ERROR


IDLE_RESULT = QueryResult(QueryStatus.IDLE)


@dataclass(frozen=True)
class Query:
    """One fetchable read bound to a cache key."""
    key: QueryKey
    fn: Callable[[], Awaitable[Any]]
    enabled: bool = True


@dataclass(frozen=True)
class Mutation:
    """One write; target_id fills the id slot of its invalidation keys."""
    kind: MutationKind
    fn: Callable[[Any], Awaitable[Any]]
    target_id: str | None = None


class QueryClient:
    """Cache of QueryResults keyed by QueryKey."""

    def __init__(self):
        self._cache: dict[QueryKey, QueryResult] = {}

    def get_cached(self, key: QueryKey) -> QueryResult | None:
        return self._cache.get(key)

    @property
    def keys(self) -> list[QueryKey]:
        return list(self._cache)

    async def fetch(self, query: Query) -> QueryResult:
        if not query.enabled:
            return IDLE_RESULT
        cached = self._cache.get(query.key)
        if cached is not None and cached.is_success:
            return cached
        try:
            data = await query.fn()
        except ClientError as e:
            logger.warning(f"Query {query.key!r} failed: {e.message}")
            result = QueryResult(QueryStatus.ERROR, error=e)
        else:
            result = QueryResult(QueryStatus.SUCCESS, data=data)
        self._cache[query.key] = result
        return result

    def invalidate(self, prefix: QueryKey) -> list[QueryKey]:
        """Drop cached entries under prefix; returns the dropped keys."""
        dropped = [k for k in self._cache if k[:len(prefix)] == prefix]
        for key in dropped:
            del self._cache[key]
        return dropped

    async def mutate(self, mutation: Mutation, variables: Any = None) -> Any:
        data = await mutation.fn(variables)
        for key in invalidation_keys(mutation.kind, mutation.target_id):
            self.invalidate(key)
        return data
