"""Client Data-Access Layer — typed queries and mutations over the Finboard HTTP API.

Invariants:
    - One Query/Mutation definition per endpoint; the QueryClient owns the cache
    - Amounts are Decimal display values on this side of the boundary only
    - Non-2xx responses surface as fixed-message ClientError subclasses

Design Decisions:
    - Runs on asyncio (single event loop); no locks, no cancellation, no retries
"""
