"""Client Errors — typed failures surfaced to callers of queries and mutations.

Invariants:
    - Messages are fixed per operation ("Failed to fetch accounts"); transport
      and server details never leak through str(error)
    - ClientValidationError carries FieldErrors and means no request was sent
"""

from finboard.core.validation import FieldError


class ClientError(Exception):
    """Base for all client-side failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class QueryError(ClientError):
    """A query's request returned a non-2xx response."""


class MutationError(ClientError):
    """A mutation's request returned a non-2xx response."""


class ApiTransportError(ClientError):
    """The request never produced a response (connection, timeout, ...)."""


class ClientValidationError(ClientError):
    """Mutation payload failed local validation."""

    def __init__(self, errors: tuple[FieldError, ...]):
        super().__init__("Invalid input")
        self.errors = errors
