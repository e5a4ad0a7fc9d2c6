"""Confirmation Gate — turns a destructive action into an awaited yes/no decision.

Invariants:
    - Two states: IDLE and PENDING; at most one decision outstanding
    - resolve(bool) is the only transition out of PENDING (no timeout)
    - confirm() while PENDING raises ConfirmationPendingError
    - resolve() while IDLE is a no-op (a stray click after close)

Design Decisions:
    - asyncio.Future as the pending decision: awaiting callers suspend
      without blocking the loop, and a cancelled waiter frees the gate
"""

import asyncio
from enum import Enum


class ConfirmState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"


class ConfirmationPendingError(RuntimeError):
    """A decision is already outstanding on this gate."""


class ConfirmGate:
    """One confirmation prompt (title + message) and its outstanding decision."""

    def __init__(self, title: str, message: str):
        self.title = title
        self.message = message
        self._decision: asyncio.Future | None = None

    @property
    def state(self) -> ConfirmState:
        if self._decision is None or self._decision.done():
            return ConfirmState.IDLE
        return ConfirmState.PENDING

    @property
    def is_open(self) -> bool:
        """Whether the prompt should be rendered."""
        return self.state is ConfirmState.PENDING

    async def confirm(self) -> bool:
        if self.is_open:
            raise ConfirmationPendingError(self.title)
        decision = asyncio.get_running_loop().create_future()
        self._decision = decision
        try:
            return await decision
        finally:
            if self._decision is decision:
                self._decision = None

    def resolve(self, value: bool) -> None:
        decision = self._decision
        if decision is None or decision.done():
            return
        decision.set_result(value)

    def handle_confirm(self) -> None:
        self.resolve(True)

    def handle_cancel(self) -> None:
        self.resolve(False)
