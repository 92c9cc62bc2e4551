"""
Per-instance reentrancy guard for field text mutation.

Path of the loop this breaks:
    set_text -> rename handler -> rename bound references -> set_text

Each field owns one guard. The guard is an explicit two-state machine
{IDLE, MUTATING}; a field is MUTATING only while its own set_text runs and
always returns to IDLE, even if the mutation raises.
"""

from contextlib import contextmanager
from enum import Enum
import logging

logger = logging.getLogger(__name__)


class FieldState(Enum):
    IDLE = "idle"
    MUTATING = "mutating"


class ReentrancyGuard:
    """
    Two-state reentrancy guard.

    Example:
        with self._guard.mutating() as entered:
            if not entered:
                return  # nested call, dropped
            ...
    """

    def __init__(self, owner_name: str = ""):
        self._state = FieldState.IDLE
        self._owner_name = owner_name

    @property
    def state(self) -> FieldState:
        return self._state

    @property
    def is_mutating(self) -> bool:
        return self._state is FieldState.MUTATING

    @contextmanager
    def mutating(self):
        """
        Enter MUTATING for the duration of the block.

        Yields True for the outermost entry. A nested entry yields False and
        leaves the state untouched, so only the outer call returns the guard
        to IDLE.
        """
        if self._state is FieldState.MUTATING:
            logger.debug(f"Reentrant mutation dropped on {self._owner_name or 'field'}")
            yield False
            return

        self._state = FieldState.MUTATING
        try:
            yield True
        finally:
            self._state = FieldState.IDLE
