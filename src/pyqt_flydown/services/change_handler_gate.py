"""
Scoped switch for rename propagation from parameter fields.

Parameter fields forward text changes to a rename handler that updates every
reference bound to the old name. While a block regenerates its parameter
fields (procedure or local-declaration mutator updates) those changes are
not renames, and forwarding them would produce spurious renames and
setText -> rename -> setText loops. The gate suppresses propagation for the
duration of such an update.

Pattern:
    Instead of:
        old = gate.enabled
        gate.enabled = False
        try:
            # ... rebuild fields
        finally:
            gate.enabled = old

    Use:
        with gate.disabled():
            # ... rebuild fields

The flag is read-only outside this module, so the context manager is the only
way to change it and it always leaves the flag as it found it.
"""

from contextlib import contextmanager
from typing import Callable, Optional, TypeVar
import logging

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ChangeHandlerGate:
    """
    Enable/disable switch for rename propagation, with guaranteed restore.

    Fields receive a gate explicitly; ``ChangeHandlerGate.instance()`` is the
    editor-session default used when none is given.

    Examples:
        gate = ChangeHandlerGate.instance()

        with gate.disabled():
            block.rebuild_parameter_fields()

        gate.with_disabled(block.rebuild_parameter_fields)
    """

    _instance: Optional["ChangeHandlerGate"] = None

    def __init__(self, enabled: bool = True):
        self._enabled = enabled

    @classmethod
    def instance(cls) -> "ChangeHandlerGate":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def enabled(self) -> bool:
        return self._enabled

    @contextmanager
    def disabled(self):
        """
        Context manager that disables propagation and restores the previous value on exit.

        Nested uses restore in order, so an inner scope never re-enables a
        gate an outer scope disabled.
        """
        prev_value = self._enabled
        logger.debug(f"Saving change handler gate enabled={prev_value}")
        self._enabled = False
        try:
            yield self
        finally:
            # Restore previous value (guaranteed even on exception)
            self._enabled = prev_value
            logger.debug(f"Restoring change handler gate enabled={prev_value}")

    def with_disabled(self, thunk: Callable[[], T]) -> T:
        """Execute thunk with propagation disabled (lambda-based)."""
        with self.disabled():
            return thunk()

    def __repr__(self) -> str:
        return f"ChangeHandlerGate(enabled={self._enabled})"
