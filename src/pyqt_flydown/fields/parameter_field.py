"""
Parameter declaration field with a getter/setter flydown.

A ParameterField names a parameter of a procedure or local declaration
block. Edits propagate to references through an additional change handler
supplied by the block, gated by a ChangeHandlerGate so blocks can rebuild
their fields without triggering renames.

Example:
    def rename_param(field, new_name):
        procedure.rename_parameter(field, new_name)

    field = ParameterField("x", additional_change_handler=rename_param)
    field.set_source_block(procedure)

    # Rebuilding fields without renames:
    with field.gate.disabled():
        procedure.update_parameter_fields()
"""

from typing import Any, Callable, Optional, Union
import logging

from pyqt_flydown.protocols import DisplayLocation, ParameterBlock, get_flydown_config
from pyqt_flydown.services.change_handler_gate import ChangeHandlerGate
from pyqt_flydown.services.flydown_content import BlockDescriptorPair, flydown_blocks
from pyqt_flydown.services.reentrancy_guard import FieldState, ReentrancyGuard
from .text_input_field import TextInputField

logger = logging.getLogger(__name__)

AdditionalChangeHandler = Callable[["ParameterField", str], Any]


class ParameterField(TextInputField):
    """
    Editable parameter-name field.

    Args:
        name: Initial parameter name
        is_editable: Whether the name can be edited in place
        display_location: Where the flydown opens; defaults to the configured location
        additional_change_handler: Called as ``handler(field, text)`` on each
            edit while the gate is enabled. Used for its side effect only;
            its return value is ignored.
        gate: Propagation gate; defaults to ``ChangeHandlerGate.instance()``
    """

    field_css_class_name = "blocklyFieldParameter"
    flydown_css_class_name = "blocklyFieldParameterFlydown"

    def __init__(
        self,
        name: str,
        is_editable: bool = True,
        display_location: Optional[Union[DisplayLocation, str]] = None,
        additional_change_handler: Optional[AdditionalChangeHandler] = None,
        gate: Optional[ChangeHandlerGate] = None,
    ):
        super().__init__(name, change_handler=self._handle_change)
        self.is_editable = is_editable
        if display_location is None:
            display_location = get_flydown_config().display_location
        self.display_location = DisplayLocation(display_location)
        self._additional_change_handler = additional_change_handler
        self._gate = gate or ChangeHandlerGate.instance()
        self._guard = ReentrancyGuard(owner_name=f"ParameterField({name!r})")

    @property
    def gate(self) -> ChangeHandlerGate:
        return self._gate

    @property
    def state(self) -> FieldState:
        return self._guard.state

    def _handle_change(self, text: str) -> str:
        if self._gate.enabled and self._additional_change_handler is not None:
            self._additional_change_handler(self, text)
        return text

    def set_text(self, text: Optional[str]) -> None:
        # Nested calls from the rename handler are dropped.
        with self._guard.mutating() as entered:
            if entered:
                super().set_text(text)

    def get_variable_scope(self):
        block = self.source_block
        if isinstance(block, ParameterBlock):
            return block.get_variable_scope()
        return None

    def flydown_blocks(self) -> BlockDescriptorPair:
        """Getter/setter pair for the current name in the owning block's scope."""
        return flydown_blocks(self.get_text() or "", self.get_variable_scope())
