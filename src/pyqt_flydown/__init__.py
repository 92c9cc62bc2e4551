"""
pyqt-flydown: parameter-name fields with getter/setter flydowns for PyQt6 block editors.

A parameter field declares a variable name inside a block. Hovering it offers
a "flydown" of ready-made getter and setter blocks bound to that name, and
editing it propagates the rename to dependent blocks without reentrant
update cascades.

Architecture:
- Tier 1 (Protocols): Field/block/scope ABCs and configuration
- Tier 2 (Services): Change-handler gate, reentrancy guard, flydown content,
  context-menu augmentation
- Tier 3 (Fields): Pure-Python editable field models
- Tier 4 (Widgets): PyQt6 views over the field models
"""

__version__ = "0.1.0"

from .fields import TextInputField, ParameterField
from .services import (
    ChangeHandlerGate,
    FieldState,
    ReentrancyGuard,
    BlockDescriptor,
    BlockDescriptorPair,
    compose_variable_name,
    flydown_blocks,
    MenuOption,
    MenuOptionList,
    add_horizontal_vertical_option,
)

__all__ = [
    "__version__",
    "TextInputField",
    "ParameterField",
    "ChangeHandlerGate",
    "FieldState",
    "ReentrancyGuard",
    "BlockDescriptor",
    "BlockDescriptorPair",
    "compose_variable_name",
    "flydown_blocks",
    "MenuOption",
    "MenuOptionList",
    "add_horizontal_vertical_option",
]
