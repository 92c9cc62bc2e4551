"""
Service layer for parameter fields.

Rename-propagation gating, reentrancy guarding, flydown content and
context-menu augmentation.
"""

from .change_handler_gate import ChangeHandlerGate
from .reentrancy_guard import FieldState, ReentrancyGuard
from .flydown_content import (
    BlockDescriptor,
    BlockDescriptorPair,
    compose_variable_name,
    flydown_blocks,
    GETTER_BLOCK_TYPE,
    SETTER_BLOCK_TYPE,
)
from .menu_options import MenuOption, MenuOptionList, has_label
from .context_menu_augmenter import add_horizontal_vertical_option, parameter_count

__all__ = [
    "ChangeHandlerGate",
    "FieldState",
    "ReentrancyGuard",
    "BlockDescriptor",
    "BlockDescriptorPair",
    "compose_variable_name",
    "flydown_blocks",
    "GETTER_BLOCK_TYPE",
    "SETTER_BLOCK_TYPE",
    "MenuOption",
    "MenuOptionList",
    "has_label",
    "add_horizontal_vertical_option",
    "parameter_count",
]
