"""
Parameter-layout entries for block context menus.

Adds a toggle between horizontal and vertical parameter lists just before
"Collapse Block" and drops "Inline Inputs", which does not work with
vertical parameter lists.
"""

from typing import Any, List, Optional
import logging

from pyqt_flydown.protocols import FlydownConfig, ParameterBlock, get_flydown_config
from .menu_options import MenuOption, MenuOptionList, has_label

logger = logging.getLogger(__name__)


def parameter_count(block: Any) -> int:
    """Number of declared parameters; 0 for blocks that declare none."""
    if isinstance(block, ParameterBlock):
        return len(block.get_parameters())
    return 0


def orientation_option(block: ParameterBlock, config: FlydownConfig) -> MenuOption:
    """
    Build the toggle option for block.

    The label names the layout the option switches to, not the current one.
    """
    horizontal = block.horizontal_parameters
    label = config.vertical_parameters_label if horizontal else config.horizontal_parameters_label

    def toggle() -> None:
        block.set_parameter_orientation(not block.horizontal_parameters)

    return MenuOption(text=label, enabled=True, callback=toggle)


def add_horizontal_vertical_option(
    block: Any,
    options: List[MenuOption],
    config: Optional[FlydownConfig] = None,
) -> None:
    """
    Augment a block's context-menu options in place.

    Only applies to uncollapsed blocks with at least one parameter, and only
    when the editor offers collapsing.

    Args:
        block: Block the menu was opened on
        options: The editor's option list (mutated in place)
        config: Labels and flags; defaults to the global FlydownConfig
    """
    config = config or get_flydown_config()

    if parameter_count(block) <= 0 or not config.collapse_enabled or block.is_collapsed():
        return

    menu = MenuOptionList(options)
    inserted = menu.insert_before(
        has_label(config.collapse_block_label),
        orientation_option(block, config),
    )
    if not inserted:
        logger.warning(
            f"No '{config.collapse_block_label}' option on {type(block).__name__}; "
            f"parameter orientation option not added"
        )

    removed = menu.remove_first(has_label(config.inline_inputs_label))
    if removed is not None:
        logger.debug(f"Removed '{removed.text}' option from {type(block).__name__}")
