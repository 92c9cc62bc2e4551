"""
Render a block's context-menu options as a QMenu.
"""

from typing import Any, List, Optional

from PyQt6.QtWidgets import QMenu, QWidget

from pyqt_flydown.protocols import FlydownConfig
from pyqt_flydown.services import MenuOption, add_horizontal_vertical_option


def build_block_context_menu(
    block: Any,
    options: List[MenuOption],
    parent: QWidget = None,
    config: Optional[FlydownConfig] = None,
) -> QMenu:
    """Augment options for block, then build a QMenu with one action per option."""
    add_horizontal_vertical_option(block, options, config)

    menu = QMenu(parent)
    for option in options:
        action = menu.addAction(option.text)
        action.setEnabled(option.enabled)
        action.triggered.connect(lambda checked=False, cb=option.callback: cb())
    return menu
