"""
PyQt6 widgets for parameter fields.

Views over the field models in ``pyqt_flydown.fields``.
"""

from .qt_meta import PyQtWidgetMeta
from .flydown_menu import FlydownMenu, descriptor_label
from .parameter_flydown_edit import ParameterFlydownEdit
from .block_context_menu import build_block_context_menu

__all__ = [
    "PyQtWidgetMeta",
    "FlydownMenu",
    "descriptor_label",
    "ParameterFlydownEdit",
    "build_block_context_menu",
]
