"""
Metaclass for Qt widgets that implement pyqt-flydown ABCs.
"""

from abc import ABCMeta

from PyQt6.QtCore import QObject

# Combines Qt's wrapper metaclass with ABCMeta so widgets can inherit field ABCs.
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass
