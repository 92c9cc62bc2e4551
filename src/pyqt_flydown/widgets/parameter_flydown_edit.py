"""
QLineEdit view over a ParameterField.

Commits edits through the field model, so renames go through the field's
reentrancy guard and change-handler gate, and opens the getter/setter
flydown when the pointer enters the field.
"""

from typing import Optional
import logging

from PyQt6.QtWidgets import QLineEdit, QWidget
from PyQt6.QtCore import QPoint, pyqtSignal
from PyQt6.QtGui import QCursor

from pyqt_flydown.fields import ParameterField
from pyqt_flydown.protocols import DisplayLocation, EditableField
from .flydown_menu import FlydownMenu
from .qt_meta import PyQtWidgetMeta

logger = logging.getLogger(__name__)


class ParameterFlydownEdit(QLineEdit, EditableField, metaclass=PyQtWidgetMeta):
    """
    Line edit bound to a ParameterField.

    Signals:
        block_requested(BlockDescriptor): a flydown entry was chosen
    """

    block_requested = pyqtSignal(object)

    def __init__(self, field: ParameterField, parent: QWidget = None):
        super().__init__(parent)
        self._field = field
        self._flydown: Optional[FlydownMenu] = None
        self.field_css_class_name = field.field_css_class_name
        self.flydown_css_class_name = field.flydown_css_class_name
        self.setObjectName(field.field_css_class_name)
        self.setReadOnly(not field.is_editable)
        self._sync_from_field()
        self.editingFinished.connect(self._commit_edit)

        # Renames can reach this field from another field's handler.
        listener = self._on_field_text_changed
        field.connect_text_changed(listener)
        self.destroyed.connect(lambda: field.disconnect_text_changed(listener))

    @property
    def field(self) -> ParameterField:
        return self._field

    @property
    def flydown(self) -> Optional[FlydownMenu]:
        return self._flydown

    def get_text(self) -> Optional[str]:
        """Implement TextGettable ABC."""
        return self._field.get_text()

    def set_text(self, text: Optional[str]) -> None:
        """Implement TextSettable ABC."""
        self._field.set_text(text)
        self._sync_from_field()

    def _sync_from_field(self) -> None:
        # Programmatic update; must not re-enter _commit_edit.
        previous = self.blockSignals(True)
        try:
            self.setText(self._field.get_text() or "")
        finally:
            self.blockSignals(previous)

    def _on_field_text_changed(self, text: str) -> None:
        self._sync_from_field()

    def _commit_edit(self) -> None:
        text = self.text()
        if text != self._field.get_text():
            self.set_text(text)

    def enterEvent(self, event):
        """Open the flydown when the pointer enters the field."""
        super().enterEvent(event)
        self.show_flydown()

    def leaveEvent(self, event):
        """Close the flydown unless the pointer moved into it."""
        super().leaveEvent(event)
        self.hide_flydown_unless_hovered(QCursor.pos())

    def hide_flydown_unless_hovered(self, global_pos: QPoint) -> None:
        if self._flydown is not None and not self._flydown.geometry().contains(global_pos):
            self.hide_flydown()

    def show_flydown(self) -> FlydownMenu:
        """Rebuild and pop up the flydown for the field's current name."""
        self.hide_flydown()
        menu = FlydownMenu(
            self._field.flydown_blocks(),
            css_class_name=self.flydown_css_class_name,
            parent=self,
        )
        menu.block_chosen.connect(self.block_requested.emit)
        menu.popup(self._flydown_position())
        self._flydown = menu
        logger.debug(f"Flydown opened for {self._field.get_text()!r}")
        return menu

    def hide_flydown(self) -> None:
        if self._flydown is not None:
            self._flydown.close()
            self._flydown.deleteLater()
            self._flydown = None

    def _flydown_position(self) -> QPoint:
        if self._field.display_location is DisplayLocation.RIGHT:
            return self.mapToGlobal(QPoint(self.width(), 0))
        return self.mapToGlobal(QPoint(0, self.height()))
