"""
Hover flydown listing the getter and setter blocks for a parameter.
"""

from PyQt6.QtWidgets import QMenu, QWidget
from PyQt6.QtCore import pyqtSignal

from pyqt_flydown.services import (
    BlockDescriptor,
    BlockDescriptorPair,
    GETTER_BLOCK_TYPE,
)


def descriptor_label(descriptor: BlockDescriptor) -> str:
    """Menu text for a descriptor, e.g. ``get x`` or ``set x to``."""
    if descriptor.type == GETTER_BLOCK_TYPE:
        return f"get {descriptor.var}"
    return f"set {descriptor.var} to"


class FlydownMenu(QMenu):
    """QMenu offering one entry per block descriptor.

    Emits block_chosen with the descriptor when an entry is triggered; the
    editor creates the block.
    """

    block_chosen = pyqtSignal(object)  # BlockDescriptor

    def __init__(self, pair: BlockDescriptorPair, css_class_name: str = "", parent: QWidget = None):
        super().__init__(parent)
        if css_class_name:
            self.setObjectName(css_class_name)
        self.descriptors = tuple(pair)
        for descriptor in self.descriptors:
            action = self.addAction(descriptor_label(descriptor))
            action.setData(descriptor)
            action.triggered.connect(
                lambda checked=False, d=descriptor: self.block_chosen.emit(d)
            )
