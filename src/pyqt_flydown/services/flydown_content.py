"""
Flydown content for parameter fields.

Computes the lexically scoped variable name for a parameter and the pair of
getter/setter block descriptors offered in the field's hover flydown. Pure
functions of (text, scope); callers recompute on every flydown open since the
field text may have changed in between.
"""

from dataclasses import dataclass
from typing import Optional
import logging
import xml.etree.ElementTree as ET

from pyqt_flydown.protocols import VariableScope

logger = logging.getLogger(__name__)

GETTER_BLOCK_TYPE = "lexical_variable_get"
SETTER_BLOCK_TYPE = "lexical_variable_set"
VARIABLE_FIELD_NAME = "VAR"

SCOPE_SEPARATOR = "@@"
NAME_SEPARATOR = "::"


@dataclass(frozen=True)
class BlockDescriptor:
    """A block to create: its type and the variable name in its VAR field."""
    type: str
    var: str

    def to_element(self) -> ET.Element:
        block = ET.Element("block", {"type": self.type})
        title = ET.SubElement(block, "title", {"name": VARIABLE_FIELD_NAME})
        title.text = self.var
        return block


@dataclass(frozen=True)
class BlockDescriptorPair:
    """Getter and setter descriptors for one parameter."""
    getter: BlockDescriptor
    setter: BlockDescriptor

    def __iter__(self):
        yield self.getter
        yield self.setter

    def to_xml(self) -> str:
        """Serialize as the ``<xml>`` block list the flydown renderer consumes."""
        root = ET.Element("xml")
        for descriptor in self:
            root.append(descriptor.to_element())
        return ET.tostring(root, encoding="unicode")


def compose_variable_name(text: str, scope: Optional[VariableScope]) -> str:
    """
    Compose the scoped variable name for a parameter.

    Args:
        text: Parameter name as shown in the field
        scope: Enclosing lexical scope, or None for a global name

    Returns:
        ``text@@scope::text`` when scoped, otherwise ``text``

    Example:
        compose_variable_name("x", scope_named("foo"))  # "x@@foo::x"
    """
    if scope is None:
        return text
    return f"{text}{SCOPE_SEPARATOR}{scope.get_name()}{NAME_SEPARATOR}{text}"


def flydown_blocks(text: str, scope: Optional[VariableScope]) -> BlockDescriptorPair:
    """Build the getter/setter pair for a parameter named ``text`` in ``scope``."""
    name = compose_variable_name(text, scope)
    logger.debug(f"Flydown blocks for {name!r}")
    return BlockDescriptorPair(
        getter=BlockDescriptor(GETTER_BLOCK_TYPE, name),
        setter=BlockDescriptor(SETTER_BLOCK_TYPE, name),
    )
