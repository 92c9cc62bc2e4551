"""
Field and block ABC contracts for block-editor fields.

Defines explicit contracts for the editable-field capability set and for the
editor collaborators (blocks, lexical scopes) a parameter field consumes.

Design Philosophy:
- Explicit inheritance over duck typing
- Fail-loud over fail-silent
- Multiple inheritance for composable capabilities
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence


class TextGettable(ABC):
    """
    ABC for fields that expose their current text.
    """

    @abstractmethod
    def get_text(self) -> Optional[str]:
        """
        Get the field's current text.

        Returns:
            The current text. None only before the field is initialized.
        """
        pass


class TextSettable(ABC):
    """
    ABC for fields that accept new text.
    """

    @abstractmethod
    def set_text(self, text: Optional[str]) -> None:
        """
        Set the field's text.

        Args:
            text: New text. None is accepted during disposal and ignored.
        """
        pass


class CSSStyled(ABC):
    """
    ABC for fields that carry styling class identifiers.

    Subclasses declare the class names as class attributes; the widget layer
    maps them onto Qt object names for stylesheet selectors.
    """

    field_css_class_name: str = ""
    flydown_css_class_name: str = ""


class EditableField(TextGettable, TextSettable, CSSStyled):
    """Capability set of an editable field: text access plus styling classes."""


class VariableScope(ABC):
    """Lexical scope resolved by the editor. Only its name is consumed here."""

    @abstractmethod
    def get_name(self) -> str:
        pass


class ParameterBlock(ABC):
    """
    ABC for blocks that declare parameters.

    Implemented by the host editor's procedure and local-declaration blocks.
    """

    horizontal_parameters: bool = True

    @abstractmethod
    def get_variable_scope(self) -> Optional[VariableScope]:
        """Return the block's lexical scope, or None for global scope."""
        pass

    @abstractmethod
    def get_parameters(self) -> Sequence[Any]:
        """Return the declared parameters; only the length is used here."""
        pass

    @abstractmethod
    def set_parameter_orientation(self, horizontal: bool) -> None:
        pass

    @abstractmethod
    def is_collapsed(self) -> bool:
        pass
