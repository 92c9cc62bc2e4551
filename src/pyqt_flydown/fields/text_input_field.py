"""
Editable text field model.

Pure-Python counterpart of an editor's text-input field: holds the text,
runs an optional change handler on every set_text, and carries the styling
class identifiers the widget layer applies.
"""

from typing import Any, Callable, List, Optional
import logging

from pyqt_flydown.protocols import EditableField

logger = logging.getLogger(__name__)

ChangeHandler = Callable[[str], Optional[str]]
TextListener = Callable[[str], None]


class TextInputField(EditableField):
    """
    Editable text field with an optional change handler.

    The change handler sees every new text before it is stored. A non-None
    return value replaces the text; None keeps the text as given.
    """

    field_css_class_name = "blocklyFieldTextInput"

    def __init__(self, text: str, change_handler: Optional[ChangeHandler] = None):
        # Initial text is stored directly; the handler only sees edits.
        self._text: Optional[str] = text
        self._change_handler = change_handler
        self._source_block: Any = None
        self._text_listeners: List[TextListener] = []

    def get_text(self) -> Optional[str]:
        return self._text

    def set_text(self, text: Optional[str]) -> None:
        # None arrives while the owning block is being disposed.
        if text is None:
            return

        if self._change_handler is not None:
            handled = self._change_handler(text)
            if handled is not None:
                text = handled

        if text == self._text:
            return
        logger.debug(f"{type(self).__name__}: {self._text!r} -> {text!r}")
        self._text = text
        for listener in list(self._text_listeners):
            listener(text)

    def connect_text_changed(self, callback: TextListener) -> None:
        """Call callback with the new text whenever the stored text changes."""
        self._text_listeners.append(callback)

    def disconnect_text_changed(self, callback: TextListener) -> None:
        try:
            self._text_listeners.remove(callback)
        except ValueError:
            # Not connected - ignore
            pass

    def set_source_block(self, block: Any) -> None:
        """Attach the block that owns this field."""
        self._source_block = block

    @property
    def source_block(self) -> Any:
        return self._source_block

    def __repr__(self) -> str:
        return f"{type(self).__name__}(text={self._text!r})"
