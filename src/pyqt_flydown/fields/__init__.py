"""
Editable field models.

Pure-Python field models with no Qt dependency; widgets in
``pyqt_flydown.widgets`` render them.
"""

from .text_input_field import TextInputField
from .parameter_field import ParameterField

__all__ = [
    "TextInputField",
    "ParameterField",
]
