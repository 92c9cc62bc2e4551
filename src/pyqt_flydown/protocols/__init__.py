"""
Field, block and scope protocol definitions plus configuration.

ABC-based contracts for the editor collaborators this package consumes
(blocks, lexical scopes) and for the editable-field capability set.
"""

from .field_protocols import (
    TextGettable,
    TextSettable,
    CSSStyled,
    EditableField,
    VariableScope,
    ParameterBlock,
)
from .flydown_config import (
    DisplayLocation,
    FlydownConfig,
    set_flydown_config,
    get_flydown_config,
)

__all__ = [
    "TextGettable",
    "TextSettable",
    "CSSStyled",
    "EditableField",
    "VariableScope",
    "ParameterBlock",
    "DisplayLocation",
    "FlydownConfig",
    "set_flydown_config",
    "get_flydown_config",
]
