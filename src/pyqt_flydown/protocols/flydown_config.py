"""Base configuration for parameter flydowns.

Provides hooks for applications to supply UI flags and localized labels.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DisplayLocation(Enum):
    """Where a flydown opens relative to its field."""
    BELOW = "BELOW"
    RIGHT = "RIGHT"


@dataclass
class FlydownConfig:
    """Base configuration for flydown and context-menu behavior.

    Applications can subclass this or pass localized labels.

    Attributes:
        collapse_enabled: Whether the editor offers block collapsing
        collapse_block_label: Label of the "collapse block" context-menu option
        inline_inputs_label: Label of the "inline inputs" context-menu option
        horizontal_parameters_label: Label offering horizontal parameter layout
        vertical_parameters_label: Label offering vertical parameter layout
        display_location: Default flydown placement for new fields
    """

    collapse_enabled: bool = True
    collapse_block_label: str = "Collapse Block"
    inline_inputs_label: str = "Inline Inputs"
    horizontal_parameters_label: str = "Arrange Parameters Horizontally"
    vertical_parameters_label: str = "Arrange Parameters Vertically"
    display_location: DisplayLocation = DisplayLocation.BELOW


# Global config instance (set by application)
_flydown_config: Optional[FlydownConfig] = None


def set_flydown_config(config: Optional[FlydownConfig]) -> None:
    """Set the global flydown configuration.

    Args:
        config: FlydownConfig instance, or None to fall back to defaults
    """
    global _flydown_config
    _flydown_config = config


def get_flydown_config() -> FlydownConfig:
    """Get the current flydown configuration.

    Returns:
        Current FlydownConfig or default if not set
    """
    if _flydown_config is None:
        return FlydownConfig()
    return _flydown_config
