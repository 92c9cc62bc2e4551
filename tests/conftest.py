"""pytest configuration and fixtures for pyqt-flydown tests."""

import os

import pytest
from PyQt6.QtWidgets import QApplication

from pyqt_flydown.protocols import ParameterBlock, VariableScope

# Widget tests run without a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


class NamedScope(VariableScope):
    def __init__(self, name):
        self.name = name

    def get_name(self):
        return self.name


class ProcedureBlock(ParameterBlock):
    """Minimal parameter-declaring block."""

    def __init__(self, params=("x",), scope=None, collapsed=False, horizontal=True):
        self.params = list(params)
        self.scope = scope
        self.collapsed = collapsed
        self.horizontal_parameters = horizontal

    def get_variable_scope(self):
        return self.scope

    def get_parameters(self):
        return self.params

    def set_parameter_orientation(self, horizontal):
        self.horizontal_parameters = horizontal

    def is_collapsed(self):
        return self.collapsed

