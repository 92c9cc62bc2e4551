"""Tests for the horizontal/vertical parameter context-menu option."""

from conftest import ProcedureBlock


def _labels(options):
    return [option.text for option in options]


def _options(*labels):
    from pyqt_flydown.services import MenuOption

    return [MenuOption(label) for label in labels]


def test_inserts_before_collapse():
    """[A, Collapse Block, B] gains the toggle just before Collapse Block."""
    from pyqt_flydown.services import add_horizontal_vertical_option

    options = _options("A", "Collapse Block", "B")
    add_horizontal_vertical_option(ProcedureBlock(), options)

    assert _labels(options) == ["A", "Arrange Parameters Vertically", "Collapse Block", "B"]


def test_label_offers_the_other_orientation():
    from pyqt_flydown.services import add_horizontal_vertical_option

    options = _options("Collapse Block")
    add_horizontal_vertical_option(ProcedureBlock(horizontal=False), options)

    assert options[0].text == "Arrange Parameters Horizontally"


def test_callback_flips_orientation():
    from pyqt_flydown.services import add_horizontal_vertical_option

    block = ProcedureBlock(horizontal=True)
    options = _options("Collapse Block")
    add_horizontal_vertical_option(block, options)

    options[0].callback()
    assert block.horizontal_parameters is False
    options[0].callback()
    assert block.horizontal_parameters is True


def test_removes_one_inline_inputs_option():
    """Exactly one Inline Inputs entry is removed wherever it sits."""
    from pyqt_flydown.services import add_horizontal_vertical_option

    options = _options("Inline Inputs", "A", "Collapse Block", "Inline Inputs")
    add_horizontal_vertical_option(ProcedureBlock(), options)

    assert _labels(options) == [
        "A", "Arrange Parameters Vertically", "Collapse Block", "Inline Inputs",
    ]


def test_inserts_before_first_collapse_only():
    from pyqt_flydown.services import add_horizontal_vertical_option

    options = _options("Collapse Block", "Collapse Block")
    add_horizontal_vertical_option(ProcedureBlock(), options)

    assert _labels(options) == ["Arrange Parameters Vertically", "Collapse Block", "Collapse Block"]


def test_missing_collapse_skips_insert_but_still_removes_inline():
    from pyqt_flydown.services import add_horizontal_vertical_option

    options = _options("A", "Inline Inputs")
    add_horizontal_vertical_option(ProcedureBlock(), options)

    assert _labels(options) == ["A"]


def test_zero_parameters_unchanged():
    from pyqt_flydown.services import add_horizontal_vertical_option

    options = _options("A", "Inline Inputs", "Collapse Block")
    before = list(options)
    add_horizontal_vertical_option(ProcedureBlock(params=()), options)

    assert options == before


def test_block_without_parameters_api_unchanged():
    """Blocks that are not ParameterBlocks count as having no parameters."""
    from pyqt_flydown.services import add_horizontal_vertical_option, parameter_count

    options = _options("Collapse Block")
    add_horizontal_vertical_option(object(), options)

    assert parameter_count(object()) == 0
    assert _labels(options) == ["Collapse Block"]


def test_collapsed_block_unchanged():
    from pyqt_flydown.services import add_horizontal_vertical_option

    options = _options("Expand Block", "Inline Inputs")
    add_horizontal_vertical_option(ProcedureBlock(collapsed=True), options)

    assert _labels(options) == ["Expand Block", "Inline Inputs"]


def test_collapse_disabled_unchanged():
    from pyqt_flydown.protocols import FlydownConfig
    from pyqt_flydown.services import add_horizontal_vertical_option

    options = _options("Collapse Block", "Inline Inputs")
    add_horizontal_vertical_option(ProcedureBlock(), options, FlydownConfig(collapse_enabled=False))

    assert _labels(options) == ["Collapse Block", "Inline Inputs"]


def test_localized_labels():
    from pyqt_flydown.protocols import FlydownConfig
    from pyqt_flydown.services import add_horizontal_vertical_option

    config = FlydownConfig(
        collapse_block_label="Bloque contraído",
        inline_inputs_label="Entradas en línea",
        vertical_parameters_label="Parámetros verticales",
    )
    options = _options("Entradas en línea", "Bloque contraído")
    add_horizontal_vertical_option(ProcedureBlock(), options, config)

    assert _labels(options) == ["Parámetros verticales", "Bloque contraído"]
