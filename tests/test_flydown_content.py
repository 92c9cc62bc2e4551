"""Tests for flydown name composition and getter/setter descriptors."""

from conftest import NamedScope


def test_scoped_name():
    from pyqt_flydown.services import compose_variable_name

    assert compose_variable_name("x", NamedScope("foo")) == "x@@foo::x"


def test_global_name():
    from pyqt_flydown.services import compose_variable_name

    assert compose_variable_name("x", None) == "x"


def test_flydown_blocks_pair():
    """Both blocks carry the same scoped name."""
    from pyqt_flydown.services import flydown_blocks, GETTER_BLOCK_TYPE, SETTER_BLOCK_TYPE

    pair = flydown_blocks("count", NamedScope("loop"))

    assert pair.getter.type == GETTER_BLOCK_TYPE == "lexical_variable_get"
    assert pair.setter.type == SETTER_BLOCK_TYPE == "lexical_variable_set"
    assert pair.getter.var == pair.setter.var == "count@@loop::count"
    assert list(pair) == [pair.getter, pair.setter]


def test_flydown_xml():
    """The XML lists the getter then the setter with a VAR title."""
    from pyqt_flydown.services import flydown_blocks

    xml = flydown_blocks("x", None).to_xml()

    assert xml == (
        '<xml>'
        '<block type="lexical_variable_get"><title name="VAR">x</title></block>'
        '<block type="lexical_variable_set"><title name="VAR">x</title></block>'
        '</xml>'
    )


def test_flydown_xml_escapes_names():
    from pyqt_flydown.services import flydown_blocks

    assert "a&lt;b" in flydown_blocks("a<b", None).to_xml()
