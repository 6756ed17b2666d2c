# tests/test_state.py
"""
Tests for TraversalState: ancestor stack, subtree flags, registry.
"""

import pytest

from namelint.errors import AncestorStackError, NamelintError
from namelint.state import TraversalState


def _n(node_type, **fields):
    return dict(type=node_type, **fields)


class TestAncestorStack:

    def test_push_pop_balanced(self, state):
        state.push_node(_n("ForStatement"))
        state.push_node(_n("VariableDeclaration"))
        assert state.depth == 2
        state.pop_node()
        state.pop_node()
        assert state.depth == 0

    def test_pop_empty_raises(self, state):
        with pytest.raises(AncestorStackError):
            state.pop_node()

    def test_stack_error_is_namelint_error(self, state):
        with pytest.raises(NamelintError):
            state.pop_node()

    def test_find_node_innermost_first(self, state):
        outer = _n("VariableDeclaration", kind="var")
        inner = _n("VariableDeclaration", kind="const")
        state.push_node(outer)
        state.push_node(_n("ArrowFunctionExpression"))
        state.push_node(inner)
        assert state.find_node("VariableDeclaration") is inner

    def test_find_node_missing(self, state):
        state.push_node(_n("VariableDeclaration"))
        assert state.find_node("ForStatement") is None

    def test_find_node_after_pop(self, state):
        state.push_node(_n("ForStatement"))
        state.pop_node()
        assert state.find_node("ForStatement") is None


class TestSubtreeFlags:

    def test_fresh_frame_has_no_jsx(self, state):
        state.push_node(_n("VariableDeclarator"))
        assert state.pop_node().jsx_detected is False

    def test_mark_jsx_reported_by_pop(self, state):
        state.push_node(_n("VariableDeclarator"))
        state.mark_jsx()
        assert state.pop_node().jsx_detected is True

    def test_jsx_propagates_to_parent(self, state):
        state.push_node(_n("VariableDeclarator"))
        state.push_node(_n("ArrowFunctionExpression"))
        state.mark_jsx()
        assert state.pop_node().jsx_detected is True
        assert state.pop_node().jsx_detected is True

    def test_jsx_does_not_leak_to_sibling(self, state):
        state.push_node(_n("Program"))
        state.push_node(_n("VariableDeclarator", name="first"))
        state.mark_jsx()
        state.pop_node()
        state.push_node(_n("VariableDeclarator", name="second"))
        assert state.pop_node().jsx_detected is False

    def test_mark_jsx_on_empty_stack_is_harmless(self, state):
        state.mark_jsx()
        assert state.depth == 0


class TestRegistry:

    def test_add_identifier(self, state):
        state.add_identifier("count")
        state.add_identifier("count")
        state.add_identifier("total")
        assert state.identifiers == {"count", "total"}

    def test_independent_states(self):
        first = TraversalState()
        second = TraversalState()
        first.add_identifier("only")
        first.nesting_depth += 1
        assert second.identifiers == set()
        assert second.nesting_depth == 0
