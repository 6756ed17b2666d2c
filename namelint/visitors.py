# namelint/visitors.py
"""
namelint/visitors.py
====================

The naming-rule visitors.

``NamingVisitors`` holds one handler per ESTree node type.  Each handler
descends into its children through the continuation supplied by the
walker, keeps the ``TraversalState`` up to date, and reports findings to
the diagnostic sink.  Several rules depend on context only the walk
knows: whether a name sits in a ``for`` header or an arrow function,
which declaration kind owns a declarator, whether markup appeared below
a binding, and how deeply function bodies are nested.

Handlers are registered with ``@visiting(...)`` and collected by
``NamingVisitors.table()``; the resulting mapping is what
``namelint.walker.recursive`` dispatches on.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, List, Optional, Sequence

from namelint.constants import FUNCTION_NODE_TYPES, DiagnosticKind, NodeType as T
from namelint.diagnostics import DiagnosticSink, Finding
from namelint.naming import is_camel_case, is_pascal_case, is_shout_case
from namelint.state import Node, TraversalState
from namelint.walker import Continuation, Visitor, generic_visit, recursive

__all__ = [
    "NamingVisitors",
    "visiting",
    "walk_tree",
]

logger = logging.getLogger(__name__)

NOISE_AFFIXES = [re.compile(r"\wArray$"), re.compile(r"\wObject$"), re.compile(r"^the")]
_NUMERIC_SUFFIX_RE = re.compile(r"\d+$")
_HEADING_RE = re.compile(r"^h[1-6]$")


def visiting(*node_types: str) -> Callable:
    """Decorator to register a method as handling specific node types.

    Usage:
        class MyVisitors(NamingVisitors):
            @visiting("WhileStatement", "DoWhileStatement")
            def visit_loop(self, node, state, c):
                ...
    """
    def decorator(method: Callable) -> Callable:
        method._visiting_types = node_types
        return method
    return decorator


class NamingVisitors:
    """Visitor set reporting naming and structural findings to ``sink``."""

    def __init__(self, sink: DiagnosticSink) -> None:
        self.sink = sink

    def table(self) -> Dict[str, Visitor]:
        """Map every registered node type to its bound handler."""
        table: Dict[str, Visitor] = {}
        for attr in dir(type(self)):
            method = getattr(self, attr)
            for node_type in getattr(method, "_visiting_types", ()):
                table[node_type] = method
        return table

    def report(self, loc: Any, message: DiagnosticKind, name: str, kind: str) -> None:
        logger.debug("%s %s (%s)", message.value, name, kind)
        self.sink.log(loc, Finding(message=message, name=name, kind=kind))

    # ── heuristics ───────────────────────────────────────────────────

    def check_poor_name(self, name: str, kind: str, loc: Any, state: TraversalState) -> None:
        """Report at most one low-information-name finding.

        The checks form a decision list; the first that matches wins.
        """
        if any(regexp.search(name) for regexp in NOISE_AFFIXES):
            self.report(loc, DiagnosticKind.NOISE_WORD_AFFIX, name, kind)
        elif _NUMERIC_SUFFIX_RE.search(name) and not _HEADING_RE.match(name):
            self.report(loc, DiagnosticKind.NUMERIC_SUFFIX, name, kind)
        elif name == "l":
            self.report(loc, DiagnosticKind.SINGLE_LETTER_NAME_L, name, kind)
        elif name == "x":
            self.report(loc, DiagnosticKind.SINGLE_LETTER_NAME_X, name, kind)
        elif (
            len(name) == 1
            and state.find_node(T.FOR_STATEMENT) is None
            and state.find_node(T.ARROW_FUNCTION_EXPRESSION) is None
        ):
            self.report(loc, DiagnosticKind.SINGLE_LETTER_NAME, name, kind)

    # ── declarations ─────────────────────────────────────────────────

    @visiting(T.VARIABLE_DECLARATION)
    def visit_variable_declaration(self, node: Node, state: TraversalState, c: Continuation) -> None:
        state.push_node(node)
        for decl in node["declarations"]:
            c(decl, state)
        state.pop_node()

    @visiting(T.VARIABLE_DECLARATOR)
    def visit_variable_declarator(self, node: Node, state: TraversalState, c: Continuation) -> None:
        ident = node["id"]
        init = node.get("init")
        loc = node.get("loc")

        state.push_node(node)
        c(ident, state)
        if init:
            c(init, state)
        flags = state.pop_node()

        # Destructuring: the bound leaves are not checked here.
        if ident["type"] != T.IDENTIFIER:
            return

        declaration = state.find_node(T.VARIABLE_DECLARATION)
        kind = declaration.get("kind", "") if declaration is not None else ""
        name = ident["name"]
        state.add_identifier(name)

        self.check_poor_name(name, kind, loc, state)

        if kind == "var":
            self.report(loc, DiagnosticKind.UNEXPECTED_VAR, name, kind)

        # Bare bindings (`let Foo;`, `for (const K of xs)`) skip the case rules.
        if not init:
            return

        if init["type"] in FUNCTION_NODE_TYPES:
            if not is_camel_case(name) and not flags.jsx_detected:
                self.report(loc, DiagnosticKind.EXPECTED_CAMEL_CASE, name, kind)
        elif is_shout_case(name):
            if kind != "const":
                self.report(loc, DiagnosticKind.CONST_SHOUT_CASE, name, kind)
        elif not is_camel_case(name):
            self.report(loc, DiagnosticKind.EXPECTED_CAMEL_CASE, name, kind)

    # ── parameters ───────────────────────────────────────────────────

    def handle_parameter(
        self,
        node: Node,
        state: TraversalState,
        c: Continuation,
        recurse: bool = True,
    ) -> None:
        if recurse:
            c(node, state)
        if node.get("type") != T.IDENTIFIER:
            return
        name = node["name"]
        loc = node.get("loc")
        state.add_identifier(name)
        self.check_poor_name(name, "param", loc, state)
        if not is_camel_case(name):
            self.report(loc, DiagnosticKind.EXPECTED_CAMEL_CASE, name, "param")

    def parse_function_params(
        self,
        params: Sequence[Node],
        state: TraversalState,
        c: Continuation,
        recurse: bool = True,
    ) -> None:
        """Check the identifiers each parameter binds.

        With ``recurse=False`` only the names are checked; the caller has
        already walked the parameter subtrees.
        """
        for param in params:
            param_type = param["type"]
            if param_type == T.ASSIGNMENT_PATTERN:
                self.handle_parameter(param["left"], state, c, recurse)
                if recurse:
                    c(param["right"], state)
            elif param_type == T.REST_ELEMENT:
                self.handle_parameter(param["argument"], state, c, recurse)
            elif param_type == T.ARRAY_PATTERN:
                for element in param["elements"]:
                    if element is not None:
                        self.handle_parameter(element, state, c, recurse)
            else:
                self.handle_parameter(param, state, c, recurse)

    # ── functions ────────────────────────────────────────────────────

    @visiting(T.FUNCTION_DECLARATION)
    def visit_function_declaration(self, node: Node, state: TraversalState, c: Continuation) -> None:
        ident = node.get("id")
        params: List[Node] = node["params"]
        loc = node.get("loc")
        # Registered up front so recursive references see it.
        name: Optional[str] = ident["name"] if ident else None
        if name is not None:
            state.add_identifier(name)

        state.push_node(node)
        state.nesting_depth += 1
        if ident:
            c(ident, state)
        for param in params:
            c(param, state)
        c(node["body"], state)
        state.nesting_depth -= 1
        flags = state.pop_node()

        self.parse_function_params(params, state, c, recurse=False)

        # export default function () {}
        if name is None:
            return

        if not is_camel_case(name) and not flags.jsx_detected:
            self.report(loc, DiagnosticKind.EXPECTED_CAMEL_CASE, name, "function")

        if state.nesting_depth > 0:
            self.report(loc, DiagnosticKind.NESTED_FUNC_DECLARATION, name, "function")

    @visiting(T.FUNCTION_EXPRESSION, T.ARROW_FUNCTION_EXPRESSION)
    def visit_function_expression(self, node: Node, state: TraversalState, c: Continuation) -> None:
        state.push_node(node)
        ident = node.get("id")
        if ident:
            c(ident, state)
        self.parse_function_params(node["params"], state, c)
        c(node["body"], state)
        state.pop_node()

    # ── control flow ─────────────────────────────────────────────────

    @visiting(T.FOR_STATEMENT)
    def visit_for_statement(self, node: Node, state: TraversalState, c: Continuation) -> None:
        init = node.get("init")
        test = node.get("test")
        update = node.get("update")

        state.push_node(node)
        if init:
            c(init, state)
        if test:
            c(test, state)
        if update:
            c(update, state)
        state.pop_node()

        right = test.get("right") if test else None
        if right and right.get("type") == T.MEMBER_EXPRESSION and not right.get("computed"):
            prop = right["property"]
            if prop.get("type") == T.IDENTIFIER and prop.get("name") == "length":
                obj_name = right["object"].get("name") or "-"
                self.report(node.get("loc"), DiagnosticKind.INDEXED_FOR_LOOP, obj_name, "array")

        # The body is outside the loop header, so it gets no exemption.
        body = node.get("body")
        if body:
            c(body, state)

    # ── construction ─────────────────────────────────────────────────

    @visiting(T.NEW_EXPRESSION)
    def visit_new_expression(self, node: Node, state: TraversalState, c: Continuation) -> None:
        callee = node["callee"]
        c(callee, state)
        for arg in node.get("arguments", []):
            c(arg, state)

        if callee["type"] == T.IDENTIFIER and not is_pascal_case(callee["name"]):
            self.report(node.get("loc"), DiagnosticKind.EXPECTED_PASCAL_CASE, callee["name"], "new")

    @visiting(T.CLASS_DECLARATION)
    def visit_class_declaration(self, node: Node, state: TraversalState, c: Continuation) -> None:
        c(node["body"], state)
        super_class = node.get("superClass")
        if super_class:
            c(super_class, state)

        ident = node.get("id")
        if not ident:
            return
        name = ident["name"]
        state.add_identifier(name)
        if not is_pascal_case(name):
            self.report(node.get("loc"), DiagnosticKind.EXPECTED_PASCAL_CASE, name, "class")

    @visiting(T.METHOD_DEFINITION)
    def visit_method_definition(self, node: Node, state: TraversalState, c: Continuation) -> None:
        self._check_class_member(node, state, c, "method")

    # Class field
    @visiting(T.FIELD_DEFINITION, T.PROPERTY_DEFINITION)
    def visit_field_definition(self, node: Node, state: TraversalState, c: Continuation) -> None:
        self._check_class_member(node, state, c, "field")

    def _check_class_member(self, node: Node, state: TraversalState, c: Continuation, kind: str) -> None:
        key = node["key"]
        value = node.get("value")
        c(key, state)
        if value:
            c(value, state)

        # obj[expr] keys name nothing
        if key["type"] != T.IDENTIFIER or node.get("computed"):
            return
        name = key["name"]
        state.add_identifier(name)
        if not is_camel_case(name):
            self.report(node.get("loc"), DiagnosticKind.EXPECTED_CAMEL_CASE, name, kind)

    # ── markup ───────────────────────────────────────────────────────

    @visiting(T.JSX_ELEMENT, T.JSX_FRAGMENT)
    def visit_jsx(self, node: Node, state: TraversalState, c: Continuation) -> None:
        state.mark_jsx()
        generic_visit(node, state, c)


def walk_tree(
    tree: Node,
    sink: DiagnosticSink,
    state: Optional[TraversalState] = None,
) -> TraversalState:
    """Run the naming visitors over ``tree``; returns the final state."""
    if state is None:
        state = TraversalState()
    recursive(tree, state, NamingVisitors(sink).table())
    return state
