# tests/conftest.py
"""
Shared ESTree builders and helpers for the namelint test-suite.

The builders produce plain dicts shaped like acorn's output with
``locations: true``.  Every builder takes an optional ``line`` so tests
can assert on where a finding was reported.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import pytest

from namelint.diagnostics import FindingCollector
from namelint.state import TraversalState
from namelint.visitors import walk_tree

Node = Dict[str, Any]


# ═══════════════════════════════════════════════════════════════════
#  Node builders
# ═══════════════════════════════════════════════════════════════════

def make_loc(line: int = 1, column: int = 0) -> Dict[str, Any]:
    return {
        "start": {"line": line, "column": column},
        "end": {"line": line, "column": column + 1},
    }


def _node(node_type: str, line: int, **fields: Any) -> Node:
    node: Node = {"type": node_type, "loc": make_loc(line)}
    node.update(fields)
    return node


def ident(name: str, line: int = 1) -> Node:
    return _node("Identifier", line, name=name)


def literal(value: Any = 1, line: int = 1) -> Node:
    return _node("Literal", line, value=value, raw=repr(value))


def program(*body: Node, comments: Optional[List[Node]] = None) -> Node:
    node = _node("Program", 1, body=list(body), sourceType="module")
    if comments is not None:
        node["comments"] = comments
    return node


def block(*body: Node, line: int = 1) -> Node:
    return _node("BlockStatement", line, body=list(body))


def expr_stmt(expression: Node, line: int = 1) -> Node:
    return _node("ExpressionStatement", line, expression=expression)


def declarator(target: Any, init: Optional[Node] = None, line: int = 1) -> Node:
    if isinstance(target, str):
        target = ident(target, line)
    return _node("VariableDeclarator", line, id=target, init=init)


def var_decl(kind: str, *declarators: Node, line: int = 1) -> Node:
    return _node("VariableDeclaration", line, declarations=list(declarators), kind=kind)


def declare(kind: str, name: str, init: Optional[Node] = None, line: int = 1) -> Node:
    """``kind name = init;`` with a single declarator."""
    if init is None:
        init = literal(1, line)
    return var_decl(kind, declarator(name, init, line), line=line)


def func_decl(name: Optional[str], params: List[Node] = (), body: List[Node] = (), line: int = 1) -> Node:
    return _node(
        "FunctionDeclaration", line,
        id=ident(name, line) if name is not None else None,
        params=list(params),
        body=block(*body, line=line),
        generator=False,
    )


def func_expr(params: List[Node] = (), body: List[Node] = (), line: int = 1) -> Node:
    return _node(
        "FunctionExpression", line,
        id=None,
        params=list(params),
        body=block(*body, line=line),
    )


def arrow(params: List[Node] = (), body: Any = None, line: int = 1) -> Node:
    if body is None:
        body = block(line=line)
    return _node(
        "ArrowFunctionExpression", line,
        id=None,
        params=list(params),
        body=body,
        expression=body.get("type") != "BlockStatement",
    )


def binary(operator: str, left: Node, right: Node, line: int = 1) -> Node:
    return _node("BinaryExpression", line, left=left, operator=operator, right=right)


def member(obj: Node, prop: Any, computed: bool = False, line: int = 1) -> Node:
    if isinstance(prop, str):
        prop = ident(prop, line)
    return _node("MemberExpression", line, object=obj, property=prop, computed=computed)


def update(argument: Node, line: int = 1) -> Node:
    return _node("UpdateExpression", line, operator="++", prefix=False, argument=argument)


def for_stmt(init=None, test=None, step=None, body: Optional[Node] = None, line: int = 1) -> Node:
    return _node(
        "ForStatement", line,
        init=init, test=test, update=step,
        body=body if body is not None else block(line=line),
    )


def new_expr(callee: Node, args: List[Node] = (), line: int = 1) -> Node:
    return _node("NewExpression", line, callee=callee, arguments=list(args))


def call(callee: Node, args: List[Node] = (), line: int = 1) -> Node:
    return _node("CallExpression", line, callee=callee, arguments=list(args), optional=False)


def class_decl(name: Optional[str], members: List[Node] = (), super_class: Optional[Node] = None,
               line: int = 1) -> Node:
    return _node(
        "ClassDeclaration", line,
        id=ident(name, line) if name is not None else None,
        superClass=super_class,
        body=_node("ClassBody", line, body=list(members)),
    )


def method_def(name: str, value: Optional[Node] = None, computed: bool = False, line: int = 1) -> Node:
    return _node(
        "MethodDefinition", line,
        static=False, computed=computed,
        key=ident(name, line), kind="method",
        value=value if value is not None else func_expr(line=line),
    )


def field_def(name: str, value: Optional[Node] = None, node_type: str = "PropertyDefinition",
              computed: bool = False, line: int = 1) -> Node:
    return _node(node_type, line, static=False, computed=computed, key=ident(name, line), value=value)


def assign_pattern(left: Node, right: Node, line: int = 1) -> Node:
    return _node("AssignmentPattern", line, left=left, right=right)


def rest(argument: Node, line: int = 1) -> Node:
    return _node("RestElement", line, argument=argument)


def array_pattern(*elements: Optional[Node], line: int = 1) -> Node:
    return _node("ArrayPattern", line, elements=list(elements))


def object_pattern(*names: str, line: int = 1) -> Node:
    props = [
        _node("Property", line, key=ident(n, line), value=ident(n, line),
              kind="init", computed=False, shorthand=True, method=False)
        for n in names
    ]
    return _node("ObjectPattern", line, properties=props)


def jsx_element(tag: str = "div", line: int = 1) -> Node:
    name = _node("JSXIdentifier", line, name=tag)
    return _node(
        "JSXElement", line,
        openingElement=_node("JSXOpeningElement", line, name=name, attributes=[], selfClosing=True),
        closingElement=None,
        children=[],
    )


def line_comment(value: str, line: int = 1) -> Node:
    return {"type": "Line", "value": value, "loc": make_loc(line)}


def block_comment(value: str, line: int = 1) -> Node:
    return {"type": "Block", "value": value, "loc": make_loc(line)}


def left_deep_sum(depth: int, leaf: Optional[Node] = None) -> Node:
    """``leaf + a + a + ...`` with ``depth`` nested BinaryExpressions."""
    node = leaf if leaf is not None else ident("a")
    for _ in range(depth):
        node = binary("+", node, ident("a"))
    return node


def nested_arrows(depth: int) -> Node:
    """``() => () => ... => value``"""
    node = ident("value")
    for _ in range(depth):
        node = arrow(body=node)
    return node


# ═══════════════════════════════════════════════════════════════════
#  Helpers
# ═══════════════════════════════════════════════════════════════════

def run_visitors(tree: Node, file: str = "test.js") -> Tuple[FindingCollector, TraversalState]:
    collector = FindingCollector(file=file)
    state = walk_tree(tree, collector)
    return collector, state


def findings(tree: Node) -> List[Tuple[str, str, str]]:
    """``(KIND, name, kind-label)`` triples in emission order."""
    collector, _ = run_visitors(tree)
    return [(d.error_id, d.finding.name, d.finding.kind) for d in collector]


def kinds(tree: Node) -> List[str]:
    return [k for k, _, _ in findings(tree)]


@pytest.fixture
def collector() -> FindingCollector:
    return FindingCollector(file="test.js")


@pytest.fixture
def state() -> TraversalState:
    return TraversalState()
