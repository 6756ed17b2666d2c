# namelint/walker.py
"""
Generic ESTree traversal driver.

``recursive`` walks a tree with a table of visitors keyed by node
``type``.  Every visitor receives ``(node, state, c)`` where ``c`` is the
continuation used to descend into a child; a visitor that wants its
children visited must call ``c`` on them itself.  Node types without an
entry in the table fall back to ``generic_visit``, which descends into
every child node in field order.  Runs of unhandled nodes are walked with
an explicit stack, so long binary or member chains do not grow the call
stack.

Usage::

    from namelint.walker import recursive

    def Identifier(node, state, c):
        state.append(node["name"])

    names = []
    recursive(tree, names, {"Identifier": Identifier})
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, Mapping, Optional

Node = Dict[str, Any]
Continuation = Callable[[Node, Any], None]
Visitor = Callable[[Node, Any, Continuation], None]

# Keys holding parser metadata rather than child nodes.
_NON_CHILD_KEYS = frozenset({
    "loc",
    "range",
    "comments",
    "tokens",
    "leadingComments",
    "trailingComments",
    "innerComments",
})


def is_node(value: Any) -> bool:
    return isinstance(value, dict) and isinstance(value.get("type"), str)


def child_nodes(node: Node) -> Iterator[Node]:
    """Yield the direct children of ``node`` left to right."""
    for key, value in node.items():
        if key in _NON_CHILD_KEYS:
            continue
        if is_node(value):
            yield value
        elif isinstance(value, list):
            for item in value:
                if is_node(item):
                    yield item


def generic_visit(node: Node, state: Any, c: Continuation) -> None:
    for child in child_nodes(node):
        c(child, state)


def recursive(
    root: Node,
    state: Any,
    visitors: Mapping[str, Visitor],
    base: Optional[Visitor] = None,
) -> None:
    """Walk ``root`` depth-first, dispatching on ``node["type"]``."""

    def c(node: Node, st: Any) -> None:
        visitor = visitors.get(node["type"])
        if visitor is not None:
            visitor(node, st, c)
        elif base is not None:
            base(node, st, c)
        else:
            _descend(node, st)

    def _descend(node: Node, st: Any) -> None:
        # Same order as generic_visit, without one Python frame per level.
        pending = list(child_nodes(node))
        pending.reverse()
        while pending:
            current = pending.pop()
            visitor = visitors.get(current["type"])
            if visitor is not None:
                visitor(current, st, c)
            else:
                children = list(child_nodes(current))
                children.reverse()
                pending.extend(children)

    c(root, state)
