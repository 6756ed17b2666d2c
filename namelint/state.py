# namelint/state.py
"""
Per-walk traversal state shared by every visitor.

The tree carries no parent pointers, so the visitors keep an explicit
ancestor stack instead.  Each stack entry is a ``Frame``: the node being
visited plus flags accumulated from its subtree.  ``pop_node`` hands the
popped frame's flags back to the caller and folds them into the new
innermost frame, so an enclosing construct sees markup anywhere below it
while sibling subtrees stay independent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from namelint.errors import AncestorStackError

logger = logging.getLogger(__name__)

Node = Dict[str, Any]


@dataclass
class SubtreeFlags:
    """Facts discovered while walking a frame's subtree."""
    jsx_detected: bool = False


@dataclass
class Frame:
    node: Node
    flags: SubtreeFlags = field(default_factory=SubtreeFlags)


class TraversalState:
    """Mutable context for a single tree walk.  Never share between walks."""

    def __init__(self) -> None:
        self.node_stack: List[Frame] = []
        self.nesting_depth: int = 0
        self.identifiers: Set[str] = set()

    # ── ancestor stack ───────────────────────────────────────────────

    def push_node(self, node: Node) -> None:
        self.node_stack.append(Frame(node))

    def pop_node(self) -> SubtreeFlags:
        """Pop the innermost frame and return its subtree flags.

        Raises ``AncestorStackError`` when the stack is empty; the walk
        cannot continue with an unbalanced stack.
        """
        if not self.node_stack:
            raise AncestorStackError("pop_node() called on an empty ancestor stack")
        frame = self.node_stack.pop()
        if self.node_stack and frame.flags.jsx_detected:
            self.node_stack[-1].flags.jsx_detected = True
        return frame.flags

    def find_node(self, node_type: str) -> Optional[Node]:
        """Nearest enclosing node of ``node_type``, innermost first."""
        for frame in reversed(self.node_stack):
            if frame.node.get("type") == node_type:
                return frame.node
        return None

    @property
    def depth(self) -> int:
        return len(self.node_stack)

    # ── subtree flags ────────────────────────────────────────────────

    def mark_jsx(self) -> None:
        """Record that markup occurs inside the innermost frame."""
        if self.node_stack:
            self.node_stack[-1].flags.jsx_detected = True
        else:
            logger.debug("JSX outside any tracked construct")

    # ── registry ─────────────────────────────────────────────────────

    def add_identifier(self, name: str) -> None:
        self.identifiers.add(name)
