# namelint/suppressions.py
"""
Diagnostic suppressions.

Sources:
  1. Inline comments, read from the ``comments`` array that espree and
     esprima attach to the ``Program`` node::

         // namelint-suppress NUMERIC_SUFFIX
         const h7 = 1;
         let x = 2; // namelint-suppress SINGLE_LETTER_NAME_X, UNEXPECTED_VAR
         /* namelint-suppress-file UNEXPECTED_VAR -- legacy module */

     A line directive covers its own line and the line below it.  A
     directive without kinds, or with ``*``, covers every kind.
  2. File-level suppressions (passed programmatically).
  3. Global suppressions (command-line).

Directives are parsed with a parsimonious PEG grammar; a malformed one is
logged and ignored.

Usage
-----
>>> sm = SuppressionManager()
>>> sm.load_inline_suppressions(tree.get("comments", []), "app.js")
>>> sm.add_global_suppression("UNEXPECTED_VAR")
>>> kept = sm.filter_diagnostics(collector.diagnostics)
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from fnmatch import fnmatch
from typing import Any, Dict, Iterable, List, Mapping, Set, Tuple

from parsimonious.exceptions import ParseError
from parsimonious.grammar import Grammar
from parsimonious.nodes import NodeVisitor

from namelint.constants import ALL_KINDS, DiagnosticKind
from namelint.diagnostics import Diagnostic
from namelint.errors import SuppressionSyntaxError

logger = logging.getLogger(__name__)

DIRECTIVE_MARKER = "namelint-suppress"

DIRECTIVE_GRAMMAR = Grammar(r'''
    directive = _ marker scope? kinds? _ reason? _
    marker    = "namelint-suppress"
    scope     = "-file"
    kinds     = __ kind (_ "," _ kind)*
    kind      = "*" / ~r"[A-Za-z][A-Za-z0-9_]*"
    reason    = "--" ~r"[\s\S]*"
    _         = ~r"\s*"
    __        = ~r"\s+"
''')


@dataclass
class Directive:
    """A parsed ``namelint-suppress`` comment."""
    kinds: List[str] = field(default_factory=list)
    file_scope: bool = False
    reason: str = ""


class _DirectiveBuilder(NodeVisitor):
    """Collects the pieces of a directive while walking the parse tree."""

    def __init__(self) -> None:
        self.directive = Directive()

    def generic_visit(self, node, visited_children):
        return None

    def visit_scope(self, node, visited_children):
        self.directive.file_scope = True

    def visit_kind(self, node, visited_children):
        self.directive.kinds.append(node.text)

    def visit_reason(self, node, visited_children):
        self.directive.reason = node.text[2:].strip()


def is_directive(text: str) -> bool:
    return text.strip().startswith(DIRECTIVE_MARKER)


def parse_directive(text: str, line: int = 0) -> Directive:
    """Parse the body of a comment holding a suppression directive.

    Raises ``SuppressionSyntaxError`` on malformed text or unknown kinds.
    """
    try:
        tree = DIRECTIVE_GRAMMAR.parse(text)
    except ParseError as exc:
        raise SuppressionSyntaxError(
            "malformed suppression directive", text=text, line=line, cause=exc
        ) from exc

    builder = _DirectiveBuilder()
    builder.visit(tree)
    directive = builder.directive

    normalized: List[str] = []
    for kind in directive.kinds:
        if kind == ALL_KINDS:
            normalized.append(ALL_KINDS)
            continue
        try:
            normalized.append(DiagnosticKind.parse(kind).value)
        except ValueError as exc:
            raise SuppressionSyntaxError(
                f"unknown diagnostic kind {kind!r}", text=text, line=line, cause=exc
            ) from exc
    directive.kinds = normalized or [ALL_KINDS]
    return directive


class SuppressionManager:
    """Decides which diagnostics are dropped before reporting."""

    def __init__(self) -> None:
        # (file, line) -> kinds suppressed at that line
        self._inline: Dict[Tuple[str, int], Set[str]] = defaultdict(set)
        # file pattern -> kinds
        self._file_level: Dict[str, Set[str]] = defaultdict(set)
        self._global: Set[str] = set()

    def load_inline_suppressions(
        self, comments: Iterable[Mapping[str, Any]], file: str = ""
    ) -> int:
        """Register every directive found in ``comments``.

        Returns the number of directives accepted.
        """
        accepted = 0
        for comment in comments:
            text = comment.get("value", "")
            if not is_directive(text):
                continue
            loc = comment.get("loc") or {}
            line = int((loc.get("end") or loc.get("start") or {}).get("line", 0))
            try:
                directive = parse_directive(text, line)
            except SuppressionSyntaxError as exc:
                logger.warning("%s: ignoring suppression: %s", file or "<tree>", exc)
                continue
            if directive.file_scope:
                self._file_level[file].update(directive.kinds)
            else:
                self._inline[(file, line)].update(directive.kinds)
            accepted += 1
        logger.debug("%s: %d suppression directive(s)", file or "<tree>", accepted)
        return accepted

    def add_file_suppression(self, kind: str, file_pattern: str) -> None:
        """Suppress ``kind`` in files matching ``file_pattern``."""
        self._file_level[file_pattern].add(kind)

    def add_global_suppression(self, kind: str) -> None:
        self._global.add(kind)

    def is_suppressed(self, diag: Diagnostic) -> bool:
        kind = diag.error_id

        if kind in self._global or ALL_KINDS in self._global:
            return True

        loc = diag.location

        # Same line, or a directive on the line above.
        for line_offset in (0, 1):
            kinds = self._inline.get((loc.file, loc.line - line_offset), set())
            if kind in kinds or ALL_KINDS in kinds:
                return True

        for pattern, kinds in self._file_level.items():
            if kind in kinds or ALL_KINDS in kinds:
                if pattern == loc.file or fnmatch(loc.file, pattern):
                    return True

        return False

    def filter_diagnostics(self, diagnostics: Iterable[Diagnostic]) -> List[Diagnostic]:
        """Return only non-suppressed diagnostics."""
        return [d for d in diagnostics if not self.is_suppressed(d)]
