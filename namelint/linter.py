# namelint/linter.py
"""
Per-file orchestration.

``Linter`` loads an ESTree document, walks it with a fresh
``TraversalState`` and the naming visitors, then drops suppressed and
disabled findings.  Each file is analysed independently; nothing carries
over from one file to the next.

Programmatic::

    from namelint.linter import Linter, LinterConfig

    linter = Linter(LinterConfig(disabled_kinds=frozenset({"UNEXPECTED_VAR"})))
    result = linter.lint_file("app.json")
    for diag in result.diagnostics:
        print(diag.to_gcc_format())
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, List, Optional, Set, Union

from namelint.constants import ALL_KINDS, DiagnosticKind
from namelint.diagnostics import Diagnostic, FindingCollector
from namelint.errors import TraversalDepthError, TreeLoadError
from namelint.state import Node, TraversalState
from namelint.suppressions import SuppressionManager
from namelint.visitors import walk_tree

logger = logging.getLogger(__name__)


@dataclass
class LinterConfig:
    """Knobs for a lint run."""
    disabled_kinds: FrozenSet[str] = frozenset()
    inline_suppressions: bool = True

    def validate(self) -> List[str]:
        """Return a list of validation warnings (empty if valid)."""
        warnings: List[str] = []
        for kind in sorted(self.disabled_kinds):
            if kind == ALL_KINDS:
                continue
            try:
                DiagnosticKind.parse(kind)
            except ValueError as exc:
                warnings.append(str(exc))
        return warnings


@dataclass
class LintResult:
    """Outcome of linting one tree."""
    file: str
    diagnostics: List[Diagnostic] = field(default_factory=list)
    suppressed: int = 0
    identifiers: Set[str] = field(default_factory=set)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)

    def __len__(self) -> int:
        return len(self.diagnostics)

    def by_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.kind is kind]


def load_tree(path: Union[str, Path]) -> Node:
    """Read an ESTree JSON document from ``path``."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TreeLoadError(f"cannot read file: {exc.strerror}", path=str(path), cause=exc) from exc
    try:
        tree = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TreeLoadError(f"invalid JSON: {exc}", path=str(path), cause=exc) from exc
    if not isinstance(tree, dict) or not isinstance(tree.get("type"), str):
        raise TreeLoadError("document is not an ESTree node", path=str(path))
    return tree


class Linter:
    """Runs the naming visitors over trees and filters the findings."""

    def __init__(self, config: Optional[LinterConfig] = None) -> None:
        self.config = config or LinterConfig()
        for warning in self.config.validate():
            logger.warning("config: %s", warning)

    def _suppressions(self, tree: Node, file: str) -> SuppressionManager:
        manager = SuppressionManager()
        for kind in self.config.disabled_kinds:
            if kind == ALL_KINDS:
                manager.add_global_suppression(kind)
            else:
                try:
                    manager.add_global_suppression(DiagnosticKind.parse(kind).value)
                except ValueError:
                    continue
        if self.config.inline_suppressions:
            manager.load_inline_suppressions(tree.get("comments") or [], file)
        return manager

    def lint_tree(self, tree: Node, file: str = "") -> LintResult:
        collector = FindingCollector(file=file)
        try:
            state = walk_tree(tree, collector, TraversalState())
        except RecursionError as exc:
            raise TraversalDepthError(
                "tree nests too deeply to walk", cause=exc
            ) from exc

        manager = self._suppressions(tree, file)
        kept = manager.filter_diagnostics(collector.diagnostics)
        result = LintResult(
            file=file,
            diagnostics=kept,
            suppressed=len(collector) - len(kept),
            identifiers=set(state.identifiers),
        )
        logger.info(
            "%s: %d finding(s), %d suppressed, %d identifier(s)",
            file or "<tree>", len(result), result.suppressed, len(result.identifiers),
        )
        return result

    def lint_file(self, path: Union[str, Path]) -> LintResult:
        logger.info("Linting %s", path)
        return self.lint_tree(load_tree(path), file=str(path))

    def lint_files(self, paths: Iterable[Union[str, Path]]) -> Iterator[LintResult]:
        for path in paths:
            yield self.lint_file(path)
