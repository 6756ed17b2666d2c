"""namelint — naming-convention checker for JavaScript syntax trees.

namelint walks an ESTree-shaped syntax tree (as produced by acorn, espree
or esprima with locations enabled) and reports identifier naming
findings: camelCase / PascalCase / SHOUT_CASE conventions, nested
function declarations, index-based ``for`` loops over ``.length``,
``var`` declarations, and low-information names.

Submodules
----------
constants
    ESTree node-type tags and the ``DiagnosticKind`` taxonomy.
naming
    camelCase / PascalCase / SHOUT_CASE predicates.
state
    ``TraversalState``: ancestor stack, nesting depth, identifier
    registry, subtree markup flag.
walker
    Generic ESTree walker dispatching on node ``type``.
visitors
    ``NamingVisitors``, the rule set.
diagnostics
    ``Finding``, ``Diagnostic``, ``FindingCollector`` and output formats.
suppressions
    Inline / file / global suppressions.
linter
    ``Linter`` and ``LinterConfig``: per-file orchestration.
main
    CLI entry-point.

Usage
-----
Command-line::

    acorn --ecma2022 --locations app.js > app.json
    namelint app.json

Programmatic::

    from namelint.diagnostics import FindingCollector
    from namelint.visitors import walk_tree

    collector = FindingCollector(file="app.js")
    walk_tree(tree, collector)
"""

from __future__ import annotations

__version__: str = "0.1.0"
__all__: list[str] = [
    "__version__",
    "constants",
    "diagnostics",
    "linter",
    "naming",
    "state",
    "suppressions",
    "visitors",
    "walker",
]
