#!/usr/bin/env python3
"""namelint/main.py — CLI entry-point for namelint.

Usage examples
--------------
    # Produce a tree with acorn, then lint it
    acorn --ecma2022 --locations app.js > app.json
    namelint app.json

    # GCC-style output, ignoring 'var' findings
    namelint --format gcc --disable UNEXPECTED_VAR src/*.json

    # Machine-readable output to a file
    namelint -f json -o findings.jsonl app.json

    # List the diagnostic kinds
    namelint --list-kinds

Exit codes
----------
    0   No findings.
    1   One or more findings were reported.
    2   Infrastructure failure (missing file, invalid JSON, ...).

The module doubles as ``python -m namelint`` via the companion
``namelint/__main__.py`` which simply calls :func:`main`.
"""

from __future__ import annotations

import argparse
import logging
import sys
import textwrap
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from namelint import __version__
from namelint.constants import DiagnosticKind
from namelint.diagnostics import FORMATS, format_diagnostic
from namelint.errors import NamelintError, TreeLoadError
from namelint.linter import Linter, LinterConfig, LintResult

_log = logging.getLogger("namelint")

# Exit codes ----------------------------------------------------------------

EXIT_OK: int = 0
EXIT_FINDINGS: int = 1
EXIT_INFRA: int = 2


# ===========================================================================
# Utility helpers
# ===========================================================================

def _configure_logging(verbosity: int) -> None:
    """Set up the ``namelint`` logger.

    Parameters
    ----------
    verbosity:
        0 → WARNING, 1 → INFO, 2+ → DEBUG.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    root = logging.getLogger("namelint")
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        root.addHandler(handler)


def _open_output(dest: Optional[str]) -> TextIO:
    """Return a writable text stream.

    *dest* ``None`` or ``"-"`` → ``sys.stdout``; otherwise open the path
    for writing (creating parent directories as needed).
    """
    if dest is None or dest == "-":
        return sys.stdout
    p = Path(dest).expanduser().resolve()
    p.parent.mkdir(parents=True, exist_ok=True)
    return open(p, "w", encoding="utf-8")


def _emit_results(results: List[LintResult], fmt: str, stream: TextIO) -> int:
    """Write every diagnostic to *stream*; returns the number written."""
    count = 0
    for result in results:
        for diag in result:
            stream.write(format_diagnostic(diag, fmt) + "\n")
            count += 1
    if fmt == "text":
        suppressed = sum(r.suppressed for r in results)
        stream.write(
            f"\n--- {count} finding(s) in {len(results)} file(s), "
            f"{suppressed} suppressed ---\n"
        )
    return count


def _list_kinds(stream: TextIO) -> int:
    width = max(len(k.value) for k in DiagnosticKind)
    for kind in DiagnosticKind:
        stream.write(f"{kind.value:<{width}}  {kind.description}\n")
    return EXIT_OK


# ===========================================================================
# Argument parser
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="namelint",
        description=(
            "namelint — naming-convention checker for JavaScript syntax trees.\n\n"
            "Reads ESTree JSON documents (acorn/espree/esprima output with\n"
            "locations) and reports naming and structural findings."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""\
            examples:
              namelint app.json
              namelint -f gcc --disable UNEXPECTED_VAR src/*.json
              namelint --list-kinds
        """),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v info, -vv debug).",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="ESTree JSON files to lint.",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        metavar="FILE",
        help='Output file ("-" or omit for stdout).',
    )
    parser.add_argument(
        "-f", "--format",
        choices=FORMATS,
        default="text",
        help="Output format (default: text).",
    )
    parser.add_argument(
        "--disable",
        action="append",
        default=[],
        metavar="KIND",
        help="Never report KIND (repeatable; '*' disables everything).",
    )
    parser.add_argument(
        "--no-inline-suppressions",
        action="store_true",
        help="Ignore namelint-suppress comments in the trees.",
    )
    parser.add_argument(
        "--list-kinds",
        action="store_true",
        help="List the diagnostic kinds and exit.",
    )
    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the namelint CLI.

    Parameters
    ----------
    argv:
        Command-line arguments.  ``None`` → ``sys.argv[1:]``.

    Returns
    -------
    int
        Exit code (see module docstring for semantics).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    if args.list_kinds:
        return _list_kinds(sys.stdout)

    if not args.files:
        parser.print_help(sys.stderr)
        return EXIT_INFRA

    config = LinterConfig(
        disabled_kinds=frozenset(args.disable),
        inline_suppressions=not args.no_inline_suppressions,
    )
    linter = Linter(config)

    results: List[LintResult] = []
    failed = False
    for path in args.files:
        try:
            results.append(linter.lint_file(path))
        except TreeLoadError as exc:
            _log.error("%s", exc)
            failed = True
        except NamelintError as exc:
            _log.error("%s: analysis aborted: %s", path, exc)
            failed = True

    stream = _open_output(args.output)
    try:
        count = _emit_results(results, args.format, stream)
    finally:
        if stream is not sys.stdout:
            stream.close()

    if failed:
        return EXIT_INFRA
    return EXIT_FINDINGS if count > 0 else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
