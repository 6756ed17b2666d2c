# namelint/errors.py
"""
Exception hierarchy for namelint.

Rule violations are never raised; they are reported through the
diagnostic sink.  The exceptions below cover the infrastructure around
the rules: loading trees, keeping the ancestor stack balanced, and
reading suppression directives.

Hierarchy:
──────────
    NamelintError (base)
    ├── TreeLoadError           - unreadable / malformed tree document
    ├── AncestorStackError      - unbalanced push/pop (fatal, aborts walk)
    ├── TraversalDepthError     - tree nests deeper than the interpreter stack
    └── SuppressionSyntaxError  - malformed inline suppression directive
"""

from __future__ import annotations

from typing import Optional


class NamelintError(Exception):
    """Base exception for all namelint errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class TreeLoadError(NamelintError):
    """A syntax tree document could not be read or is not an ESTree node."""

    def __init__(
        self,
        message: str,
        path: str = "",
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class AncestorStackError(NamelintError):
    """The traversal popped more nodes than it pushed."""


class TraversalDepthError(NamelintError):
    """The tree nests handled constructs deeper than Python can recurse."""


class SuppressionSyntaxError(NamelintError):
    """An inline ``namelint-suppress`` directive could not be parsed."""

    def __init__(
        self,
        message: str,
        text: str = "",
        line: int = 0,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.text = text
        self.line = line

    def __str__(self) -> str:
        return f"line {self.line}: {self.message}: {self.text!r}"
