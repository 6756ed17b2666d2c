# namelint/diagnostics.py
"""
Diagnostic model and the default diagnostic sink.

The visitors talk to a sink through a single operation,
``log(location, finding)``.  ``FindingCollector`` is the sink used by the
linter: it binds each finding to a ``SourceLocation`` in the file being
walked and keeps them in emission order.

Output formats
──────────────
  text   ``file:line:col  KIND  name (kind): description``
  gcc    ``file:line:col: style: description 'name' [KIND]``
  json   one JSON object per line (see ``Diagnostic.to_dict``)
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Protocol

from namelint.constants import DiagnosticKind


class DiagnosticSeverity(Enum):
    """cppcheck-style severity levels; every naming rule is ``style``."""
    ERROR = "error"
    WARNING = "warning"
    STYLE = "style"
    INFORMATION = "information"


@dataclass(frozen=True)
class Finding:
    """One rule violation, before it is bound to a file."""
    message: DiagnosticKind
    name: str
    kind: str


@dataclass(frozen=True)
class SourceLocation:
    """A point in source code.  ``line`` is 1-based, ``column`` 0-based."""
    file: str = ""
    line: int = 0
    column: int = 0

    @classmethod
    def from_estree(cls, loc: Optional[Mapping[str, Any]], file: str = "") -> "SourceLocation":
        """Build from an ESTree ``loc`` object (``{start: {line, column}}``)."""
        if not loc:
            return cls(file=file)
        start = loc.get("start") or {}
        return cls(
            file=file,
            line=int(start.get("line", 0)),
            column=int(start.get("column", 0)),
        )

    def __str__(self) -> str:
        return f"{self.file or '<tree>'}:{self.line}:{self.column + 1}"


@dataclass(frozen=True)
class Diagnostic:
    """
    A finding bound to a source location.

    Attributes
    ----------
    finding  : the rule violation
    location : where it was reported
    severity : always STYLE for the naming rules
    """
    finding: Finding
    location: SourceLocation
    severity: DiagnosticSeverity = DiagnosticSeverity.STYLE

    @property
    def kind(self) -> DiagnosticKind:
        return self.finding.message

    @property
    def error_id(self) -> str:
        return self.finding.message.value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file": self.location.file,
            "line": self.location.line,
            "column": self.location.column,
            "severity": self.severity.value,
            "message": self.error_id,
            "name": self.finding.name,
            "kind": self.finding.kind,
            "description": self.kind.description,
        }

    def to_json_str(self) -> str:
        return json.dumps(self.to_dict())

    def to_gcc_format(self) -> str:
        """GCC-style diagnostic string: file:line:col: severity: message."""
        return (
            f"{self.location}: {self.severity.value}: "
            f"{self.kind.description} '{self.finding.name}' [{self.error_id}]"
        )

    def to_text(self) -> str:
        return (
            f"{self.location}  {self.error_id}  "
            f"{self.finding.name} ({self.finding.kind}): {self.kind.description}"
        )

    def __str__(self) -> str:
        return self.to_text()


class DiagnosticSink(Protocol):
    """What the visitors need from a reporter."""

    def log(self, location: Optional[Mapping[str, Any]], finding: Finding) -> Any:
        ...


@dataclass
class FindingCollector:
    """Accumulating sink bound to one file."""
    file: str = ""
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def log(self, location: Optional[Mapping[str, Any]], finding: Finding) -> None:
        self.diagnostics.append(
            Diagnostic(finding, SourceLocation.from_estree(location, self.file))
        )

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)

    def __len__(self) -> int:
        return len(self.diagnostics)

    def kinds(self) -> List[DiagnosticKind]:
        return [d.kind for d in self.diagnostics]


FORMATS = ("text", "gcc", "json")


def format_diagnostic(diag: Diagnostic, fmt: str) -> str:
    if fmt == "json":
        return diag.to_json_str()
    if fmt == "gcc":
        return diag.to_gcc_format()
    return diag.to_text()
