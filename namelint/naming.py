# namelint/naming.py
"""Naming-convention predicates.

Leading ``_`` and ``$`` are ignored by every predicate, so ``_private``
and ``$element`` are camelCase and ``_Base`` is PascalCase.
"""

from __future__ import annotations

import re

_CAMEL_RE = re.compile(r"^[_$]*[a-z][a-zA-Z0-9]*$")
_PASCAL_RE = re.compile(r"^[_$]*[A-Z][a-zA-Z0-9]*$")
_SHOUT_RE = re.compile(r"^[_$]*[A-Z][A-Z0-9]*(?:_[A-Z0-9]+)*$")


def is_camel_case(name: str) -> bool:
    return bool(_CAMEL_RE.match(name))


def is_pascal_case(name: str) -> bool:
    return bool(_PASCAL_RE.match(name))


def is_shout_case(name: str) -> bool:
    return bool(_SHOUT_RE.match(name))
