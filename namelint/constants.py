# namelint/constants.py
"""
Node-type tags and the diagnostic taxonomy.

``NodeType`` names the ESTree ``type`` strings the visitors dispatch on.
``DiagnosticKind`` is the stable message taxonomy; its values are the
identifiers that appear in output and in suppression directives.
"""

from __future__ import annotations

from enum import Enum, unique
from typing import Dict


class NodeType:
    """ESTree node ``type`` tags consumed by the visitors."""

    PROGRAM = "Program"
    IDENTIFIER = "Identifier"
    VARIABLE_DECLARATION = "VariableDeclaration"
    VARIABLE_DECLARATOR = "VariableDeclarator"
    FUNCTION_DECLARATION = "FunctionDeclaration"
    FUNCTION_EXPRESSION = "FunctionExpression"
    ARROW_FUNCTION_EXPRESSION = "ArrowFunctionExpression"
    FOR_STATEMENT = "ForStatement"
    NEW_EXPRESSION = "NewExpression"
    CLASS_DECLARATION = "ClassDeclaration"
    METHOD_DEFINITION = "MethodDefinition"
    FIELD_DEFINITION = "FieldDefinition"
    PROPERTY_DEFINITION = "PropertyDefinition"
    MEMBER_EXPRESSION = "MemberExpression"
    ASSIGNMENT_PATTERN = "AssignmentPattern"
    REST_ELEMENT = "RestElement"
    ARRAY_PATTERN = "ArrayPattern"
    JSX_ELEMENT = "JSXElement"
    JSX_FRAGMENT = "JSXFragment"


FUNCTION_NODE_TYPES = frozenset({
    NodeType.FUNCTION_EXPRESSION,
    NodeType.ARROW_FUNCTION_EXPRESSION,
})


@unique
class DiagnosticKind(Enum):
    """Every finding the visitors can emit."""

    NOISE_WORD_AFFIX = "NOISE_WORD_AFFIX"
    NUMERIC_SUFFIX = "NUMERIC_SUFFIX"
    SINGLE_LETTER_NAME_L = "SINGLE_LETTER_NAME_L"
    SINGLE_LETTER_NAME_X = "SINGLE_LETTER_NAME_X"
    SINGLE_LETTER_NAME = "SINGLE_LETTER_NAME"
    UNEXPECTED_VAR = "UNEXPECTED_VAR"
    EXPECTED_CAMEL_CASE = "EXPECTED_CAMEL_CASE"
    CONST_SHOUT_CASE = "CONST_SHOUT_CASE"
    EXPECTED_PASCAL_CASE = "EXPECTED_PASCAL_CASE"
    NESTED_FUNC_DECLARATION = "NESTED_FUNC_DECLARATION"
    INDEXED_FOR_LOOP = "INDEXED_FOR_LOOP"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @classmethod
    def parse(cls, text: str) -> "DiagnosticKind":
        """Look a kind up by identifier, case-insensitively."""
        try:
            return cls(text.strip().upper())
        except ValueError:
            raise ValueError(f"unknown diagnostic kind: {text!r}") from None


_DESCRIPTIONS: Dict[DiagnosticKind, str] = {
    DiagnosticKind.NOISE_WORD_AFFIX:
        "name carries a noise word ('...Array', '...Object', 'the...')",
    DiagnosticKind.NUMERIC_SUFFIX:
        "name ends in a numeric suffix",
    DiagnosticKind.SINGLE_LETTER_NAME_L:
        "'l' is easily confused with '1' and 'I'",
    DiagnosticKind.SINGLE_LETTER_NAME_X:
        "'x' is a placeholder name",
    DiagnosticKind.SINGLE_LETTER_NAME:
        "single-letter name outside a loop header or arrow function",
    DiagnosticKind.UNEXPECTED_VAR:
        "use 'let' or 'const' instead of 'var'",
    DiagnosticKind.EXPECTED_CAMEL_CASE:
        "expected a camelCase name",
    DiagnosticKind.CONST_SHOUT_CASE:
        "SHOUT_CASE names are reserved for 'const' declarations",
    DiagnosticKind.EXPECTED_PASCAL_CASE:
        "expected a PascalCase name",
    DiagnosticKind.NESTED_FUNC_DECLARATION:
        "function declared inside another function",
    DiagnosticKind.INDEXED_FOR_LOOP:
        "index-based loop over '.length'; prefer for...of or array methods",
}

# Wildcard accepted wherever a set of kinds is configured.
ALL_KINDS = "*"
