"""
Destination variable name validation.

The rendered block is an assignment statement (``<name> = {...};``), so
the name must be something a browser will accept as a variable. Two
independent gates apply:

    - Grammar: first character is a letter, underscore or dollar sign;
      the rest are letters, digits, underscores or dollar signs.
    - Reserved words: the name must not equal (case-sensitively) a
      reserved word.

Only ASCII letters are accepted.
"""

import re

from localize.errors import InvalidIdentifierError, ReservedKeywordError


_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")

RESERVED_WORDS = frozenset({
    "break", "case", "catch", "class", "const", "continue", "debugger",
    "default", "delete", "do", "else", "export", "extends", "finally",
    "for", "function", "if", "import", "in", "instanceof", "new",
    "return", "super", "switch", "this", "throw", "try", "typeof",
    "var", "void", "while", "with", "yield",
    # Future reserved words
    "enum", "await", "implements", "interface", "package", "private",
    "protected", "public", "static",
})


def validate_identifier(name: str) -> None:
    """
    Check that a name can be used as the destination variable.

    Args:
        name: Proposed variable name

    Raises:
        InvalidIdentifierError: If the name does not match the grammar
        ReservedKeywordError: If the name is a reserved word
    """
    if not isinstance(name, str) or _IDENTIFIER_RE.fullmatch(name) is None:
        raise InvalidIdentifierError(
            name, f"{name!r} is not a valid variable identifier"
        )
    if name in RESERVED_WORDS:
        raise ReservedKeywordError(
            name, f"{name!r} is a reserved word and cannot be used as a variable name"
        )


def is_valid_identifier(name: str) -> bool:
    """Non-raising form of validate_identifier()."""
    try:
        validate_identifier(name)
    except (InvalidIdentifierError, ReservedKeywordError):
        return False
    return True


__all__ = ["RESERVED_WORDS", "validate_identifier", "is_valid_identifier"]
