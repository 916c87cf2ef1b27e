"""Token and TokenType definitions for the AtomScript lexer.

The lexer produces a stream of Token objects that the parser consumes.
Each Token has a type and an optional literal payload.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TokenType(Enum):
    """Token types produced by the lexer.

    Each value is the display name used when printing a token.

    """

    # Structure
    EOF = "EOF"
    ILLEGAL = "Illegal"

    # Lexical errors (token-level, scanning continues)
    UNTERMINATED_STRING = "UnterminatedString"
    LITERAL_OVERFLOW = "LiteralOverflow"

    # Literals
    IDENT = "Ident"
    INT = "Int"
    STRING = "String"

    # Operators
    ASSIGN = "Assign"  # =
    PLUS = "Plus"  # +
    MINUS = "Minus"  # -
    BANG = "Bang"  # !
    ASTERISK = "Asterisk"  # *
    SLASH = "Slash"  # /
    LT = "Lt"  # <
    GT = "Gt"  # >
    EQ = "Eq"  # ==
    NOT_EQ = "NotEq"  # !=

    # Delimiters
    COMMA = "Comma"
    SEMICOLON = "Semicolon"
    COLON = "Colon"
    LPAREN = "LParen"
    RPAREN = "RParen"
    LBRACE = "LBrace"
    RBRACE = "RBrace"
    LBRACKET = "LBracket"
    RBRACKET = "RBracket"

    # Keywords
    ATOM = "Atom"
    MOLECULE = "Molecule"
    REACTION = "Reaction"
    TRUE = "True"
    FALSE = "False"
    IF = "If"
    ELSE = "Else"
    PRODUCE = "Produce"

    @property
    def is_keyword(self) -> bool:
        """True for reserved-word token types."""
        return self in _KEYWORD_TYPES


# Reserved words; an identifier spelled like one of these is never an IDENT
KEYWORDS: dict[str, TokenType] = {
    "atom": TokenType.ATOM,
    "molecule": TokenType.MOLECULE,
    "reaction": TokenType.REACTION,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "produce": TokenType.PRODUCE,
}

_KEYWORD_TYPES = frozenset(KEYWORDS.values())

# One-character symbols that never combine with a following '='
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LT,
    ">": TokenType.GT,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    ":": TokenType.COLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
}

ERROR_TYPES = frozenset(
    {
        TokenType.ILLEGAL,
        TokenType.UNTERMINATED_STRING,
        TokenType.LITERAL_OVERFLOW,
    }
)

# Types whose payload is shown when printed
_PAYLOAD_TYPES = frozenset(
    {
        TokenType.IDENT,
        TokenType.INT,
        TokenType.STRING,
        TokenType.UNTERMINATED_STRING,
        TokenType.LITERAL_OVERFLOW,
    }
)


def lookup_ident(text: str) -> TokenType:
    """Classify a scanned identifier run.

    Exact match against KEYWORDS only: "atoms" and "ifx" are identifiers.

    Args:
        text: Maximal run of ASCII letters, digits and underscores

    Returns:
        The keyword's TokenType, or TokenType.IDENT
    """
    return KEYWORDS.get(text, TokenType.IDENT)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        literal: Payload for identifiers, integers, strings and error
            markers; None for fixed symbols and keywords
        offset: Start index in the source. Excluded from comparison so
            expected tokens can be written without positions.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    literal: str | int | None = None
    offset: int = field(default=-1, compare=False)

    @property
    def is_error(self) -> bool:
        """True for ILLEGAL, UNTERMINATED_STRING and LITERAL_OVERFLOW."""
        return self.type in ERROR_TYPES

    def __str__(self) -> str:
        """Display form, e.g. ``Ident(five)``, ``Int(5)``, ``Assign``."""
        if self.type in _PAYLOAD_TYPES:
            return f"{self.type.value}({self.literal})"
        return self.type.value

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.literal is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.literal!r})"
