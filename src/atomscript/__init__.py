"""
AtomScript: lexer for a small C-like scripting language.

Turns source text into a flat token stream for a later parsing stage.
Unrecognized characters, unterminated strings and oversized integers are
reported as error tokens; scanning never aborts.

Quick Start:
    >>> from atomscript import tokenize
    >>> [str(t) for t in tokenize("10 != 9;")]
    ['Int(10)', 'NotEq', 'Int(9)', 'Semicolon', 'EOF']

    >>> # Or drive the scanner directly
    >>> from atomscript import Lexer
    >>> lexer = Lexer("atom x;")
    >>> lexer.next_token()
    Token(ATOM)

Interactive:
    python -m atomscript
"""

from atomscript.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from atomscript.errors import (
    AtomScriptError,
    IllegalCharacterError,
    LexError,
    LiteralOverflowError,
    UnterminatedStringError,
)
from atomscript.lexer import Lexer
from atomscript.tokens import KEYWORDS, Token, TokenType, lookup_ident

__version__ = "0.1.0"


def tokenize(source: str, *, config: LexConfig | None = None) -> list[Token]:
    """Tokenize AtomScript source into a list ending with EOF.

    Args:
        source: AtomScript source text
        config: Lexer config; defaults to the active context config

    Returns:
        All tokens, EOF included

    Raises:
        LexError: If config.strict is set and an error token is produced.
            The subclass identifies the kind of error.

    Example:
        >>> [str(t) for t in tokenize("atom five = 5;")]
        ['Atom', 'Ident(five)', 'Assign', 'Int(5)', 'Semicolon', 'EOF']
    """
    if config is None:
        config = get_lex_config()

    tokens: list[Token] = []
    for token in Lexer(source, config=config).tokenize():
        if config.strict and token.is_error:
            raise LexError.from_token(token, source_file=config.source_file)
        tokens.append(token)
    return tokens


__all__ = [
    # Main API
    "tokenize",
    "Lexer",
    # Tokens
    "Token",
    "TokenType",
    "KEYWORDS",
    "lookup_ident",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Errors
    "AtomScriptError",
    "LexError",
    "IllegalCharacterError",
    "UnterminatedStringError",
    "LiteralOverflowError",
    "__version__",
]
