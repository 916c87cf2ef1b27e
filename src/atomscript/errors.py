"""Exception classes for AtomScript.

The lexer itself never raises: lexical problems come back as error tokens.
These exceptions are for callers that want to halt on the first one
(see atomscript.tokenize with LexConfig.strict).
"""

from __future__ import annotations

from atomscript.tokens import Token, TokenType


class AtomScriptError(Exception):
    """Base exception for all AtomScript errors."""

    pass


class LexError(AtomScriptError):
    """Error token surfaced as an exception.

    Attributes:
        message: Error description
        offset: Start index of the offending token in the source
        source_file: Source label (optional)
        token: The error token (optional)
    """

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        source_file: str | None = None,
        token: Token | None = None,
    ) -> None:
        self.message = message
        self.offset = offset
        self.source_file = source_file
        self.token = token

        location = ""
        if source_file:
            location = f"{source_file}:"
        if offset is not None and offset >= 0:
            location += f"{offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")

    @classmethod
    def from_token(cls, token: Token, source_file: str | None = None) -> LexError:
        """Build the matching LexError subclass for an error token.

        Raises:
            ValueError: If the token is not an error marker.
        """
        if token.type is TokenType.ILLEGAL:
            return IllegalCharacterError(
                f"illegal character {token.literal!r}", token.offset, source_file, token
            )
        if token.type is TokenType.UNTERMINATED_STRING:
            return UnterminatedStringError(
                "unterminated string literal", token.offset, source_file, token
            )
        if token.type is TokenType.LITERAL_OVERFLOW:
            return LiteralOverflowError(
                f"integer literal {token.literal} out of range", token.offset, source_file, token
            )
        raise ValueError(f"{token!r} is not an error token")


class IllegalCharacterError(LexError):
    """A character outside the recognized symbol, letter, digit and quote set."""

    pass


class UnterminatedStringError(LexError):
    """End of input reached inside a string literal."""

    pass


class LiteralOverflowError(LexError):
    """A digit run exceeding the configured integer range."""

    pass
