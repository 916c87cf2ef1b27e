"""Single-pass scanner for AtomScript source text.

Maximal munch with one character of lookahead. The cursor is a direct
index into the source string, so every character fetch is O(1); identifier
and digit runs are sliced out once, and string bodies are located with
str.find.

No exceptions for bad input: unrecognized characters, unterminated strings
and oversized integers come back as error tokens and scanning continues.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import string
from collections.abc import Iterator

from atomscript.config import LexConfig, get_lex_config
from atomscript.tokens import SINGLE_CHAR_TOKENS, Token, TokenType, lookup_ident
from atomscript.utils.logger import get_logger

logger = get_logger(__name__)

# End-of-input sentinel. Never a character of the source, so an embedded
# NUL lexes as ILLEGAL instead of ending the scan.
EOF_CHAR = ""

_WHITESPACE = frozenset(" \t\n\r")
_DIGITS = frozenset(string.digits)
_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_CHARS = _IDENT_START | _DIGITS


class Lexer:
    """Scanner producing one Token per next_token() call.

    Usage:
            >>> lexer = Lexer("atom five = 5;")
            >>> [str(t) for t in lexer.tokenize()]
            ['Atom', 'Ident(five)', 'Assign', 'Int(5)', 'Semicolon', 'EOF']

    Once EOF has been returned, further calls keep returning EOF.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",  # Index of _ch
        "_read_pos",  # Index of the lookahead character
        "_ch",  # Character under the cursor, EOF_CHAR past the end
        "_max_int",
        "_max_int_digits",
    )

    def __init__(self, source: str, *, config: LexConfig | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: AtomScript source text
            config: Lexer config; defaults to the active context config
        """
        if config is None:
            config = get_lex_config()
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._read_pos = 0
        self._ch = EOF_CHAR
        self._max_int = config.max_int
        self._max_int_digits = len(str(config.max_int))
        self._read_char()

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens up to and including EOF.

        Complexity: O(n) where n = len(source)
        """
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    def next_token(self) -> Token:
        """Scan and return the next token."""
        self._skip_whitespace()

        ch = self._ch
        start = self._pos

        if ch == EOF_CHAR:
            return Token(TokenType.EOF, offset=start)
        if ch in _IDENT_START:
            return self._read_identifier()
        if ch in _DIGITS:
            return self._read_number()
        if ch == '"':
            return self._read_string()

        if ch == "=" or ch == "!":
            if self._peek_char() == "=":
                self._read_char()
                token_type = TokenType.EQ if ch == "=" else TokenType.NOT_EQ
            else:
                token_type = TokenType.ASSIGN if ch == "=" else TokenType.BANG
            token = Token(token_type, offset=start)
        else:
            token_type = SINGLE_CHAR_TOKENS.get(ch)
            if token_type is None:
                logger.debug("Illegal character %r at offset %d", ch, start)
                token = Token(TokenType.ILLEGAL, ch, start)
            else:
                token = Token(token_type, offset=start)

        self._read_char()
        return token

    # =========================================================================
    # Cursor
    # =========================================================================

    def _read_char(self) -> None:
        """Move the cursor one character forward, clamping at end of input."""
        if self._read_pos >= self._source_len:
            self._ch = EOF_CHAR
            self._pos = self._source_len
            return
        self._ch = self._source[self._read_pos]
        self._pos = self._read_pos
        self._read_pos += 1

    def _peek_char(self) -> str:
        """Return the lookahead character without advancing."""
        if self._read_pos >= self._source_len:
            return EOF_CHAR
        return self._source[self._read_pos]

    def _seek(self, index: int) -> None:
        """Place the cursor on index (or on EOF if index is past the end)."""
        self._read_pos = index
        self._read_char()

    def _skip_whitespace(self) -> None:
        while self._ch in _WHITESPACE:
            self._read_char()

    # =========================================================================
    # Literal readers (each leaves the cursor just past its text)
    # =========================================================================

    def _scan_while(self, charset: frozenset[str]) -> int:
        """Return the end index of the run of charset characters at the cursor."""
        source = self._source
        source_len = self._source_len
        end = self._pos
        while end < source_len and source[end] in charset:
            end += 1
        return end

    def _read_identifier(self) -> Token:
        start = self._pos
        end = self._scan_while(_IDENT_CHARS)
        self._seek(end)

        text = self._source[start:end]
        token_type = lookup_ident(text)
        if token_type is TokenType.IDENT:
            return Token(TokenType.IDENT, text, start)
        return Token(token_type, offset=start)

    def _read_number(self) -> Token:
        start = self._pos
        end = self._scan_while(_DIGITS)
        self._seek(end)

        text = self._source[start:end]
        # Length check first: int() refuses very long digit strings
        significant = text.lstrip("0") or "0"
        if len(significant) <= self._max_int_digits:
            value = int(significant)
            if value <= self._max_int:
                return Token(TokenType.INT, value, start)

        logger.debug("Integer literal %s at offset %d exceeds %d", text, start, self._max_int)
        return Token(TokenType.LITERAL_OVERFLOW, text, start)

    def _read_string(self) -> Token:
        start = self._pos
        close = self._source.find('"', start + 1)

        if close == -1:
            logger.debug("Unterminated string starting at offset %d", start)
            content = self._source[start + 1 :]
            self._seek(self._source_len)
            return Token(TokenType.UNTERMINATED_STRING, content, start)

        content = self._source[start + 1 : close]
        self._seek(close + 1)
        return Token(TokenType.STRING, content, start)
