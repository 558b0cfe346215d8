# notation/grammar.py
# This file is part of LogicalClock - Causality Tracking Primitives
#
# LALR(1) grammar and parser for clock notation using SLY

"""Clock notation grammar implemented with the SLY parser generator.

Grammar:
    start   : '[' entries ']' | '[' ']' | '{' entries '}' | '{' '}'
    entries : entries sep entry | entry
    sep     : ',' | ';'
    entry   : actor ':' NUMBER
    actor   : ID | NUMBER | STRING

The parser produces the list of (actor, counter) pairs in source order.
Duplicate detection and counter validation happen after parsing.
"""

from typing import List, Tuple

from sly import Parser
from .lexer import ClockLexer
from .exceptions import ParseError
from utils.logger import get_logger

Entry = Tuple[object, int]


class _ClockParser(Parser):
    """SLY-based LALR(1) parser for clock notation.

    Attributes:
        tokens: Token types from ClockLexer
    """

    tokens = ClockLexer.tokens

    @_("LBRACKET entries RBRACKET", "LBRACE entries RBRACE")
    def start(self, p) -> List[Entry]:
        """Bracketed, non-empty entry list."""
        return p.entries

    @_("LBRACKET RBRACKET", "LBRACE RBRACE")
    def start(self, p) -> List[Entry]:
        """Empty clock."""
        return []

    @_("entries separator entry")
    def entries(self, p) -> List[Entry]:
        return p.entries + [p.entry]

    @_("entry")
    def entries(self, p) -> List[Entry]:
        return [p.entry]

    @_("COMMA", "SEMI")
    def separator(self, p):
        return p[0]

    @_("actor COLON NUMBER")
    def entry(self, p) -> Entry:
        return (p.actor, p.NUMBER)

    @_("ID", "NUMBER", "STRING")
    def actor(self, p):
        return p[0]

    def parse(self, text: str) -> List[Entry]:
        """Parse clock notation into (actor, counter) pairs.

        Raises:
            ParseError: If text is empty or malformed
        """
        logger = get_logger()
        logger.debug(f"Parsing clock: {text}")

        if not text.strip():
            raise ParseError("Input clock is empty.")

        try:
            result = super().parse(ClockLexer().tokenize(text))
        except ParseError:
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

        if result is None:
            raise ParseError("Failed to parse clock (syntax error).")

        logger.debug(f"Parsed {len(result)} clock entr{'y' if len(result) == 1 else 'ies'}")
        return result

    def error(self, token):
        """Handle syntax errors during parsing.

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of clock"

        raise ParseError(error_msg)
