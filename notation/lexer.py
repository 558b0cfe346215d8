# notation/lexer.py
# This file is part of LogicalClock - Causality Tracking Primitives
#
# Lexical analyzer for clock notation tokenization using SLY

"""Lexical analyzer for clock notation strings such as ``[A:2, B:3]``.

Supported Tokens:
- Brackets: [, ], {, }
- Separators: ',' and ';' between entries, ':' between actor and counter
- Identifiers: actor names (letters, digits, '_', '.', '-')
- Numbers: counters, or integer actor identifiers
- Strings: double-quoted actor names, with \\" and \\\\ escapes
- Whitespace: ignored during tokenization
"""

import re

from sly import Lexer
from utils.logger import get_logger


class ClockLexer(Lexer):
    """SLY-based lexer for clock notation.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "ID",
        "NUMBER",
        "STRING",
        "COLON",
        "COMMA",
        "SEMI",
        "LBRACKET",
        "RBRACKET",
        "LBRACE",
        "RBRACE",
    }

    ignore = " \t\r\n"

    COLON = r":"
    COMMA = r","
    SEMI = r";"
    LBRACKET = r"\["
    RBRACKET = r"\]"
    LBRACE = r"\{"
    RBRACE = r"\}"

    ID = r"[a-zA-Z_][a-zA-Z0-9_.\-]*"

    @_(r"\d+")
    def NUMBER(self, t):
        t.value = int(t.value)
        return t

    @_(r'"(?:[^"\\]|\\.)*"')
    def STRING(self, t):
        t.value = re.sub(r"\\(.)", r"\1", t.value[1:-1])
        return t

    def error(self, t):
        """Handle illegal characters during tokenization.

        Raises:
            ValueError: Always raised with character and position information
        """
        illegal_char = t.value[0]
        error_pos = self.index

        get_logger().debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
