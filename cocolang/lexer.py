"""Lexer for Coco.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its type, value and source position (line and column).

Tokens cover literals (numbers, strings, booleans, ``null``), keywords
(``let``, ``while``, ``if``, ``fun`` …), operators and delimiters. Whitespace,
``//`` line comments and ``/* … */`` block comments are skipped without
emitting tokens; line and column counters stay accurate across them.

The :class:`Lexer` is lazy: tokens are produced on demand while iterating and
every new iteration starts again from the beginning of the source. The stream
always ends with a single ``EOF`` token. Lexing stops at the first error.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from typing import Any, Iterator, NamedTuple

from cocolang.exceptions import LexError


class Position(NamedTuple):
    """
    A 1-based line/column location in the source text.
    """
    line: int
    column: int

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


class Token(NamedTuple):
    """
    Represents a lexical token with a type, value and position.

    Tokens are immutable once produced.
    """
    type: str
    value: Any
    line: int
    column: int = 1

    @property
    def pos(self) -> Position:
        """
        Return the position of the token.
        """
        return Position(self.line, self.column)

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r}, line={self.line}, column={self.column})"


KEYWORDS = {
    'let': 'LET',
    'while': 'WHILE',
    'if': 'IF',
    'else': 'ELSE',
    'fun': 'FUN',
    'return': 'RETURN',
    'true': 'TRUE',
    'false': 'FALSE',
    'null': 'NULL',
}

token_specification: list[tuple[str, str]] = [
    # Literals
    ('NUMBER',        r'[0-9]+(?:\.[0-9]+)?'),
    ('STRING',        r'"[^"]*"|\'[^\']*\''),
    ('OPEN_STRING',   r'["\']'),

    # Identifiers and keywords
    ('ID',            r'[A-Za-z_][A-Za-z0-9_]*'),

    # Comments
    ('COMMENT',       r'//[^\n]*'),
    ('BLOCK_COMMENT', r'/\*[\s\S]*?\*/'),
    ('OPEN_COMMENT',  r'/\*'),

    # Compound assignment
    ('PLUS_ASSIGN',   r'\+='),
    ('MINUS_ASSIGN',  r'-='),
    ('MUL_ASSIGN',    r'\*='),
    ('DIV_ASSIGN',    r'/='),
    ('MOD_ASSIGN',    r'%='),

    # Comparison and logical operators
    ('EQ',            r'=='),
    ('NE',            r'!='),
    ('LE',            r'<='),
    ('GE',            r'>='),
    ('AND',           r'&&'),
    ('OR',            r'\|\|'),
    ('LT',            r'<'),
    ('GT',            r'>'),
    ('NOT',           r'!'),

    # Assignment
    ('ASSIGN',        r'='),

    # Arithmetic operators
    ('PLUS',          r'\+'),
    ('MINUS',         r'-'),
    ('MUL',           r'\*'),
    ('DIV',           r'/'),
    ('MOD',           r'%'),

    # Delimiters
    ('LPAREN',        r'\('),
    ('RPAREN',        r'\)'),
    ('LBRACE',        r'\{'),
    ('RBRACE',        r'\}'),
    ('COMMA',         r','),
    ('SEMI',          r';'),

    # Miscellaneous
    ('NEWLINE',       r'\n'),
    ('SKIP',          r'[ \t\r\f\v]+'),
    ('MISMATCH',      r'.'),
]

TOKEN_REGEX = re.compile('|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification))

# Source spelling of fixed tokens, used in parser error messages.
TOKEN_LITERALS: dict[str, str] = {
    **{kind: word for word, kind in KEYWORDS.items()},
    'PLUS_ASSIGN': '+=', 'MINUS_ASSIGN': '-=', 'MUL_ASSIGN': '*=',
    'DIV_ASSIGN': '/=', 'MOD_ASSIGN': '%=',
    'EQ': '==', 'NE': '!=', 'LE': '<=', 'GE': '>=', 'AND': '&&', 'OR': '||',
    'LT': '<', 'GT': '>', 'NOT': '!', 'ASSIGN': '=',
    'PLUS': '+', 'MINUS': '-', 'MUL': '*', 'DIV': '/', 'MOD': '%',
    'LPAREN': '(', 'RPAREN': ')', 'LBRACE': '{', 'RBRACE': '}',
    'COMMA': ',', 'SEMI': ';', 'EOF': 'end of input',
}

_SKIPPED = frozenset({'NEWLINE', 'SKIP', 'COMMENT', 'BLOCK_COMMENT'})


class Lexer:
    """
    Lazy, restartable token stream over a piece of source text.
    """
    def __init__(self, code: str, file: str = "<input>"):
        """
        Parameters:
            code (str): The source code to tokenize.
            file (str): The name of the script, used in error messages.
        """
        self.code = code
        self.file = file

    def __iter__(self) -> Iterator[Token]:
        """
        Yield tokens from the start of the source, ending with ``EOF``.

        Raises:
            LexError: On an unterminated string or block comment, or an
                unexpected character.
        """
        line_num = 1
        line_start = 0

        for match_obj in TOKEN_REGEX.finditer(self.code):
            kind = match_obj.lastgroup
            value = match_obj.group()
            start = match_obj.start()
            column = start - line_start + 1

            if kind == 'MISMATCH':
                raise LexError(f"Unexpected character {value!r}", line_num, column, self.file)
            if kind == 'OPEN_STRING':
                raise LexError("Unterminated string literal", line_num, column, self.file)
            if kind == 'OPEN_COMMENT':
                raise LexError("Unterminated block comment", line_num, column, self.file)

            if kind not in _SKIPPED:
                yield self._make_token(kind, value, line_num, column)

            # Strings and block comments may span lines
            newlines = value.count('\n')
            if newlines:
                line_num += newlines
                line_start = start + value.rfind('\n') + 1

        yield Token('EOF', None, line_num, len(self.code) - line_start + 1)

    @staticmethod
    def _make_token(kind: str, value: str, line: int, column: int) -> Token:
        if kind == 'NUMBER':
            return Token('NUMBER', float(value), line, column)
        if kind == 'STRING':
            return Token('STRING', value[1:-1], line, column)
        if kind == 'ID':
            keyword = KEYWORDS.get(value)
            if keyword == 'TRUE':
                return Token('TRUE', True, line, column)
            if keyword == 'FALSE':
                return Token('FALSE', False, line, column)
            if keyword is not None:
                return Token(keyword, value, line, column)
            return Token('ID', value, line, column)
        return Token(kind, value, line, column)


def tokenize(code: str, file: str = "<input>") -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        file (str): The name of the script.

    Returns:
        list[Token]: A list of Token instances terminated by an ``EOF`` token.

    Raises:
        LexError: If the source cannot be tokenized.
    """
    return list(Lexer(code, file))
