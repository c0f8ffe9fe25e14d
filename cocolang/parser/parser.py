"""Main parser entry point for Coco.

This module defines the :class:`Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
``cocolang.parser.expressions`` and ``cocolang.parser.statements``.

The parser reads its input one token at a time with a single token of
lookahead and never backtracks, so it accepts any iterable of tokens,
including a lazy :class:`cocolang.lexer.Lexer`. The first error stops parsing.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Iterable

from cocolang.exceptions import ParseError
from cocolang.lexer import TOKEN_LITERALS, Token
from cocolang.values import format_number

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """Coco parser."""

    def __init__(self, tokens: Iterable[Token], file: str = "<input>"):
        """
        Initialize the parser with a stream of tokens.

        Parameters:
            tokens (Iterable[Token]): Token instances ending with ``EOF``.
            file (str): The name of the script.
        """
        self.tokens = iter(tokens)
        self.curr_token = next(self.tokens)
        self.source_file = file
        self.function_depth = 0

    def advance(self) -> None:
        """
        Move to the next token. The cursor stays on ``EOF`` once reached.
        """
        if self.curr_token.type != 'EOF':
            self.curr_token = next(self.tokens)

    def eat(self, token_type: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.

        Returns:
            Token: The consumed token.

        Raises:
            ParseError: If the token does not match the expected type.
        """
        tok = self.curr_token
        if tok.type != token_type:
            expected = TOKEN_LITERALS.get(token_type, token_type)
            raise self.error(
                f"Expected '{expected}' of type {token_type}, "
                f"but got {self.describe(tok)}"
            )
        self.advance()
        return tok

    def error(self, message: str, tok: Token | None = None) -> ParseError:
        """
        Build a ParseError located at ``tok`` (default: the current token).
        """
        tok = tok or self.curr_token
        return ParseError(
            message,
            tok.line,
            tok.column,
            self.source_file,
            at_eof=tok.type == 'EOF',
        )

    @staticmethod
    def describe(tok: Token) -> str:
        """
        Return a human-readable description of a token for error messages.
        """
        if tok.type == 'EOF':
            return "end of input"
        if tok.type == 'NUMBER':
            return f"number {format_number(tok.value)}"
        if tok.type == 'STRING':
            return f"string {tok.value!r}"
        if tok.type == 'ID':
            return f"identifier '{tok.value}'"
        return f"'{TOKEN_LITERALS.get(tok.type, tok.value)}' of type {tok.type}"

    def skip_terminators(self) -> None:
        """
        Consume any number of ``;`` statement terminators.
        """
        while self.curr_token.type == 'SEMI':
            self.advance()

    # Expression wrappers
    def primary(self) -> tuple:
        """
        Parse a literal, variable, call or parenthesized group.
        """
        return _expr.parse_primary(self)

    def unary(self) -> tuple:
        """
        Parse a prefix ``-`` or ``!`` expression.
        """
        return _expr.parse_unary(self)

    def term(self) -> tuple:
        """
        Parse multiplication, division and remainder.
        """
        return _expr.parse_term(self)

    def add_sub(self) -> tuple:
        """
        Parse an addition or subtraction expression.
        """
        return _expr.parse_add_sub(self)

    def comparison(self) -> tuple:
        """
        Parse a relational expression.
        """
        return _expr.parse_comparison(self)

    def equality(self) -> tuple:
        """
        Parse an equality expression.
        """
        return _expr.parse_equality(self)

    def logical_and(self) -> tuple:
        """
        Parse a logical AND expression.
        """
        return _expr.parse_logical_and(self)

    def logical_or(self) -> tuple:
        """
        Parse a logical OR expression.
        """
        return _expr.parse_logical_or(self)

    def assignment(self) -> tuple:
        """
        Parse a (possibly compound) assignment expression.
        """
        return _expr.parse_assignment(self)

    def expr(self) -> tuple:
        """
        Parse a full expression.
        """
        return _expr.parse_expr(self)

    # Statement wrappers
    def block(self) -> tuple:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def statement(self) -> tuple:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_let(self) -> tuple:
        """
        Parse a ``let`` declaration.
        """
        return _stmt.parse_let(self)

    def parse_while(self) -> tuple:
        """
        Parse a ``while`` loop.
        """
        return _stmt.parse_while(self)

    def parse_if(self) -> tuple:
        """
        Parse an ``if`` conditional statement.
        """
        return _stmt.parse_if(self)

    def parse_func_def(self) -> tuple:
        """
        Parse a function declaration.
        """
        return _stmt.parse_func_def(self)

    def parse_return(self) -> tuple:
        """
        Parse a ``return`` statement from within a function.
        """
        return _stmt.parse_return(self)

    def parse(self) -> list:
        """
        Parse the full input into a list of statements.

        Raises:
            ParseError: On the first syntax error, or when the input is
                nested too deeply to parse.
        """
        statements = []
        while True:
            self.skip_terminators()
            if self.curr_token.type == 'EOF':
                break
            try:
                statements.append(self.statement())
            except RecursionError:
                raise self.error("Expression nested too deeply") from None
        return statements
