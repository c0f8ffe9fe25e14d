"""Expression parsing utilities for Coco.

These functions operate on a :class:`cocolang.parser.parser.Parser` instance
and implement the recursive descent logic for expressions, maintaining
operator precedence and associativity. From lowest to highest precedence:

    assignment    = += -= *= /= %=     (right-associative)
    logical or    ||
    logical and   &&
    equality      == !=
    relational    < > <= >=
    additive      + -
    multiplicative * / %
    unary         - !                  (prefix)
    primary       literals, identifiers, calls, ( expr )

All binary levels below assignment are left-associative.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from cocolang.operations import Op

if TYPE_CHECKING:
    from cocolang.parser import Parser


ASSIGN_OPS = {
    'ASSIGN': None,
    'PLUS_ASSIGN': Op.ADD,
    'MINUS_ASSIGN': Op.SUB,
    'MUL_ASSIGN': Op.MUL,
    'DIV_ASSIGN': Op.DIV,
    'MOD_ASSIGN': Op.MOD,
}


# ---- Highest precedence ----

def parse_primary(parser: 'Parser') -> tuple:
    """Parse a literal, variable, call, or parenthesized expression."""
    tok = parser.curr_token

    if tok.type == 'NUMBER':
        parser.eat('NUMBER')
        return ('number', tok.value, tok.pos)

    if tok.type == 'STRING':
        parser.eat('STRING')
        return ('string', tok.value, tok.pos)

    if tok.type in ('TRUE', 'FALSE'):
        parser.eat(tok.type)
        return ('bool', tok.value, tok.pos)

    if tok.type == 'NULL':
        parser.eat('NULL')
        return ('null', tok.pos)

    if tok.type == 'ID':
        parser.eat('ID')
        if parser.curr_token.type == 'LPAREN':
            return ('func_call', tok.value, _parse_arguments(parser), tok.pos)
        return ('ident', tok.value, tok.pos)

    if tok.type == 'LPAREN':
        parser.eat('LPAREN')
        node = parser.expr()
        parser.eat('RPAREN')
        return node

    raise parser.error(f"Unexpected {parser.describe(tok)}")


def _parse_arguments(parser: 'Parser') -> list:
    """Parse a parenthesized, comma-separated argument list."""
    parser.eat('LPAREN')
    args = []
    if parser.curr_token.type != 'RPAREN':
        args.append(parser.expr())
        while parser.curr_token.type == 'COMMA':
            parser.eat('COMMA')
            if parser.curr_token.type == 'RPAREN':
                raise parser.error("Trailing comma is not permitted in an argument list")
            args.append(parser.expr())
    parser.eat('RPAREN')
    return args


def parse_unary(parser: 'Parser') -> tuple:
    """Parse prefix negation and logical not."""
    tok = parser.curr_token
    if tok.type == 'MINUS':
        parser.eat('MINUS')
        return ('unary', Op.NEG, parser.unary(), tok.pos)
    if tok.type == 'NOT':
        parser.eat('NOT')
        return ('unary', Op.NOT, parser.unary(), tok.pos)
    return parser.primary()


def parse_term(parser: 'Parser') -> tuple:
    """Parse multiplication, division, and remainder expressions."""
    result = parser.unary()
    while parser.curr_token.type in ('MUL', 'DIV', 'MOD'):
        op_tok = parser.curr_token
        parser.eat(op_tok.type)
        op_map = {
            'MUL': Op.MUL,
            'DIV': Op.DIV,
            'MOD': Op.MOD,
        }
        result = (op_map[op_tok.type], result, parser.unary(), op_tok.pos)
    return result


def parse_add_sub(parser: 'Parser') -> tuple:
    """Parse addition and subtraction expressions."""
    result = parser.term()
    while parser.curr_token.type in ('PLUS', 'MINUS'):
        tok = parser.curr_token
        parser.eat(tok.type)
        op_map = {
            'PLUS': Op.ADD,
            'MINUS': Op.SUB,
        }
        result = (op_map[tok.type], result, parser.term(), tok.pos)
    return result


def parse_comparison(parser: 'Parser') -> tuple:
    """Parse relational expressions (<, >, <=, >=)."""
    result = parser.add_sub()
    while parser.curr_token.type in ('GT', 'LT', 'GE', 'LE'):
        op_tok = parser.curr_token
        parser.eat(op_tok.type)
        op_map = {
            'GT': Op.GT,
            'LT': Op.LT,
            'GE': Op.GE,
            'LE': Op.LE,
        }
        result = (op_map[op_tok.type], result, parser.add_sub(), op_tok.pos)
    return result


def parse_equality(parser: 'Parser') -> tuple:
    """Parse equality expressions (==, !=)."""
    result = parser.comparison()
    while parser.curr_token.type in ('EQ', 'NE'):
        op_tok = parser.curr_token
        parser.eat(op_tok.type)
        op = Op.EQ if op_tok.type == 'EQ' else Op.NE
        result = (op, result, parser.comparison(), op_tok.pos)
    return result


def parse_logical_and(parser: 'Parser') -> tuple:
    """Parse logical AND expressions using '&&'."""
    result = parser.equality()
    while parser.curr_token.type == 'AND':
        tok = parser.curr_token
        parser.eat('AND')
        result = (Op.AND, result, parser.equality(), tok.pos)
    return result


def parse_logical_or(parser: 'Parser') -> tuple:
    """Parse logical OR expressions using '||'."""
    result = parser.logical_and()
    while parser.curr_token.type == 'OR':
        tok = parser.curr_token
        parser.eat('OR')
        result = (Op.OR, result, parser.logical_and(), tok.pos)
    return result


# ---- Lowest precedence ----

def parse_assignment(parser: 'Parser') -> tuple:
    """
    Parse plain and compound assignment.

    The target is parsed as an ordinary expression first and must turn out to
    be a bare, unparenthesized identifier; the right-hand side recurses for
    right associativity.
    """
    start = parser.curr_token
    target = parser.logical_or()
    op_tok = parser.curr_token
    if op_tok.type not in ASSIGN_OPS:
        return target

    if target[0] != 'ident' or start.type == 'LPAREN':
        raise parser.error("Invalid assignment target", op_tok)
    parser.eat(op_tok.type)
    value = parser.assignment()

    op = ASSIGN_OPS[op_tok.type]
    if op is None:
        return ('assign', target[1], value, target[-1])
    return ('compound_assign', target[1], op, value, target[-1])


# ---- Entry point ----

def parse_expr(parser: 'Parser') -> tuple:
    """Parse an expression starting from the lowest-precedence operator."""
    return parser.assignment()
