"""Statement parsing utilities for Coco.

These functions operate on a :class:`cocolang.parser.parser.Parser` instance
and handle the various statement forms in the language such as blocks,
declarations, loops, conditionals and function definitions. A statement may
be followed by an optional ``;`` terminator.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cocolang.parser import Parser


def parse_block(parser: 'Parser') -> tuple:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('block', list_of_statements, position)
    """
    tok = parser.eat('LBRACE')
    statements = []
    while True:
        parser.skip_terminators()
        if parser.curr_token.type == 'RBRACE':
            break
        if parser.curr_token.type == 'EOF':
            raise parser.error(
                f"Unterminated block opened on line {tok.line}, expected '}}'"
            )
        statements.append(parser.statement())
    parser.eat('RBRACE')
    return ('block', statements, tok.pos)


def parse_statement(parser: 'Parser') -> tuple:
    """
    Parse a single statement and its optional terminator.

    Syntax:
        <statement> [;]

    Args:
        parser: The parser instance.

    Returns:
        tuple: representing the AST node.
    """
    tok = parser.curr_token
    if tok.type == 'LET':
        node = parser.parse_let()
    elif tok.type == 'WHILE':
        node = parser.parse_while()
    elif tok.type == 'IF':
        node = parser.parse_if()
    elif tok.type == 'FUN':
        node = parser.parse_func_def()
    elif tok.type == 'RETURN':
        node = parser.parse_return()
    elif tok.type == 'LBRACE':
        node = parser.block()
    else:
        expr_node = parser.expr()
        node = ('expr_stmt', expr_node, tok.pos)

    if parser.curr_token.type == 'SEMI':
        parser.eat('SEMI')
    return node


def parse_let(parser: 'Parser') -> tuple:
    """
    Parse a ``let`` variable declaration. An initializer is mandatory.

    Syntax:
        let <identifier> = <expression>

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('let', name, expr, position)
    """
    let_tok = parser.eat('LET')
    id_tok = parser.curr_token
    if id_tok.type != 'ID':
        raise parser.error(
            f"Expected identifier after 'let', but got {parser.describe(id_tok)}"
        )
    parser.eat('ID')
    if parser.curr_token.type != 'ASSIGN':
        raise parser.error(
            f"Expected '=' after variable name '{id_tok.value}'; "
            f"declarations require an initializer"
        )
    parser.eat('ASSIGN')
    expr_node = parser.expr()
    return ('let', id_tok.value, expr_node, let_tok.pos)


def parse_while(parser: 'Parser') -> tuple:
    """
    Parse a ``while`` loop.

    Syntax:
        while ( <condition> ) { <block> }

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('while', condition, block, position)
    """
    tok = parser.eat('WHILE')
    parser.eat('LPAREN')
    condition = parser.expr()
    parser.eat('RPAREN')
    body = parser.block()
    return ('while', condition, body, tok.pos)


def parse_if(parser: 'Parser') -> tuple:
    """
    Parse a conditional ``if`` statement with an optional ``else`` branch.

    Syntax:
        if ( <condition> ) { <block> }
        else if ( <condition> ) { <block> }
        else { <block> }

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('if', condition, then_block, else_node_or_None, position)
    """
    tok = parser.eat('IF')
    parser.eat('LPAREN')
    condition = parser.expr()
    parser.eat('RPAREN')
    then_block = parser.block()

    else_node = None
    if parser.curr_token.type == 'ELSE':
        parser.eat('ELSE')
        if parser.curr_token.type == 'IF':
            else_node = parser.parse_if()
        else:
            else_node = parser.block()

    return ('if', condition, then_block, else_node, tok.pos)


def parse_func_def(parser: 'Parser') -> tuple:
    """
    Parse a function definition.

    Syntax:
        fun <name>(<params>) { <block> }

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('func_def', name, params, block, position)
    """
    start_tok = parser.eat('FUN')
    name_tok = parser.curr_token
    if name_tok.type != 'ID':
        raise parser.error(
            f"Expected function name after 'fun', but got {parser.describe(name_tok)}"
        )
    parser.eat('ID')
    parser.eat('LPAREN')
    params = []
    if parser.curr_token.type != 'RPAREN':
        params.append(_parse_param(parser, params))
        while parser.curr_token.type == 'COMMA':
            parser.eat('COMMA')
            params.append(_parse_param(parser, params))
    parser.eat('RPAREN')

    parser.function_depth += 1
    try:
        body = parser.block()
    finally:
        parser.function_depth -= 1
    return ('func_def', name_tok.value, params, body, start_tok.pos)


def _parse_param(parser: 'Parser', seen: list) -> str:
    tok = parser.curr_token
    if tok.type != 'ID':
        raise parser.error(f"Expected parameter name, but got {parser.describe(tok)}")
    if tok.value in seen:
        raise parser.error(f"Duplicate parameter '{tok.value}'")
    parser.eat('ID')
    return tok.value


def parse_return(parser: 'Parser') -> tuple:
    """
    Parse a ``return`` statement. The value is optional.

    Syntax:
        return [<expression>]

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('return', expr_or_None, position)
    """
    tok = parser.curr_token
    if parser.function_depth == 0:
        raise parser.error("'return' outside of a function")
    parser.eat('RETURN')
    if parser.curr_token.type in ('SEMI', 'RBRACE', 'EOF'):
        return ('return', None, tok.pos)
    return ('return', parser.expr(), tok.pos)
