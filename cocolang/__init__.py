"""Coco language core.

Lexer, parser and tree-walk interpreter for the Coco scripting language.
`parse()` and `run()` are the entry points shared by the file runner and the
REPL; both accept an existing interpreter so state can persist across runs.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from cocolang.exceptions import CocoError, CocoRuntimeError, LexError, ParseError
from cocolang.interpreter import Interpreter
from cocolang.lexer import Lexer, Token, tokenize
from cocolang.parser import Parser

__version__ = "0.1.0"


def parse(source: str, file: str = "<input>") -> list:
    """
    Lex and parse source text into a list of statement nodes.

    Raises:
        LexError: If the source cannot be tokenized.
        ParseError: If the tokens do not form a valid program.
    """
    tokens = tokenize(source, file)
    return Parser(tokens, file).parse()


def run(source: str, interpreter: Interpreter | None = None, file: str = "<input>") -> Interpreter:
    """
    Parse and execute source text, returning the interpreter used.

    Nothing is executed unless the whole source lexes and parses.
    """
    ast = parse(source, file)
    if interpreter is None:
        interpreter = Interpreter(file)
    interpreter.execute(ast)
    return interpreter


__all__ = [
    "CocoError",
    "CocoRuntimeError",
    "Interpreter",
    "LexError",
    "Lexer",
    "ParseError",
    "Parser",
    "Token",
    "parse",
    "run",
    "tokenize",
]
