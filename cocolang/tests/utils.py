"""
Utility functions shared across Coco Language tests.
"""
from cocolang.lexer import tokenize
from cocolang.parser import Parser
from cocolang.interpreter import Interpreter


def parse_source(source: str):
    """
    Parse source code and return the AST.
    """
    tokens = tokenize(source, "<test>")
    parser = Parser(tokens, "<test>")
    return parser.parse()


def run_source(source: str, interpreter: Interpreter | None = None) -> Interpreter:
    """
    Parse and execute source code, returning the interpreter instance.
    """
    ast = parse_source(source)
    if interpreter is None:
        interpreter = Interpreter('<test>')
    interpreter.execute(ast)
    return interpreter


def output_lines(capsys) -> list[str]:
    """
    Return captured stdout split into lines.
    """
    return capsys.readouterr().out.splitlines()
