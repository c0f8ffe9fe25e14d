"""
Coco Language Interpreter

This is the main entry point for the Coco language interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.

With no arguments an interactive REPL is started instead. Set ``COCODEBUG``
to dump the token stream and AST before each program runs.
"""
import os
import sys

from cocolang import parse, tokenize
from cocolang.exceptions import CocoError, ParseError
from cocolang.interpreter import Interpreter
from cocolang.values import repr_value


def print_usage(file=None):
    """
    Print usage.
    """
    out = file or sys.stdout
    print(file=out)
    print("Coco Language Interpreter", file=out)
    print(file=out)
    print("Usage:", file=out)
    print("    coco <script.coco>", file=out)
    print(file=out)
    print("Arguments:", file=out)
    print("    <script.coco>", file=out)
    print("        Path to a Coco source file to execute.", file=out)
    print(file=out)
    print("Example:", file=out)
    print("    coco hello.coco", file=out)
    print(file=out)
    print("Or run with no arguments to enter interactive mode (REPL).", file=out)
    print(file=out)
    print("Options:", file=out)
    print("    -h, --help", file=out)
    print("        Show this help message and exit.", file=out)


def debug_print_tokens_ast(source: str, file: str, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    for token in tokenize(source, file):
        print(token)
    print("\nAST:\n")
    for node in ast:
        print(node)
    print(" ")


def report(error: Exception):
    """
    Print a diagnostic to stderr.
    """
    print(f"{type(error).__name__}: {error}", file=sys.stderr)


def run_script(script_name: str) -> int:
    """
    Run a Coco script. Returns the process exit status.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        report(e)
        return 1

    try:
        ast = parse(code, script_name)
        if os.environ.get('COCODEBUG'):
            debug_print_tokens_ast(code, script_name, ast)
        Interpreter(script_name).execute(ast)
    except CocoError as e:
        report(e)
        return 1
    return 0


def run_repl():
    """
    Run the interactive REPL.

    Input lines are buffered until they parse; a parse error at the end of
    the buffer is taken to mean the statement continues on the next line.
    Every chunk runs against the same interpreter, so declarations persist.

    Known limitation: a chunk that already parses runs immediately. An
    ``if (...) { ... }`` closed on one line is executed before the next line
    is read, so an ``else`` starting the following line is a parse error.
    Keep ``} else {`` on the same line as the closing brace.
    """
    print("Coco Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>")
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if not buffer and line.strip() in {"exit", "quit"}:
                break
            buffer.append(line)
            source = "\n".join(buffer)
            try:
                ast = parse(source, "<stdin>")
            except ParseError as e:
                if e.at_eof:
                    continue
                report(e)
                buffer.clear()
                continue
            except CocoError as e:
                report(e)
                buffer.clear()
                continue
            buffer.clear()

            if os.environ.get('COCODEBUG'):
                debug_print_tokens_ast(source, "<stdin>", ast)

            try:
                for stmt in ast:
                    value = interpreter.execute_statement(stmt)
                    if stmt[0] == 'expr_stmt' and value is not None:
                        print(repr_value(value))
            except CocoError as e:
                report(e)
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1 and not args[0].startswith('-'):
        return run_script(args[0])
    print_usage(sys.stderr)
    return 1


def cli():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
