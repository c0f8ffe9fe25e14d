"""Errors.

Every error raised by the lexer, parser or interpreter derives from
:class:`CocoError`, so a host can catch a single type and still tell the
phases apart by subclass.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class CocoError(Exception):
    """
    Base class for errors carrying a source location.
    """
    def __init__(self, message, line=None, column=None, file=None):
        self.message = message
        self.line = line
        self.column = column
        self.file = file
        text = message
        if line is not None:
            text += f" on line {line}"
            if column is not None:
                text += f", column {column}"
        if file is not None:
            text += f" in {file}"
        super().__init__(text)


class LexError(CocoError):
    """
    Error for unterminated literals and unrecognized characters.
    """


class ParseError(CocoError):
    """
    Error for unexpected or missing tokens.
    """
    def __init__(self, message, line=None, column=None, file=None, at_eof=False):
        self.at_eof = at_eof
        super().__init__(message, line, column, file)


class CocoRuntimeError(CocoError):
    """
    Error raised while evaluating a program.
    """


class UndefinedVariableError(CocoRuntimeError):
    """
    Error for undefined variables.
    """
    kind = "variable"

    def __init__(self, varname, line=None, column=None, file=None):
        self.varname = varname
        super().__init__(f"Undefined {self.kind} '{varname}'", line, column, file)


class UnknownFunctionError(UndefinedVariableError):
    """
    Error for calls to a name that is not bound anywhere.
    """
    kind = "function"


class TypeMismatchError(CocoRuntimeError):
    """
    Error for operands or arguments of the wrong type.
    """


class DivisionByZeroError(CocoRuntimeError):
    """
    Error for division or remainder by zero.
    """


class ArityError(CocoRuntimeError):
    """
    Error for calls with the wrong number of arguments.
    """


class NotCallableError(CocoRuntimeError):
    """
    Error for calling a value that is not a function.
    """


class ReturnControlFlow(Exception):
    """
    Control flow handling for return statements.
    """
    def __init__(self, value):
        self.value = value
