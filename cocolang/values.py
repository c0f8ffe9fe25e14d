"""Runtime values for Coco.

Coco values map directly onto Python objects:

    number    float (never int or bool)
    string    str
    boolean   bool
    null      None
    function  BuiltinFunction or FunctionValue

Every operator and built-in goes through the helpers in this module so the
set of value kinds stays closed: anything else reaching them is an
interpreter bug and raises ``TypeError``.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
from typing import Callable


class BuiltinFunction:
    """Runtime representation of a native function."""

    def __init__(self, name: str, impl: Callable, arity: int | None = None, min_args: int = 0):
        """
        Parameters:
            name (str): The name the function is registered under.
            impl (Callable): ``impl(interpreter, args, pos)`` returning a value.
            arity (int | None): Exact argument count, or None for variadic.
            min_args (int): Minimum argument count for variadic functions.
        """
        self.name = name
        self.impl = impl
        self.arity = arity
        self.min_args = min_args

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"


class FunctionValue:
    """Runtime representation of a user-defined function."""

    def __init__(self, name, params, body, env):
        self.name = name
        self.params = params
        self.body = body
        # Scope the function was declared in; calls run in a child of it.
        self.env = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def __repr__(self) -> str:
        return f"<fun {self.name}>"


def type_name(value) -> str:
    """
    Return the Coco type name of a value.
    """
    match value:
        case None:
            return "null"
        case bool():
            return "boolean"
        case float():
            return "number"
        case str():
            return "string"
        case BuiltinFunction() | FunctionValue():
            return "function"
    raise TypeError(f"Not a Coco value: {value!r}")


def is_truthy(value) -> bool:
    """
    Coerce a value to a boolean for control flow.

    Numbers are true unless zero, strings unless empty, booleans are taken as
    is, null is false and functions are always true.
    """
    match type_name(value):
        case "boolean":
            return value
        case "number":
            return value != 0.0
        case "string":
            return value != ""
        case "null":
            return False
        case "function":
            return True


def values_equal(lhs, rhs) -> bool:
    """
    Structural equality: same type and same underlying value.
    """
    kind = type_name(lhs)
    if kind != type_name(rhs):
        return False
    if kind == "function":
        return lhs is rhs
    return lhs == rhs


def format_number(value: float) -> str:
    """
    Render a number without a trailing ``.0`` when it is integral.
    """
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def format_value(value) -> str:
    """
    Render a value the way ``log`` prints it.
    """
    match type_name(value):
        case "number":
            return format_number(value)
        case "string":
            return value
        case "boolean":
            return "true" if value else "false"
        case "null":
            return "null"
        case "function":
            return repr(value)


def repr_value(value) -> str:
    """
    Render a value for the REPL echo, quoting strings.
    """
    if type_name(value) == "string":
        return f"'{value}'"
    return format_value(value)
