"""Built-in functions for Coco.

The registry below is fixed: every interpreter copies it into its root
environment before running anything, so user code can shadow a built-in in
an inner scope but never changes the registry itself.

Each implementation receives the calling interpreter, the evaluated argument
list and the call position, and returns a Coco value. Arity is checked by
the interpreter before the implementation runs.


File: builtins.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
import re

from cocolang.exceptions import CocoRuntimeError, TypeMismatchError
from cocolang.values import BuiltinFunction, format_value, type_name

NUMBER_PATTERN = re.compile(r'\s*-?[0-9]+(?:\.[0-9]+)?\s*')


def _log(interpreter, args, pos):
    print(" ".join(format_value(arg) for arg in args), file=interpreter.stdout)
    return None


def _number(interpreter, args, pos):
    value = args[0]
    match type_name(value):
        case "number":
            return value
        case "boolean":
            return 1.0 if value else 0.0
        case "null":
            return 0.0
        case "string":
            if NUMBER_PATTERN.fullmatch(value):
                return float(value)
            raise TypeMismatchError(
                f"number() cannot convert string '{value}'",
                pos.line, pos.column, interpreter.file,
            )
    raise TypeMismatchError(
        f"number() cannot convert a {type_name(value)}",
        pos.line, pos.column, interpreter.file,
    )


def _string(interpreter, args, pos):
    return format_value(args[0])


def _typeof(interpreter, args, pos):
    return type_name(args[0])


def _require_numbers(name, interpreter, args, pos):
    for arg in args:
        if type_name(arg) != "number":
            raise TypeMismatchError(
                f"{name}() expects number arguments, got {type_name(arg)}",
                pos.line, pos.column, interpreter.file,
            )


def _round_half_away(value: float) -> float:
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _numeric(name, fn):
    """
    Wrap a float function as a built-in that only accepts numbers.
    """
    def impl(interpreter, args, pos):
        _require_numbers(name, interpreter, args, pos)
        try:
            return float(fn(*args))
        except (ValueError, OverflowError) as exc:
            raise CocoRuntimeError(
                f"{name}() failed: {exc}",
                pos.line, pos.column, interpreter.file,
            ) from exc
    return impl


def _finite(fn):
    return lambda value: fn(value) if math.isfinite(value) else value


BUILTINS: dict[str, BuiltinFunction] = {
    builtin.name: builtin
    for builtin in (
        BuiltinFunction("log", _log),
        BuiltinFunction("number", _number, arity=1),
        BuiltinFunction("string", _string, arity=1),
        BuiltinFunction("typeof", _typeof, arity=1),
        BuiltinFunction("abs", _numeric("abs", abs), arity=1),
        BuiltinFunction("floor", _numeric("floor", _finite(math.floor)), arity=1),
        BuiltinFunction("ceil", _numeric("ceil", _finite(math.ceil)), arity=1),
        BuiltinFunction("round", _numeric("round", _round_half_away), arity=1),
        BuiltinFunction("sqrt", _numeric("sqrt", math.sqrt), arity=1),
        BuiltinFunction("pow", _numeric("pow", math.pow), arity=2),
        BuiltinFunction("min", _numeric("min", lambda *args: min(args)), min_args=1),
        BuiltinFunction("max", _numeric("max", lambda *args: max(args)), min_args=1),
    )
}


def install(env) -> None:
    """
    Bind every built-in into ``env``.
    """
    for name, builtin in BUILTINS.items():
        env.define(name, builtin)
