"""Shared definitions for AST operation identifiers.

This module centralizes the string constants used by the parser and
interpreter to label operator nodes in the abstract syntax tree. Keeping them
in one place prevents the two components from drifting apart when new
operations are added or existing ones are renamed.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported AST operation names.
    """

    # Arithmetic
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"

    # Comparison
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    LT = "lt"
    GE = "ge"
    LE = "le"

    # Boolean
    AND = "and"
    OR = "or"

    # Unary
    NEG = "neg"
    NOT = "not"

    @property
    def symbol(self) -> str:
        """
        Return the source spelling of the operator.
        """
        return SYMBOLS[self]

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


SYMBOLS = {
    Op.ADD: "+",
    Op.SUB: "-",
    Op.MUL: "*",
    Op.DIV: "/",
    Op.MOD: "%",
    Op.EQ: "==",
    Op.NE: "!=",
    Op.GT: ">",
    Op.LT: "<",
    Op.GE: ">=",
    Op.LE: "<=",
    Op.AND: "&&",
    Op.OR: "||",
    Op.NEG: "-",
    Op.NOT: "!",
}

ARITHMETIC = frozenset({Op.ADD, Op.SUB, Op.MUL, Op.DIV, Op.MOD})
ORDERING = frozenset({Op.GT, Op.LT, Op.GE, Op.LE})
EQUALITY = frozenset({Op.EQ, Op.NE})


__all__ = ["Op", "SYMBOLS", "ARITHMETIC", "ORDERING", "EQUALITY"]
