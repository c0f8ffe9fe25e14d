"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
arithmetic, variables, function definitions and calls, conditionals, loops, and built-in calls.

1. Execution Model
The interpreter evaluates an abstract syntax tree (AST) in a top-down, recursive manner.
Statements are executed via the `execute()` method, and expressions are evaluated using
`eval_expr()`. Both methods operate over structured tuples representing nodes in the AST;
the last element of every node is its source position.

2. Environment
The interpreter holds a root `Environment` pre-populated with the built-ins, and `env`, the
scope currently in effect. Blocks, loop iterations and function calls run in a fresh child
scope which is dropped again when they finish, including when an error unwinds through them.
A single interpreter can execute many programs in turn against the same root scope.

3. Expression Evaluation
Operands are evaluated left to right. Arithmetic requires numbers, except `+` on two strings
which concatenates. Ordering comparisons require numbers; `==` and `!=` compare any values
structurally. Violations raise `TypeMismatchError`, division or remainder by zero raises
`DivisionByZeroError`.

4. Control Flow
- `while`: repeats its block while the condition is truthy.
- `if`/`else`: runs the first branch whose condition is truthy.
- `return`: unwinds to the enclosing function call.
Truthiness is defined by `cocolang.values.is_truthy`.

5. Error Handling
Runtime errors, such as undefined variables, type mismatches, or bad calls, are surfaced as
`CocoRuntimeError` subclasses with line, column and file context.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math

from cocolang import builtins
from cocolang.environment import Environment
from cocolang.exceptions import (
    ArityError,
    CocoRuntimeError,
    DivisionByZeroError,
    NotCallableError,
    ReturnControlFlow,
    TypeMismatchError,
    UnknownFunctionError,
)
from cocolang.operations import ARITHMETIC, EQUALITY, ORDERING, Op
from cocolang.values import (
    BuiltinFunction,
    FunctionValue,
    format_number,
    is_truthy,
    type_name,
    values_equal,
)


class Interpreter:
    """
    Tree-walk interpreter for Coco.
    """
    def __init__(self, file: str = "<input>", stdout=None):
        """
        Initialize the interpreter.

        Parameters:
            file (str): The name of the script, used in error messages.
            stdout: Stream the ``log`` built-in writes to. Defaults to
                ``sys.stdout`` at the time of the call.
        """
        self.file = file
        self.stdout = stdout
        self.global_env = Environment()
        builtins.install(self.global_env)
        self.env = self.global_env

    def error(self, cls, message: str, pos) -> CocoRuntimeError:
        """
        Build a runtime error of type ``cls`` located at ``pos``.
        """
        return cls(message, pos.line, pos.column, self.file)

    def _format_expr(self, node) -> str:
        """
        Convert AST back to a readable string for error messages.
        """
        op = node[0]
        match op:
            case 'ident':
                return node[1]
            case 'number':
                return format_number(node[1])
            case 'string':
                return repr(node[1])
            case 'bool':
                return 'true' if node[1] else 'false'
            case 'null':
                return 'null'
            case 'unary':
                return f"{node[1].symbol}{self._format_expr(node[2])}"
            case 'func_call':
                fname, args = node[1], node[2]
                return f"{fname}({', '.join(self._format_expr(arg) for arg in args)})"
            case 'assign':
                return f"{node[1]} = {self._format_expr(node[2])}"
            case 'compound_assign':
                return f"{node[1]} {node[2].symbol}= {self._format_expr(node[3])}"
            case Op():
                return (
                    f"({self._format_expr(node[1])} {op.symbol} "
                    f"{self._format_expr(node[2])})"
                )
            case _:
                return f"<expr {op}>"

    def eval_expr(self, node):
        """
        Recursively evaluate an expression node and return its computed value.

        Parameters:
            node (tuple): An expression node, structured as a tuple.
                The first element is the node kind (e.g. 'ident', Op.ADD),
                followed by operands and the source position.

        Returns:
            The evaluated Coco value.

        Raises:
            CocoRuntimeError: On undefined names, type mismatches, division by
                zero, or invalid calls.
        """
        op = node[0]
        pos = node[-1]

        # Literals
        if op in ('number', 'string', 'bool'):
            return node[1]
        elif op == 'null':
            return None

        # Variables
        elif op == 'ident':
            return self.env.lookup(node[1], pos, self.file)

        elif op == 'assign':
            _, name, value_node, _ = node
            value = self.eval_expr(value_node)
            self.env.assign(name, value, pos, self.file)
            return value

        elif op == 'compound_assign':
            _, name, operator, value_node, _ = node
            current = self.env.lookup(name, pos, self.file)
            rhs = self.eval_expr(value_node)
            value = self.binary_op(operator, current, rhs, pos)
            self.env.assign(name, value, pos, self.file)
            return value

        # Short-circuit logic
        elif op == Op.AND:
            if not is_truthy(self.eval_expr(node[1])):
                return False
            return is_truthy(self.eval_expr(node[2]))

        elif op == Op.OR:
            if is_truthy(self.eval_expr(node[1])):
                return True
            return is_truthy(self.eval_expr(node[2]))

        # Binary operations
        elif op in ARITHMETIC or op in ORDERING or op in EQUALITY:
            lhs = self.eval_expr(node[1])
            rhs = self.eval_expr(node[2])
            return self.binary_op(op, lhs, rhs, pos)

        # Unary operators
        elif op == 'unary':
            operator = node[1]
            operand = self.eval_expr(node[2])
            match operator:
                case Op.NOT:
                    return not is_truthy(operand)
                case Op.NEG:
                    if type_name(operand) != 'number':
                        raise self.error(
                            TypeMismatchError,
                            f"Unary minus (-) requires a number, got {type_name(operand)} "
                            f"in {self._format_expr(node)}",
                            pos,
                        )
                    return -operand

        # Function calls
        elif op == 'func_call':
            return self.call(node)

        raise self.error(CocoRuntimeError, f"Invalid expression node: {node}", pos)

    def binary_op(self, op: Op, lhs, rhs, pos):
        """
        Apply a non-short-circuit binary operator to two evaluated operands.

        Raises:
            TypeMismatchError: If the operand types are not supported.
            DivisionByZeroError: If dividing or taking a remainder by zero.
        """
        if op in EQUALITY:
            equal = values_equal(lhs, rhs)
            return equal if op == Op.EQ else not equal

        lhs_type = type_name(lhs)
        rhs_type = type_name(rhs)

        if op == Op.ADD and lhs_type == rhs_type == 'string':
            return lhs + rhs

        if lhs_type != 'number' or rhs_type != 'number':
            raise self.error(
                TypeMismatchError,
                f"Unsupported operand types for '{op.symbol}': {lhs_type} and {rhs_type}",
                pos,
            )

        match op:
            # Arithmetic
            case Op.ADD:
                return lhs + rhs
            case Op.SUB:
                return lhs - rhs
            case Op.MUL:
                return lhs * rhs
            case Op.DIV:
                if rhs == 0.0:
                    raise self.error(DivisionByZeroError, "Division by zero", pos)
                return lhs / rhs
            case Op.MOD:
                if rhs == 0.0:
                    raise self.error(DivisionByZeroError, "Remainder by zero", pos)
                return math.fmod(lhs, rhs)
            # Comparison
            case Op.GT:
                return lhs > rhs
            case Op.LT:
                return lhs < rhs
            case Op.GE:
                return lhs >= rhs
            case Op.LE:
                return lhs <= rhs
        raise self.error(CocoRuntimeError, f"Unknown binary operator '{op}'", pos)

    def call(self, node):
        """
        Evaluate a call expression.

        The callee is resolved first, then the arguments are evaluated left to
        right, then the argument count is checked.
        """
        _, func_name, args_nodes, pos = node

        scope = self.env.resolve(func_name)
        if scope is None:
            raise UnknownFunctionError(func_name, pos.line, pos.column, self.file)
        callee = scope.vars[func_name]
        if not isinstance(callee, (BuiltinFunction, FunctionValue)):
            raise self.error(
                NotCallableError,
                f"'{func_name}' is a {type_name(callee)} and cannot be called",
                pos,
            )

        args = [self.eval_expr(arg) for arg in args_nodes]

        if callee.arity is not None and len(args) != callee.arity:
            plural = '' if callee.arity == 1 else 's'
            raise self.error(
                ArityError,
                f"Function '{func_name}' expects {callee.arity} argument{plural}, "
                f"got {len(args)} in {self._format_expr(node)}",
                pos,
            )
        if isinstance(callee, BuiltinFunction):
            if len(args) < callee.min_args:
                raise self.error(
                    ArityError,
                    f"Function '{func_name}' expects at least {callee.min_args} "
                    f"argument{'' if callee.min_args == 1 else 's'}, got {len(args)}",
                    pos,
                )
            return callee.impl(self, args, pos)

        return self.call_function(callee, args, pos)

    def call_function(self, func: FunctionValue, args: list, pos):
        """
        Run a user-defined function body in a child of its defining scope.
        """
        call_env = func.env.child()
        for name, value in zip(func.params, args):
            call_env.define(name, value)

        saved_env = self.env
        self.env = call_env
        try:
            self.execute(func.body[1])
        except ReturnControlFlow as ret:
            return ret.value
        except RecursionError:
            raise self.error(
                CocoRuntimeError,
                f"Maximum recursion depth exceeded in '{func.name}'",
                pos,
            ) from None
        finally:
            self.env = saved_env
        return None

    def execute_block(self, statements: list) -> None:
        """
        Execute statements in a fresh child scope of the current one.
        """
        saved_env = self.env
        self.env = saved_env.child()
        try:
            self.execute(statements)
        finally:
            self.env = saved_env

    def execute(self, statements: list) -> None:
        """
        Executes a list of statements.

        Parameters:
            statements (list):
                A list of ('let' | 'while' | 'if' | 'block' | 'expr_stmt' | ...) tuples.
        """
        for stmt in statements:
            self.execute_statement(stmt)

    def execute_statement(self, stmt: tuple):
        """
        Execute one statement.

        Returns:
            The value of an expression statement, otherwise None.

        Raises:
            CocoRuntimeError: For runtime failures, unknown statement types and
                nesting that exhausts the Python stack.
        """
        try:
            return self._execute_statement(stmt)
        except RecursionError:
            raise self.error(
                CocoRuntimeError, "Maximum recursion depth exceeded", stmt[-1]
            ) from None

    def _execute_statement(self, stmt: tuple):
        kind = stmt[0]
        pos = stmt[-1]

        if kind == 'let':
            _, var_name, expr_node, _ = stmt
            value = self.eval_expr(expr_node)
            self.env.define(var_name, value)

        elif kind == 'expr_stmt':
            return self.eval_expr(stmt[1])

        elif kind == 'while':
            _, cond_node, block_node, _ = stmt
            while is_truthy(self.eval_expr(cond_node)):
                self.execute_block(block_node[1])

        elif kind == 'if':
            _, cond_node, then_block, else_node, _ = stmt
            if is_truthy(self.eval_expr(cond_node)):
                self.execute_block(then_block[1])
            elif else_node is not None:
                self.execute_statement(else_node)

        elif kind == 'block':
            self.execute_block(stmt[1])

        elif kind == 'func_def':
            _, name, params, body, _ = stmt
            self.env.define(name, FunctionValue(name, params, body, self.env))

        elif kind == 'return':
            expr_node = stmt[1]
            value = self.eval_expr(expr_node) if expr_node is not None else None
            raise ReturnControlFlow(value)

        else:
            raise self.error(CocoRuntimeError, f"Unknown statement type: {kind}", pos)
        return None
