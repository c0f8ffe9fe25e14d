"""
Tests for user-defined functions and calls in Coco Language.
"""
import pytest

from cocolang.exceptions import (
    ArityError,
    CocoRuntimeError,
    NotCallableError,
    UndefinedVariableError,
    UnknownFunctionError,
)
from cocolang.interpreter import Interpreter
from cocolang.lexer import Position
from cocolang.operations import Op
from cocolang.values import FunctionValue

from cocolang.tests.utils import output_lines, parse_source, run_source


def test_call_ast_and_runtime(capsys):
    """
    Test that function calls are parsed correctly and execute as expected.
    """
    source = (
        "fun foo() { log(42) }\n"
        "foo()\n"
        "log(foo())\n"
    )
    ast = parse_source(source)
    expr_stmt = ast[1]
    assert expr_stmt[0] == 'expr_stmt'
    assert expr_stmt[1][0] == 'func_call'
    assert expr_stmt[1][1] == 'foo'

    interpreter = run_source(source)
    assert isinstance(interpreter.global_env.lookup('foo'), FunctionValue)
    assert output_lines(capsys) == ['42', '42', 'null']


def test_return_values_and_recursion(capsys):
    """
    Test that return unwinds to the caller, including from recursion.
    """
    run_source(
        "fun fact(n) {\n"
        "    if (n <= 1) { return 1 }\n"
        "    return n * fact(n - 1)\n"
        "}\n"
        "log(fact(5))\n"
        "fun early() { while (true) { return 'out' } }\n"
        "log(early())\n"
        "fun bare() { return }\n"
        "log(bare())\n"
    )
    assert output_lines(capsys) == ['120', 'out', 'null']


def test_functions_have_fresh_env(capsys):
    """
    Test that function locals do not leak into the caller.
    """
    run_source(
        "fun inner() { let x = 1 return x }\n"
        "fun outer() { let x = 2 return inner() + x }\n"
        "log(outer())\n"
    )
    assert output_lines(capsys) == ['3']
    with pytest.raises(UndefinedVariableError):
        run_source("fun f() { let local = 1 } f() log(local)")


def test_globals_visible_and_modifiable(capsys):
    """
    Test that functions read and assign variables of enclosing scopes.
    """
    run_source(
        "let g = 5\n"
        "fun read_g() { return g }\n"
        "fun set_g() { g = 2 }\n"
        "log(read_g())\n"
        "set_g()\n"
        "log(g)\n"
    )
    assert output_lines(capsys) == ['5', '2']


def test_closures_capture_defining_scope(capsys):
    """
    Test that a function keeps access to the scope it was declared in.
    """
    run_source(
        "fun make_counter() {\n"
        "    let count = 0\n"
        "    fun next() { count += 1 return count }\n"
        "    return next\n"
        "}\n"
        "let counter = make_counter()\n"
        "let other = make_counter()\n"
        "counter() counter()\n"
        "log(counter(), other())\n"
    )
    assert output_lines(capsys) == ['3 1']


def test_parameters_shadow_outer_names(capsys):
    """
    Test that parameters are bound in the call scope only.
    """
    run_source("let n = 'outer' fun f(n) { return n } log(f('param'), n)")
    assert output_lines(capsys) == ['param outer']


def test_arguments_evaluated_left_to_right(capsys):
    """
    Test argument evaluation order.
    """
    run_source(
        "let i = 0\n"
        "fun next() { i += 1 return i }\n"
        "log(next(), next(), next())\n"
    )
    assert output_lines(capsys) == ['1 2 3']


def test_arity_mismatch():
    """
    Test that calling with the wrong number of arguments fails.
    """
    with pytest.raises(ArityError, match="expects 1 argument, got 0"):
        run_source("fun f(a) { } f()")
    with pytest.raises(ArityError, match="expects 2 arguments, got 3"):
        run_source("fun g(a, b) { } g(1, 2, 3)")
    with pytest.raises(ArityError):
        run_source("number()")


def test_unknown_callee():
    """
    Test that calling an unbound name fails and names it.
    """
    with pytest.raises(UnknownFunctionError) as exc_info:
        run_source("nope(1)")
    assert exc_info.value.varname == 'nope'
    assert "Undefined function 'nope'" in str(exc_info.value)
    assert isinstance(exc_info.value, UndefinedVariableError)


def test_unknown_callee_is_resolved_before_arguments(capsys):
    """
    Test that arguments are not evaluated when the callee is unknown.
    """
    with pytest.raises(UnknownFunctionError):
        run_source("nope(log('side effect'))")
    assert output_lines(capsys) == []


def test_calling_a_non_function():
    """
    Test that calling a non-callable value fails.
    """
    with pytest.raises(NotCallableError, match="'x' is a number"):
        run_source("let x = 1 x()")


def test_unbounded_recursion_is_a_runtime_error():
    """
    Test that runaway recursion surfaces as a Coco runtime error.
    """
    with pytest.raises(CocoRuntimeError, match="Maximum recursion depth"):
        run_source("fun forever() { return forever() } forever()")


def test_deeply_nested_expression_is_a_runtime_error(capsys):
    """
    Test that an expression too deep to evaluate raises a Coco runtime error
    and leaves the interpreter usable.
    """
    pos = Position(1, 1)
    node = ('number', 1.0, pos)
    for _ in range(5000):
        node = ('unary', Op.NEG, node, pos)

    interpreter = Interpreter('<test>')
    with pytest.raises(CocoRuntimeError, match="Maximum recursion depth"):
        interpreter.execute([('expr_stmt', node, pos)])
    assert interpreter.env is interpreter.global_env

    run_source("log('still running')", interpreter)
    assert output_lines(capsys) == ['still running']
