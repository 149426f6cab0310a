"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
arithmetic, variables, closures, function calls, conditionals, loops, and output statements.

1. Execution Model
The interpreter evaluates an abstract syntax tree (AST) in a top-down, recursive manner.
Statements are executed via `execute()` and expressions are evaluated via `eval_expr()`.
Both take the `Environment` to run in. `execute()` returns None when a statement falls
through normally and a `Returned` when a `return` fired; blocks and loops hand a
`Returned` straight back up without running anything else, and the call that started
the function body unwraps it.

2. Environment
The interpreter owns a global `Environment`. Every block gets a fresh child scope, and
every call gets a child of the scope the function was *declared* in, not of the caller's,
so scoping is lexical. Scopes are shared, so closures observe later assignments.

3. Expression Evaluation
Operators check the kinds of their operands and raise `TypeMismatchError` on misuse.
`+` adds numbers or concatenates strings, `*` also repeats a string, and `/` follows
IEEE-754, so dividing by zero gives inf or NaN. Equality and ordering across kinds
yield false rather than failing. `and` and `or` short-circuit and yield booleans.

4. Control Flow
Control constructs include:
- `if`/`else`: executes a branch based on the truthiness of the condition.
- `while` (and `for`, which the parser turns into `while`): re-checks the condition
  before every iteration.
- `block`: executes a nested sequence of statements in its own scope.

5. Error Handling
The first error aborts the statement being run. Errors are typed (`EvaluationError`
subclasses) and carry the position of the node that failed and the script label.


File: interpreter.py
Version: 0.1.0
License: MIT
"""

import math
import os
import sys
from typing import Any, TextIO

from bwlang.environment import Environment
from bwlang.exceptions import (
    ArityMismatchError,
    EvaluationError,
    NotCallableError,
    ParseError,
    RepetitionTooLargeError,
    StackOverflowError,
    TypeMismatchError,
)
from bwlang.lexer import tokenize
from bwlang.nodes import (
    Assign,
    Binary,
    Block,
    BlockExpr,
    Boolean,
    Call,
    Empty,
    ExprStmt,
    FuncDef,
    Grouping,
    If,
    Logical,
    Nil,
    Number,
    Print,
    Return,
    String,
    Unary,
    VarDecl,
    Variable,
    While,
    format_node,
)
from bwlang.operations import Op
from bwlang.parser import Parser
from bwlang.values import (
    FunctionValue,
    Returned,
    compare,
    display,
    format_number,
    is_truthy,
    kind_name,
    values_equal,
)


# Longest string a repetition may build.
MAX_STRING_LENGTH = 2 ** 30

# Host frame limit while interpreting; each interpreted call costs a few frames.
RECURSION_LIMIT = 10_000


def _divide(lhs: float, rhs: float) -> float:
    """
    IEEE-754 division: x/0 is +-inf and 0/0 is NaN.
    """
    if rhs != 0:
        return lhs / rhs
    if lhs == 0 or math.isnan(lhs):
        return math.nan
    return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)


def _repeat(text: str, count: float, position=None, file=None) -> str:
    """
    String repetition; the count is truncated and anything below one,
    or not finite, gives the empty string.

    Raises:
        RepetitionTooLargeError: If the result would exceed MAX_STRING_LENGTH.
    """
    if not math.isfinite(count) or count < 1:
        return ""
    times = int(count)
    if len(text) * times > MAX_STRING_LENGTH:
        raise RepetitionTooLargeError(len(text), format_number(count), position, file)
    return text * times


class Interpreter:
    """Tree-walk interpreter for bwlang."""

    def __init__(self, file: str = "<stdin>", output: TextIO | None = None):
        """
        Initialize the interpreter.

        Args:
            file: Label of the script, attached to runtime errors.
            output: Stream `print` writes to; defaults to the current ``sys.stdout``.
        """
        self.globals = Environment()
        self.file = file
        self.output = output

    # ------------------------------------------------------------------
    # Front-end entry points
    # ------------------------------------------------------------------

    def interpret(self, source: str) -> str | None:
        """
        Run one unit of source text, such as a script or a REPL line.

        A unit that parses as a single bare expression is evaluated and its
        display string returned. Anything else is parsed as a program and
        executed for its effects, and None is returned.

        Raises:
            LexError, ParseError, EvaluationError: The first error of the
                stage that failed.
        """
        tokens = tokenize(source, self.file)
        try:
            node = Parser(tokens, self.file).parse_expression()
        except ParseError:
            node = None
        if node is not None:
            self._debug(tokens, [node])
            return display(self.evaluate(node))

        statements = Parser(tokens, self.file).parse()
        self._debug(tokens, statements)
        self.run(statements)
        return None

    def run(self, statements: list) -> None:
        """
        Execute a program's top-level statements in the global scope.

        A top-level `return` stops the program.
        """
        limit = sys.getrecursionlimit()
        sys.setrecursionlimit(max(limit, RECURSION_LIMIT))
        try:
            for stmt in statements:
                if self.execute(stmt, self.globals) is not None:
                    break
        except RecursionError:
            raise StackOverflowError(file=self.file) from None
        finally:
            sys.setrecursionlimit(limit)

    def evaluate(self, node) -> Any:
        """
        Evaluate an expression in the global scope.
        """
        limit = sys.getrecursionlimit()
        sys.setrecursionlimit(max(limit, RECURSION_LIMIT))
        try:
            return self.eval_expr(node, self.globals)
        except RecursionError:
            raise StackOverflowError(file=self.file) from None
        finally:
            sys.setrecursionlimit(limit)

    def _debug(self, tokens, nodes) -> None:
        """
        Print tokens and AST when BWLDEBUG is set.
        """
        if not os.environ.get('BWLDEBUG'):
            return
        print("\nTokens:\n", file=sys.stderr)
        print(tokens, file=sys.stderr)
        print("\nAST:\n", file=sys.stderr)
        for node in nodes:
            print(format_node(node), file=sys.stderr)
        print(" ", file=sys.stderr)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def eval_expr(self, node, env: Environment) -> Any:
        """
        Recursively evaluate an expression node and return its computed value.

        Parameters:
            node: An expression node.
            env: The scope to evaluate in.

        Returns:
            The evaluated result of the expression. For `if`, `while` and block
            expressions this may be a `Returned` when a `return` fired inside.

        Raises:
            EvaluationError: On type mismatches, bad variable access or bad calls.
        """
        match node:
            # Literals
            case Number(value=value) | String(value=value) | Boolean(value=value):
                return value
            case Nil():
                return None
            case Grouping(expression=expression):
                return self.eval_expr(expression, env)

            # Variables
            case Variable(name=name, position=position):
                try:
                    return env.lookup(name, position)
                except EvaluationError as e:
                    e.file = self.file
                    raise
            case Assign(name=name, value=value_node, position=position):
                value = self.eval_expr(value_node, env)
                try:
                    return env.assign(name, value, position)
                except EvaluationError as e:
                    e.file = self.file
                    raise

            # Operators
            case Logical(op=op, left=left, right=right):
                lhs = is_truthy(self.eval_expr(left, env))
                if op == Op.AND:
                    return lhs and is_truthy(self.eval_expr(right, env))
                return lhs or is_truthy(self.eval_expr(right, env))
            case Unary(op=op, operand=operand, position=position):
                return self._unary(op, self.eval_expr(operand, env), position)
            case Binary(op=op, left=left, right=right, position=position):
                lhs = self.eval_expr(left, env)
                rhs = self.eval_expr(right, env)
                return self._binary(op, lhs, rhs, position)

            # Function calls
            case Call():
                return self._call(node, env)

            # Control flow
            case BlockExpr(statements=statements):
                return self._run_block(statements, env.child())
            case If(condition=condition, then_branch=then_branch, else_branch=else_branch):
                if is_truthy(self.eval_expr(condition, env)):
                    return self._branch_value(then_branch, env)
                if else_branch is not None:
                    return self._branch_value(else_branch, env)
                return None
            case While(condition=condition, body=body):
                while is_truthy(self.eval_expr(condition, env)):
                    result = self.execute(body, env)
                    if result is not None:
                        return result
                return None

        raise TypeError(f"Invalid expression node: {node!r}")

    def _unary(self, op: Op, operand: Any, position) -> Any:
        match op:
            case Op.NOT:
                return not is_truthy(operand)
            case Op.NEGATE:
                if not isinstance(operand, float):
                    raise TypeMismatchError(op.symbol, kind_name(operand), None, position, self.file)
                return -operand
        raise TypeError(f"Unknown unary operator '{op}'")

    def _binary(self, op: Op, lhs: Any, rhs: Any, position) -> Any:
        numbers = isinstance(lhs, float) and isinstance(rhs, float)
        match op:
            # Arithmetic
            case Op.ADD:
                if numbers or (isinstance(lhs, str) and isinstance(rhs, str)):
                    return lhs + rhs
            case Op.SUB:
                if numbers:
                    return lhs - rhs
            case Op.MUL:
                if numbers:
                    return lhs * rhs
                if isinstance(lhs, str) and isinstance(rhs, float):
                    return _repeat(lhs, rhs, position, self.file)
                if isinstance(lhs, float) and isinstance(rhs, str):
                    return _repeat(rhs, lhs, position, self.file)
            case Op.DIV:
                if numbers:
                    return _divide(lhs, rhs)
            # Comparison
            case Op.EQUAL:
                return values_equal(lhs, rhs)
            case Op.NOT_EQUAL:
                return not values_equal(lhs, rhs)
            case Op.GREATER:
                return compare(lhs, rhs) == 1
            case Op.GREATER_EQUAL:
                return compare(lhs, rhs) in (0, 1)
            case Op.LESS:
                return compare(lhs, rhs) == -1
            case Op.LESS_EQUAL:
                return compare(lhs, rhs) in (-1, 0)
            case _:
                raise TypeError(f"Unknown binary operator '{op}'")
        raise TypeMismatchError(op.symbol, kind_name(lhs), kind_name(rhs), position, self.file)

    def _call(self, node: Call, env: Environment) -> Any:
        callee = self.eval_expr(node.callee, env)
        args = [self.eval_expr(arg, env) for arg in node.arguments]

        if not isinstance(callee, FunctionValue):
            raise NotCallableError(kind_name(callee), node.position, self.file)
        if len(args) != callee.arity:
            raise ArityMismatchError(
                callee.name, callee.arity, len(args), node.position, self.file
            )

        scope = callee.closure.child()
        for name, value in zip(callee.params, args):
            scope.declare(name, value)
        result = self._run_block(callee.body.statements, scope)
        if isinstance(result, Returned):
            return result.value
        return None

    def _run_block(self, statements, env: Environment) -> Any:
        """
        Execute ``statements`` in ``env``. Returns the first `Returned`, or
        else the value of the last statement if it is an expression statement.
        """
        last = None
        for stmt in statements:
            if isinstance(stmt, ExprStmt):
                last = self.eval_expr(stmt.expression, env)
                if isinstance(last, Returned):
                    return last
                continue
            last = None
            result = self.execute(stmt, env)
            if result is not None:
                return result
        return last

    def _branch_value(self, stmt, env: Environment) -> Any:
        if isinstance(stmt, ExprStmt):
            return self.eval_expr(stmt.expression, env)
        if isinstance(stmt, Block):
            return self._run_block(stmt.statements, env.child())
        return self.execute(stmt, env)

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def execute(self, stmt, env: Environment) -> Returned | None:
        """
        Execute one statement.

        Parameters:
            stmt: A statement node.
            env: The scope to execute in.

        Returns:
            A `Returned` if a `return` fired, otherwise None.
        """
        match stmt:
            case Print(expression=expression):
                print(display(self.eval_expr(expression, env)), file=self.output)
                return None

            case VarDecl(name=name, initializer=None):
                env.declare(name)
                return None
            case VarDecl(name=name, initializer=initializer):
                env.declare(name, self.eval_expr(initializer, env))
                return None

            case ExprStmt(expression=expression):
                value = self.eval_expr(expression, env)
                return value if isinstance(value, Returned) else None

            case FuncDef(name=name, params=params, body=body):
                env.declare(name, FunctionValue(name, params, body, env))
                return None

            case Return(value=None):
                return Returned(None)
            case Return(value=value):
                return Returned(self.eval_expr(value, env))

            case Block(statements=statements):
                scope = env.child()
                for inner in statements:
                    result = self.execute(inner, scope)
                    if result is not None:
                        return result
                return None

            case Empty():
                return None

        raise TypeError(f"Unknown statement type: {stmt!r}")
