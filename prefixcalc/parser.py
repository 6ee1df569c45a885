"""Recursive descent evaluator for prefix-notation integer arithmetic.

No tokenizer: the grammar is scanned directly over the input characters.

    expression := '(' expression ')'
                | digit+
                | operator expression expression
    operator   := '+' | '-' | '*' | '/'

The grammar lives once, in Parser. Subclasses only decide how a failure
travels back up the call stack:

    RaisingParser  — fail() raises ParseError, caught once at the top
    ResultParser   — fail() returns an Err that every rule hands back up

Division by zero is not a classified failure; ZeroDivisionError escapes
from both strategies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Union

from prefixcalc.models import (
    Err,
    ErrorKind,
    EvalResult,
    Ok,
    Op,
    Strategy,
    wrap_int64,
)

# Returned by Cursor.peek() at end of input. Neither whitespace nor a digit.
EOF_SENTINEL = "\0"

_OPERATORS = {op.value: op for op in Op}


def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (Python's // floors)."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


_OP_FUNCS: dict[Op, Callable[[int, int], int]] = {
    Op.ADD: lambda a, b: a + b,
    Op.SUB: lambda a, b: a - b,
    Op.MUL: lambda a, b: a * b,
    Op.DIV: _truncating_div,
}


def _is_digit(c: str) -> bool:
    # ASCII only; str.isdigit() also accepts other Unicode digits.
    return "0" <= c <= "9"


# C-locale isspace set; str.isspace() also accepts Unicode separators.
_WHITESPACE = " \t\n\v\f\r"


class ParseError(Exception):
    """Raised by RaisingParser; carries the classification only."""

    def __init__(self, kind: ErrorKind):
        super().__init__(kind.value)
        self.kind = kind


@dataclass
class Cursor:
    """Forward-only read position over a program string."""

    text: str
    pos: int = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        if self.at_end():
            return EOF_SENTINEL
        return self.text[self.pos]

    def take(self) -> str | None:
        """Consume one character, or return None at end of input."""
        if self.at_end():
            return None
        c = self.text[self.pos]
        self.pos += 1
        return c

    def skip_whitespace(self) -> None:
        while self.peek() in _WHITESPACE:
            self.pos += 1


class Parser(ABC):
    """Grammar core shared by both error-propagation strategies.

    Every rule returns its value or an Err. Call sites check for Err and
    return it immediately, so the first failure in left-to-right order is
    the one reported. With RaisingParser the Err branch is never taken,
    because fail() does not return.

    Parsers hold no per-call state; a fresh Cursor is built for each
    evaluate() call.
    """

    strategy: Strategy

    @abstractmethod
    def fail(self, kind: ErrorKind) -> Err:
        """Signal a classified failure at the current rule."""

    # -- Public API ----------------------------------------------------------

    def evaluate(self, program: str) -> EvalResult:
        """Evaluate a program and return Ok(value) or Err(kind).

        Trailing characters after a complete expression are ignored.
        """
        value = self.expression(Cursor(program))
        if isinstance(value, Err):
            return value
        return Ok(value)

    def execute(self, program: str) -> int:
        """Evaluate a program; any classified failure yields 0."""
        result = self.evaluate(program)
        if isinstance(result, Ok):
            return result.value
        return 0

    # -- Grammar rules -------------------------------------------------------

    def expression(self, cursor: Cursor) -> Union[int, Err]:
        cursor.skip_whitespace()
        c = cursor.peek()
        if c == "(":
            cursor.take()
            cursor.skip_whitespace()
            value = self.expression(cursor)
            if isinstance(value, Err):
                return value
            cursor.skip_whitespace()
            closing = self.expect(cursor, ")")
            if isinstance(closing, Err):
                return closing
            return value
        if _is_digit(c):
            return self.number(cursor)
        return self.inner_expression(cursor)

    def inner_expression(self, cursor: Cursor) -> Union[int, Err]:
        """operator expression expression, evaluated left then right."""
        op = self.operation(cursor)
        if isinstance(op, Err):
            return op
        left = self.expression(cursor)
        if isinstance(left, Err):
            return left
        right = self.expression(cursor)
        if isinstance(right, Err):
            return right
        return wrap_int64(_OP_FUNCS[op](left, right))

    def operation(self, cursor: Cursor) -> Union[Op, Err]:
        c = self.advance(cursor)
        if isinstance(c, Err):
            return c
        op = _OPERATORS.get(c)
        if op is None:
            return self.fail(ErrorKind.INVALID_OPERATOR)
        return op

    def number(self, cursor: Cursor) -> int:
        """Fold a run of digits; an empty run is 0. Never fails."""
        result = 0
        while _is_digit(cursor.peek()):
            c = cursor.take()
            result = wrap_int64(result * 10 + (ord(c) - ord("0")))
        return result

    def expect(self, cursor: Cursor, expected: str) -> Union[str, Err]:
        # EOF from advance() stays UNEXPECTED_EOF.
        c = self.advance(cursor)
        if isinstance(c, Err):
            return c
        if c != expected:
            return self.fail(ErrorKind.INVALID_CHARACTER)
        return c

    def advance(self, cursor: Cursor) -> Union[str, Err]:
        c = cursor.take()
        if c is None:
            return self.fail(ErrorKind.UNEXPECTED_EOF)
        return c


class RaisingParser(Parser):
    """Aborts the descent by raising ParseError from the failure site."""

    strategy = Strategy.EXCEPTIONS

    def fail(self, kind: ErrorKind) -> Err:
        raise ParseError(kind)

    def evaluate(self, program: str) -> EvalResult:
        try:
            return super().evaluate(program)
        except ParseError as e:
            return Err(e.kind)


class ResultParser(Parser):
    """Threads Err values back through every rule."""

    strategy = Strategy.RESULTS

    def fail(self, kind: ErrorKind) -> Err:
        return Err(kind)


_PARSERS: dict[Strategy, type[Parser]] = {
    Strategy.EXCEPTIONS: RaisingParser,
    Strategy.RESULTS: ResultParser,
}


def make_parser(strategy: Strategy | str) -> Parser:
    """Build the parser for a strategy (enum member or its string value).

    Raises:
        ValueError: If the name is not a known strategy.
    """
    try:
        s = Strategy(strategy)
    except ValueError:
        choices = ", ".join(s.value for s in Strategy)
        raise ValueError(f"Unknown strategy: {strategy!r} (choose: {choices})") from None
    return _PARSERS[s]()
