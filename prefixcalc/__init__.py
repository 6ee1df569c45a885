"""prefixcalc — recursive descent evaluator for prefix-notation arithmetic.

Operators come before their operands and parentheses group:

    >>> execute("* (+ 1 2) 5")
    15

Malformed programs evaluate to 0. evaluate() returns the classification
instead (Ok(value) or Err(kind)). Both functions pick the error-propagation
strategy from PREFIXCALC_STRATEGY unless one is passed.

Usage:
    python -m prefixcalc eval "+ 3 4"                 # Print the value
    python -m prefixcalc check "(+ 1 2 x"             # Print ok/error classification
    python -m prefixcalc compare -f corpus.txt        # Both strategies side by side
    python -m prefixcalc repl                         # Read programs from stdin
"""

from __future__ import annotations

from typing import Optional

from prefixcalc.environment import resolve_strategy
from prefixcalc.models import Err, ErrorKind, EvalResult, Ok, Strategy
from prefixcalc.parser import ParseError, make_parser

__all__ = [
    "Err",
    "ErrorKind",
    "EvalResult",
    "Ok",
    "ParseError",
    "Strategy",
    "evaluate",
    "execute",
    "make_parser",
]


def evaluate(program: str, strategy: Optional[str] = None) -> EvalResult:
    """Evaluate a program and return Ok(value) or Err(kind)."""
    return make_parser(resolve_strategy(strategy)).evaluate(program)


def execute(program: str, strategy: Optional[str] = None) -> int:
    """Evaluate a program; classified failures collapse to 0."""
    return make_parser(resolve_strategy(strategy)).execute(program)
