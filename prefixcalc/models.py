"""Data models for the prefixcalc evaluator.

Op, ErrorKind, Strategy, Ok/Err, Comparison — the typed structures that flow
through parser → scorer → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class Op(str, Enum):
    """Binary operators, keyed by their source character."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


class ErrorKind(str, Enum):
    """Classified parse failures. A tag only, never a message."""

    INVALID_OPERATOR = "invalid-operator"
    INVALID_CHARACTER = "invalid-character"
    UNEXPECTED_EOF = "unexpected-eof"


class Strategy(str, Enum):
    """Error-propagation strategies."""

    EXCEPTIONS = "exceptions"
    RESULTS = "results"


ALL_STRATEGIES = [Strategy.EXCEPTIONS, Strategy.RESULTS]


@dataclass(frozen=True)
class Ok:
    """Successful evaluation."""

    value: int

    def to_dict(self) -> dict:
        return {"ok": True, "value": self.value}


@dataclass(frozen=True)
class Err:
    """Failed evaluation, carrying only the classification."""

    kind: ErrorKind

    def to_dict(self) -> dict:
        return {"ok": False, "error": self.kind.value}


EvalResult = Union[Ok, Err]


def result_from_dict(d: dict) -> EvalResult:
    """Inverse of Ok.to_dict / Err.to_dict."""
    if d.get("ok"):
        return Ok(value=d.get("value", 0))
    return Err(kind=ErrorKind(d["error"]))


def wrap_int64(n: int) -> int:
    """Reduce an arbitrary Python int to signed 64-bit two's complement."""
    return ((n - INT64_MIN) & 0xFFFF_FFFF_FFFF_FFFF) + INT64_MIN


@dataclass
class Comparison:
    """One program evaluated under every strategy."""

    program: str
    results: dict[str, EvalResult]

    @property
    def agree(self) -> bool:
        """True when every strategy produced the same Ok value or Err kind."""
        return len(set(self.results.values())) <= 1

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "program": self.program,
            "results": {name: r.to_dict() for name, r in self.results.items()},
            "agree": self.agree,
        }

    @classmethod
    def from_dict(cls, d: dict) -> Comparison:
        """Deserialize from a dict produced by to_dict()."""
        return cls(
            program=d.get("program", ""),
            results={
                name: result_from_dict(r)
                for name, r in d.get("results", {}).items()
            },
        )
