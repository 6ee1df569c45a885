"""Tests for result types, int64 wrapping, and Comparison serialization."""

import json

import pytest

from prefixcalc.models import (
    INT64_MAX,
    INT64_MIN,
    Comparison,
    Err,
    ErrorKind,
    Ok,
    result_from_dict,
    wrap_int64,
)


# --- wrap_int64 ---

@pytest.mark.parametrize(
    "n, expected",
    [
        (0, 0),
        (-1, -1),
        (INT64_MAX, INT64_MAX),
        (INT64_MIN, INT64_MIN),
        (INT64_MAX + 1, INT64_MIN),
        (INT64_MIN - 1, INT64_MAX),
        (1 << 64, 0),
    ],
)
def test_wrap_int64(n, expected):
    assert wrap_int64(n) == expected


# --- Ok / Err ---

def test_ok_and_err_are_distinct_values():
    assert Ok(0) != Err(ErrorKind.UNEXPECTED_EOF)
    assert Ok(7) == Ok(7)
    assert Err(ErrorKind.INVALID_OPERATOR) != Err(ErrorKind.INVALID_CHARACTER)


def test_results_are_frozen():
    r = Ok(1)
    with pytest.raises(AttributeError):
        r.value = 2


def test_result_dict_round_trip():
    for r in (Ok(-5), Err(ErrorKind.INVALID_CHARACTER)):
        assert result_from_dict(r.to_dict()) == r


def test_err_dict_uses_kind_value():
    assert Err(ErrorKind.UNEXPECTED_EOF).to_dict() == {"ok": False, "error": "unexpected-eof"}


# --- Comparison ---

def test_comparison_agrees_on_same_value():
    c = Comparison(program="+ 3 4", results={"exceptions": Ok(7), "results": Ok(7)})
    assert c.agree


def test_comparison_disagrees_on_different_kind():
    c = Comparison(
        program="x",
        results={
            "exceptions": Err(ErrorKind.INVALID_OPERATOR),
            "results": Err(ErrorKind.UNEXPECTED_EOF),
        },
    )
    assert not c.agree


def test_comparison_ok_zero_differs_from_error():
    """Both collapse to 0 publicly, but the classification differs."""
    c = Comparison(program="", results={"exceptions": Ok(0), "results": Err(ErrorKind.UNEXPECTED_EOF)})
    assert not c.agree


def test_comparison_to_dict_is_json_serializable():
    c = Comparison(program="+ 3", results={"exceptions": Err(ErrorKind.UNEXPECTED_EOF), "results": Err(ErrorKind.UNEXPECTED_EOF)})
    data = json.loads(json.dumps(c.to_dict()))
    assert data["agree"] is True
    assert data["results"]["results"]["error"] == "unexpected-eof"
    assert Comparison.from_dict(data) == c
