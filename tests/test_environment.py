"""Tests for PREFIXCALC_* environment configuration and the package entry points."""

import pytest

import prefixcalc
from prefixcalc.environment import (
    DEFAULT_STRATEGY,
    STRATEGY_VAR,
    default_strategy,
    resolve_strategy,
)
from prefixcalc.models import Err, ErrorKind, Ok, Strategy


# --- default_strategy ---

def test_default_when_unset():
    assert default_strategy({}) is DEFAULT_STRATEGY
    assert DEFAULT_STRATEGY is Strategy.RESULTS


def test_reads_variable():
    assert default_strategy({STRATEGY_VAR: "exceptions"}) is Strategy.EXCEPTIONS


def test_variable_is_case_and_space_insensitive():
    assert default_strategy({STRATEGY_VAR: "  Exceptions "}) is Strategy.EXCEPTIONS


def test_blank_variable_uses_default():
    assert default_strategy({STRATEGY_VAR: "  "}) is DEFAULT_STRATEGY


def test_invalid_variable_names_the_variable():
    with pytest.raises(ValueError, match=STRATEGY_VAR):
        default_strategy({STRATEGY_VAR: "setjmp"})


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv(STRATEGY_VAR, "exceptions")
    assert default_strategy() is Strategy.EXCEPTIONS


# --- resolve_strategy ---

def test_explicit_name_overrides_environment(monkeypatch):
    monkeypatch.setenv(STRATEGY_VAR, "exceptions")
    assert resolve_strategy("results") is Strategy.RESULTS


def test_falls_back_to_environment(monkeypatch):
    monkeypatch.setenv(STRATEGY_VAR, "exceptions")
    assert resolve_strategy(None) is Strategy.EXCEPTIONS


def test_unknown_explicit_name():
    with pytest.raises(ValueError, match="Unknown strategy"):
        resolve_strategy("goto")


# --- Package entry points ---

@pytest.mark.parametrize("strategy", ["exceptions", "results"])
def test_execute_scenarios(strategy):
    assert prefixcalc.execute("+ 3 4", strategy) == 7
    assert prefixcalc.execute("* (+ 1 2) 5", strategy) == 15
    assert prefixcalc.execute("- 10 (/ 20 4)", strategy) == 5
    assert prefixcalc.execute("+ 3", strategy) == 0
    assert prefixcalc.execute("& 1 2", strategy) == 0
    assert prefixcalc.execute("(+ 1 2 ", strategy) == 0
    assert prefixcalc.execute("(+ 1 2 x", strategy) == 0


@pytest.mark.parametrize("strategy", ["exceptions", "results"])
def test_evaluate_scenarios(strategy):
    assert prefixcalc.evaluate("+ 3 4", strategy) == Ok(7)
    assert prefixcalc.evaluate("+ 3", strategy) == Err(ErrorKind.UNEXPECTED_EOF)
    assert prefixcalc.evaluate("& 1 2", strategy) == Err(ErrorKind.INVALID_OPERATOR)
    assert prefixcalc.evaluate("(+ 1 2 ", strategy) == Err(ErrorKind.UNEXPECTED_EOF)
    assert prefixcalc.evaluate("(+ 1 2 x", strategy) == Err(ErrorKind.INVALID_CHARACTER)


def test_execute_uses_environment_default(monkeypatch):
    monkeypatch.setenv(STRATEGY_VAR, "exceptions")
    assert prefixcalc.execute("* 6 7") == 42


def test_execute_with_bad_environment_raises(monkeypatch):
    monkeypatch.setenv(STRATEGY_VAR, "nope")
    with pytest.raises(ValueError):
        prefixcalc.execute("+ 1 1")
