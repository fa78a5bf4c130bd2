"""Monad laws and ordering of interpreted logs, over a few representative producers."""

import pytest

from purelog import Debug, Info, Logging, MultiLog, Warn, bind, line_sink, pure, run_io


def sum_w(x: int, y: int) -> Logging[int]:
    return Logging(Info(f"{x} + {y}"), x + y)


def neg_w(x: int) -> Logging[int]:
    return Logging(Warn(f"Neg {x}"), -x)


def double_w(x: int) -> Logging[int]:
    return Logging(MultiLog.of(Debug(f"double {x}"), Info("doubled")), x * 2)


def silent(x: int) -> Logging[int]:
    return pure(x + 1)


CONTINUATIONS = [neg_w, double_w, silent]
WRAPPERS = [sum_w(4, 5), neg_w(7), pure(10), double_w(3).bind(neg_w)]


@pytest.mark.parametrize("f", CONTINUATIONS)
@pytest.mark.parametrize("value", [0, 9, -3])
def test_left_identity(value, f):
    assert bind(pure(value), f).normalized() == f(value).normalized()


@pytest.mark.parametrize("m", WRAPPERS)
def test_right_identity(m):
    assert bind(m, pure).normalized() == m.normalized()


@pytest.mark.parametrize("m", WRAPPERS)
@pytest.mark.parametrize("f", CONTINUATIONS)
@pytest.mark.parametrize("g", CONTINUATIONS)
def test_associativity(m, f, g):
    nested = bind(bind(m, f), g)
    grouped = bind(m, lambda x: bind(f(x), g))
    assert nested.normalized() == grouped.normalized()


def test_earlier_producer_logs_first():
    lines: list[str] = []
    program = double_w(3).bind(neg_w).bind(lambda x: sum_w(x, 1))
    assert run_io(program, line_sink(lines.append)) == -5
    assert lines == ["DEBUG: double 3", "INFO: doubled", "WARN: Neg 6", "INFO: -6 + 1"]
