"""Unit tests for interpreters and sinks."""

import logging

import pytest
from kungfu import Error, Ok

from purelog import InterpretationError, Leaf
from purelog.interpret import (
    ListSink,
    line_sink,
    logger_sink,
    print_sink,
    render_line,
    render_lines,
    run_io,
    run_io_result,
)
from purelog.writer import Debug, Info, Logging, MultiLog, Warn, pure

PROGRAM = Logging(MultiLog.of(Info("a"), MultiLog.of(Warn("b"), Debug("c"))), 42)


class FailingSink:
    """Raises OSError on the n-th write (0-based), records earlier ones."""

    def __init__(self, fail_at: int) -> None:
        self.fail_at = fail_at
        self.written: list[Leaf] = []

    def __call__(self, instruction: Leaf) -> None:
        if len(self.written) == self.fail_at:
            raise OSError("sink closed")
        self.written.append(instruction)


def test_render_line():
    assert render_line(Info("4 + 5")) == "INFO: 4 + 5"
    assert render_line(Warn("Neg 7")) == "WARN: Neg 7"
    assert render_line(Debug("")) == "DEBUG: "


def test_render_lines_writes_nothing(capsys):
    assert render_lines(PROGRAM) == ["INFO: a", "WARN: b", "DEBUG: c"]
    assert capsys.readouterr().out == ""


def test_run_io_writes_leaves_in_order_and_returns_value():
    lines: list[str] = []
    assert run_io(PROGRAM, line_sink(lines.append)) == 42
    assert lines == ["INFO: a", "WARN: b", "DEBUG: c"]


def test_run_io_defaults_to_stdout(capsys):
    assert run_io(PROGRAM) == 42
    assert capsys.readouterr().out == "INFO: a\nWARN: b\nDEBUG: c\n"


def test_print_sink(capsys):
    print_sink(Warn("careful"))
    assert capsys.readouterr().out == "WARN: careful\n"


def test_run_io_pure_writes_nothing():
    lines: list[str] = []
    assert run_io(pure(10), line_sink(lines.append)) == 10
    assert lines == []


def test_run_io_propagates_sink_failure_and_stops():
    sink = FailingSink(fail_at=1)
    with pytest.raises(OSError, match="sink closed"):
        run_io(PROGRAM, sink)
    assert sink.written == [Info("a")]


def test_run_io_result_ok():
    lines: list[str] = []
    match run_io_result(PROGRAM, line_sink(lines.append)):
        case Ok(value):
            assert value == 42
        case Error(err):
            pytest.fail(f"unexpected error: {err!r}")
    assert len(lines) == 3


def test_run_io_result_converts_oserror():
    sink = FailingSink(fail_at=2)
    match run_io_result(PROGRAM, sink):
        case Ok(value):
            pytest.fail(f"unexpected value: {value!r}")
        case Error(err):
            assert isinstance(err, InterpretationError)
            assert err.instruction == Debug("c")
            assert isinstance(err.cause, OSError)
            assert "Debug(c)" in str(err)
    assert sink.written == [Info("a"), Warn("b")]


def test_run_io_result_propagates_other_exceptions():
    def broken(_: Leaf) -> None:
        raise RuntimeError("not io")

    with pytest.raises(RuntimeError, match="not io"):
        run_io_result(PROGRAM, broken)


def test_logger_sink_maps_levels(caplog):
    logger = logging.getLogger("purelog.tests")
    with caplog.at_level(logging.DEBUG, logger="purelog.tests"):
        run_io(PROGRAM, logger_sink(logger))

    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
        (logging.INFO, "a"),
        (logging.WARNING, "b"),
        (logging.DEBUG, "c"),
    ]


def test_logger_sink_default_logger(caplog):
    with caplog.at_level(logging.INFO, logger="purelog"):
        run_io(Logging(Info("hello"), None), logger_sink())

    assert [(r.name, r.getMessage()) for r in caplog.records] == [("purelog", "hello")]


def test_sink_receives_leaf_instructions():
    """A raw callable sink gets the leaves; line_sink renders them to text."""
    received: list[Leaf] = []
    run_io(Logging(Info("4 + 5"), 9), sink=received.append)
    assert received == [Info("4 + 5")]

    lines: list[str] = []
    run_io(Logging(Info("4 + 5"), 9), sink=line_sink(lines.append))
    assert lines == ["INFO: 4 + 5"]


def test_list_sink_collects_rendered_lines():
    sink = ListSink()
    assert run_io(PROGRAM, sink) == 42
    assert sink.lines == ["INFO: a", "WARN: b", "DEBUG: c"]
    assert repr(sink) == "ListSink(['INFO: a', 'WARN: b', 'DEBUG: c'])"


def test_list_sink_with_pure_stays_empty():
    sink = ListSink()
    run_io(pure(10), sink)
    assert sink.lines == []


def test_deeply_nested_log_is_interpreted():
    program = Logging(Info("start"), 0)
    for _ in range(5000):
        program = program.censor(lambda log: MultiLog((log,)))
    program = program.with_log(Warn("end"))

    sink = ListSink()
    assert run_io(program, sink) == 0
    assert sink.lines == ["INFO: start", "WARN: end"]
    assert render_lines(program) == ["INFO: start", "WARN: end"]
