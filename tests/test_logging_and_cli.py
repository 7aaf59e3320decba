import logging
import sys

import pytest

from symbolic_kernel import DivisionByZero, add, compute, constant, div, variable
from symbolic_kernel.__main__ import main
from symbolic_kernel.logging_system import LogLevel, configure_logging, get_logger, set_log_level


@pytest.fixture
def verbose_logging():
  configure_logging(LogLevel.VERBOSE)
  yield get_logger()
  configure_logging(LogLevel.MINIMAL)


def test_simplifier_rewrites_are_logged(verbose_logging, caplog):
  with caplog.at_level(logging.DEBUG, logger="symbolic_kernel"):
    add(variable("x"), constant(0))
  assert any("A + 0 = A" in record.getMessage() for record in caplog.records)


def test_evaluation_failures_are_logged_and_raised(verbose_logging, caplog):
  with caplog.at_level(logging.DEBUG, logger="symbolic_kernel"):
    with pytest.raises(DivisionByZero):
      compute(div(variable("x"), constant(0)), {"x": 5})
  assert any("compute failed" in record.getMessage() for record in caplog.records)


def test_debug_messages_are_filtered_below_verbose(caplog):
  configure_logging(LogLevel.MINIMAL)
  with caplog.at_level(logging.DEBUG, logger="symbolic_kernel"):
    add(variable("x"), constant(0))
  assert not [record for record in caplog.records if record.name == "symbolic_kernel"]


def test_set_log_level_updates_the_global_logger():
  set_log_level(LogLevel.DETAILED)
  assert get_logger().log_level == LogLevel.DETAILED
  set_log_level(LogLevel.MINIMAL)


def test_demo_prints_sample_results(monkeypatch, capsys):
  monkeypatch.setattr(sys, "argv", ["symbolic_kernel", "--x", "1", "--y", "2"])
  main()
  out = capsys.readouterr().out
  assert "((x - 4) * ((3 * x) + y^2)) / 5" in out
  assert "-4.2" in out
  assert "-20.0" in out
  assert "d/dx cos(y)" in out
  configure_logging(LogLevel.MINIMAL)


def test_cancelling_a_possibly_zero_quotient_is_warned(caplog):
  configure_logging(LogLevel.MINIMAL)
  with caplog.at_level(logging.WARNING, logger="symbolic_kernel"):
    div(variable("x"), variable("x"))
  assert any(
    record.levelno == logging.WARNING and "assumes x is non-zero" in record.getMessage()
    for record in caplog.records
  )


def test_cancelling_a_non_zero_constant_is_not_warned(caplog):
  configure_logging(LogLevel.MINIMAL)
  with caplog.at_level(logging.WARNING, logger="symbolic_kernel"):
    div(constant(3), constant(3))
    div(add(variable("x"), constant(0)), constant(2))
  assert not [record for record in caplog.records if record.levelno == logging.WARNING]


def test_silent_level_drops_warnings(caplog):
  configure_logging(LogLevel.SILENT)
  with caplog.at_level(logging.WARNING, logger="symbolic_kernel"):
    div(variable("y"), variable("y"))
  assert not [record for record in caplog.records if record.name == "symbolic_kernel"]
  configure_logging(LogLevel.MINIMAL)
