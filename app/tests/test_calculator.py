"""
Tests for the add calculator demo script.
"""

import logging

import pytest

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import add_calculator
from math_ops import logging_config


@pytest.fixture
def demo_env(monkeypatch):
    """Isolate the demo from the caller's environment and logging setup."""
    for key in ["MATH_OPS_INT_WIDTH", "MATH_OPS_OVERFLOW", "LOG_LEVEL", "LOG_JSON", "LOG_FILE"]:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    yield monkeypatch
    root_logger = logging.getLogger("math_ops")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.NOTSET)
    logging_config._logging_configured = False


def test_demo_prints_scenarios(demo_env, capsys):
    """Should print the 32-bit scenarios, wrapping at the top of the range."""
    add_calculator.main()
    out = capsys.readouterr().out

    assert "32-bit signed, overflow=wrap" in out
    assert "add(3, 3) = 6" in out
    assert "add(-2, 2) = 0" in out
    assert "add(-100, -200) = -300" in out
    assert "add(2147483646, 1) = 2147483647" in out
    assert "add(2147483647, 1) = -2147483648" in out


def test_demo_reports_overflow_in_check_mode(demo_env, capsys):
    """Should report overflow and skip operands wider than 8 bits."""
    demo_env.setenv("MATH_OPS_INT_WIDTH", "8")
    demo_env.setenv("MATH_OPS_OVERFLOW", "check")

    add_calculator.main()
    out = capsys.readouterr().out

    assert "Range: [-128, 127]" in out
    assert "add(126, 1) = 127" in out
    assert "add(127, 1) -> error:" in out
    assert "add(100, 200) skipped: operands outside 8-bit range" in out
    assert "add(-100, -200) skipped: operands outside 8-bit range" in out


def test_demo_wraps_at_8_bits(demo_env, capsys):
    """Should finish every scenario when 8-bit operands wrap."""
    demo_env.setenv("MATH_OPS_INT_WIDTH", "8")
    demo_env.setenv("MATH_OPS_OVERFLOW", "wrap")

    add_calculator.main()
    out = capsys.readouterr().out

    assert "8-bit signed, overflow=wrap" in out
    assert "add(3, 3) = 6" in out
    assert "add(100, 200) skipped" in out
    assert "add(126, 1) = 127" in out
    assert "add(127, 1) = -128" in out
    assert "error" not in out
