"""Tests for the loguru setup in logger.py."""

import pytest

import logger
from grid import parse


@pytest.fixture
def debug_logging():
    logger.configure("DEBUG")
    yield
    logger.configure("WARNING")


def test_tag_goes_to_stderr(debug_logging, capsys):
    log = logger.get_logger("routing-test")
    log.tag("ROUTE", "hello")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "| routing-test | [ROUTE] hello" in captured.err


def test_core_logs_at_debug(debug_logging, capsys):
    parse("m-\n-p").route("m", "p")
    err = capsys.readouterr().err
    assert "grid.grid" in err
    assert "parsed 2x2 grid with 2 feature(s)" in err


def test_debug_hidden_at_warning(capsys):
    logger.configure("WARNING")
    parse("m-\n-p").route("m", "p")
    assert capsys.readouterr().err == ""
