"""Tests for the stdin/stdout wrapper in main.py."""

import io

import pytest
from config import Settings
from grid import EmptyRowError, FeatureNotFoundError
import main


@pytest.fixture
def settings():
    return Settings()


def _run_main(text, settings):
    out = io.StringIO()
    code = main.main(stdin=io.StringIO(text), stdout=out, settings=settings)
    return code, out.getvalue()


class TestStripHeader:
    """Test dropping the size hint line."""

    def test_drops_first_line(self):
        assert main.strip_header("4 3\nm---\n----\n---p") == "m---\n----\n---p"

    def test_header_only(self):
        assert main.strip_header("3 3") == ""
        assert main.strip_header("") == ""

    def test_keeps_trailing_newline(self):
        assert main.strip_header("2 1\nmp\n") == "mp\n"


class TestRun:
    """Test the parse-then-route pipeline."""

    def test_run_routes_me_to_point(self, settings):
        assert main.run("4 3\nm---\n----\n---p", settings) == "RIGHT\nRIGHT\nRIGHT\nDOWN\nDOWN\n"

    def test_run_with_other_markers(self):
        custom = Settings(source_marker="a", target_marker="b")
        assert main.run("hint\nb-a", custom) == "LEFT\nLEFT\n"

    def test_run_propagates_parse_errors(self, settings):
        with pytest.raises(EmptyRowError):
            main.run("3 3\nm--\n\n--p", settings)

    def test_run_without_grid(self, settings):
        with pytest.raises(FeatureNotFoundError) as exc_info:
            main.run("0 0", settings)
        assert exc_info.value.marker == "m"


class TestMain:
    """Test exit codes and what ends up on stdout."""

    def test_success_prints_route(self, settings):
        code, out = _run_main("3 2\np--\n-m-", settings)
        assert code == 0
        assert out == "LEFT\nUP\n\n"

    def test_same_cell_prints_blank_line(self, settings):
        code, out = _run_main("1 1\nm", Settings(source_marker="m", target_marker="m"))
        assert code == 0
        assert out == "\n"

    def test_missing_feature_prints_message(self, settings):
        code, out = _run_main("2 1\nm-", settings)
        assert code == 1
        assert out == "Feature not found: p\n"

    def test_uneven_rows_print_message(self, settings):
        code, out = _run_main("hint\nm--\np-", settings)
        assert code == 1
        assert out == "Each line must have uniform length (expected: 3, current 2)\n"
