"""Tests for the loguru output layer."""

import pytest

from scroll_selector.core import output


@pytest.fixture(autouse=True)
def reset_ui_mode():
    output.clear_ui_mode()
    yield
    output.clear_ui_mode()


class TestLog:
    def test_prints_outside_ui_mode(self, capsys):
        output.log("demo finished")
        assert "demo finished" in capsys.readouterr().out

    def test_silent_in_ui_mode(self, capsys):
        output.set_ui_mode()
        output.log("scrolling")
        assert capsys.readouterr().out == ""

    def test_writes_to_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "scroll-selector.log"
        output.setup_loguru(log_file, "DEBUG")
        output.log("saved to file", level="warning")

        assert "saved to file" in log_file.read_text()
        assert "WARNING" in log_file.read_text()
