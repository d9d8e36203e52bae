"""
End-to-end tests for the command-line interface.
"""

import logging

import pytest

from product_feed.cli.batch_cli import main
from product_feed.observability.logger import ROOT_LOGGER_NAME, setup_logger

pytestmark = pytest.mark.e2e


@pytest.fixture(autouse=True)
def reset_logger():
    """Put the package logger back to its defaults after each CLI run"""
    yield
    setup_logger()


class TestParseCommand:
    """Tests for `parse`"""

    def test_prints_every_parsed_record(self, product_file, capsys):
        exit_code = main(["parse", "--input", str(product_file), "--log-format", "text"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert out.count("ProductRecord:") == 3
        assert "Kimchi-flavored white rice" in out
        assert "2 for $13.00" in out
        assert "Pound" in out

    def test_bad_lines_are_reported_on_stderr(self, product_file, capsys):
        main(["parse", "--input", str(product_file), "--log-format", "text"])

        err = capsys.readouterr().err
        assert f"{product_file}:2: Couldn't parse number for Product Id from '1x2d34cc'" in err
        assert f"{product_file}:4: Input line too short" in err

    def test_fail_fast_exit_code(self, product_file, capsys):
        exit_code = main(["parse", "--input", str(product_file), "--fail-fast", "--log-format", "text"])

        assert exit_code == 1
        assert "Stopping at first malformed line" in capsys.readouterr().err

    def test_summary_only(self, product_file, capsys):
        exit_code = main(["parse", "--input", str(product_file), "--summary-only", "--log-format", "text"])

        captured = capsys.readouterr()
        assert exit_code == 0
        assert captured.out == ""
        assert "Total records parsed: 3" in captured.err

    def test_config_file(self, product_file, tmp_path, capsys):
        config = tmp_path / "pipeline.yaml"
        config.write_text("pipeline:\n  on_error: fail_fast\n  log_format: text\n")

        exit_code = main(["parse", "--input", str(product_file), "--config", str(config)])

        assert exit_code == 1

    @pytest.mark.parametrize("document", ["pipeline: [unclosed\n", "42\n"])
    def test_unreadable_config_file(self, product_file, tmp_path, capsys, document):
        config = tmp_path / "pipeline.yaml"
        config.write_text(document)

        exit_code = main(["parse", "--input", str(product_file), "--config", str(config)])

        assert exit_code == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_missing_input(self, tmp_path, capsys):
        exit_code = main(["parse", "--input", str(tmp_path / "missing.txt"), "--log-format", "text"])

        assert exit_code == 1
        assert "Input file not found" in capsys.readouterr().err


class TestLogSettings:
    """Tests for log level and format resolution"""

    def test_log_level_from_env(self, product_file, monkeypatch, capsys):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        monkeypatch.delenv("LOG_FORMAT", raising=False)

        exit_code = main(["parse", "--input", str(product_file), "--summary-only"])

        err = capsys.readouterr().err
        assert exit_code == 0
        assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.ERROR
        assert "Total records parsed" not in err
        assert "Couldn't parse number" not in err

    def test_log_format_from_env(self, product_file, monkeypatch, capsys):
        monkeypatch.setenv("LOG_FORMAT", "text")
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        main(["parse", "--input", str(product_file), "--summary-only"])

        err = capsys.readouterr().err
        assert " - INFO - " in err
        assert "Total records parsed: 3" in err
        assert not err.lstrip().startswith("{")

    def test_flag_beats_env(self, product_file, monkeypatch, capsys):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        main(["parse", "--input", str(product_file), "--summary-only", "--log-level", "debug"])

        assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.DEBUG

    def test_config_file_beats_env(self, product_file, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        config = tmp_path / "pipeline.yaml"
        config.write_text("pipeline:\n  log_level: warning\n")

        main(["parse", "--input", str(product_file), "--summary-only", "--config", str(config)])

        assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.WARNING


class TestFieldsCommand:
    """Tests for `fields`"""

    def test_lists_raw_and_derived_fields(self, capsys):
        exit_code = main(["fields"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Product Id" in out
        assert "Regular Calculator Price" in out
        assert "derived" in out


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage:" in capsys.readouterr().out
