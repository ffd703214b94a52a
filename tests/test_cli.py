"""
Tests for the vin-check command line interface and batch extraction.

Run with: pytest tests/test_cli.py -v
"""

import io
import json
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from vin_check.batch import extract_from_file, extract_from_lines, read_text
from vin_check.cli import main
from vin_check.config import reset_config
from vin_check.errors import InputReadError


REFERENCE_VIN = "1HGBH41JXMN109186"


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    for key in ('VIN_LOG_LEVEL', 'VIN_LOG_FILE', 'VIN_OUTPUT_JSON', 'VIN_JSON_INDENT'):
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def scan_log(tmp_path):
    """A line-oriented scan log with two hits, one miss and a blank line."""
    path = tmp_path / "scans.txt"
    path.write_text(
        "Label:ABC 1HGBH41JXMN109186 End\n"
        "no vin here\n"
        "\n"
        "*11111111111111111*\n"
    )
    return path


# =============================================================================
# BATCH
# =============================================================================

class TestBatch:
    """Tests for batch extraction."""

    def test_extract_from_lines(self):
        report = extract_from_lines(["VIN " + REFERENCE_VIN, "nothing", "   "])
        assert [r.source for r in report.results] == ["1", "2"]
        assert report.results[0].vin == REFERENCE_VIN
        assert report.results[1].found is False
        assert report.summary.total == 2
        assert report.summary.found == 1
        assert report.summary.missing == 1
        assert report.summary.hit_rate == pytest.approx(0.5)

    def test_empty_batch(self):
        report = extract_from_lines([])
        assert report.summary.total == 0
        assert report.summary.hit_rate == 0.0

    def test_extract_from_file(self, scan_log):
        report = extract_from_file(scan_log)
        assert [r.source for r in report.results] == ["1", "2", "4"]
        assert [r.vin for r in report.results] == [REFERENCE_VIN, None, "11111111111111111"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputReadError) as exc_info:
            read_text(tmp_path / "nope.txt")
        assert exc_info.value.reason == "File not found"

    def test_save(self, scan_log, tmp_path):
        out = tmp_path / "report.json"
        extract_from_file(scan_log).save(out)
        data = json.loads(out.read_text())
        assert data['summary']['found'] == 2
        assert data['results'][0]['found'] is True


# =============================================================================
# CLI
# =============================================================================

class TestDigitCommand:
    def test_digit(self, capsys):
        assert main(['digit', REFERENCE_VIN]) == 0
        assert capsys.readouterr().out.strip() == f"{REFERENCE_VIN}: X"

    def test_digit_wrong_length(self, capsys):
        assert main(['digit', 'SHORT']) == 1
        assert "expected 17" in capsys.readouterr().err

    def test_digit_json(self, capsys):
        assert main(['--json', 'digit', REFERENCE_VIN.lower()]) == 0
        assert json.loads(capsys.readouterr().out) == [{'vin': REFERENCE_VIN, 'check_digit': 'X'}]


class TestCheckCommand:
    def test_valid(self, capsys):
        assert main(['check', REFERENCE_VIN]) == 0
        assert "VALID" in capsys.readouterr().out

    def test_mixed(self, capsys):
        assert main(['check', REFERENCE_VIN, '1HGBH41JXMN109187']) == 1
        out = capsys.readouterr().out
        assert f"{REFERENCE_VIN}: VALID" in out
        assert "1HGBH41JXMN109187: INVALID" in out

    def test_explain(self, capsys):
        assert main(['check', '--explain', '1HGBH41JQMN109186']) == 1
        out = capsys.readouterr().out
        assert "Invalid chars:  Q" in out
        assert "Expected check: -" in out

    def test_json(self, capsys):
        assert main(['-j', 'check', '1HGBH41JXMN109187']) == 1
        data = json.loads(capsys.readouterr().out)
        assert data[0]['valid'] is False
        assert data[0]['expected_check_digit'] == '1'


class TestExtractCommand:
    def test_from_args(self, capsys):
        assert main(['extract', 'Label:ABC', REFERENCE_VIN, 'End']) == 0
        assert capsys.readouterr().out.strip() == REFERENCE_VIN

    def test_not_found(self, capsys):
        assert main(['extract', 'no', 'vin', 'here']) == 1
        assert "No VIN found" in capsys.readouterr().err

    def test_from_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, 'stdin', io.StringIO(f"scan: {REFERENCE_VIN}\n"))
        assert main(['extract']) == 0
        assert capsys.readouterr().out.strip() == REFERENCE_VIN

    def test_from_file(self, capsys, scan_log):
        assert main(['extract', '--file', str(scan_log)]) == 0
        assert capsys.readouterr().out.strip() == REFERENCE_VIN

    def test_file_and_text_conflict(self, capsys, scan_log):
        with pytest.raises(SystemExit) as exc_info:
            main(['extract', '--file', str(scan_log), REFERENCE_VIN])
        assert exc_info.value.code == 2
        assert "not both" in capsys.readouterr().err

    def test_all(self, capsys):
        assert main(['extract', '--all', REFERENCE_VIN + "11111111111111111"]) == 0
        lines = capsys.readouterr().out.split()
        assert lines[0] == REFERENCE_VIN
        assert lines[-1] == "11111111111111111"

    def test_missing_file_exit_code(self, capsys, tmp_path):
        assert main(['extract', '--file', str(tmp_path / "missing.txt")]) == 2
        assert "Failed to read input" in capsys.readouterr().err


class TestBatchCommand:
    def test_batch(self, capsys, scan_log, tmp_path):
        out = tmp_path / "out.json"
        assert main(['batch', str(scan_log), '--output', str(out)]) == 0
        stdout = capsys.readouterr().out
        assert f"1: {REFERENCE_VIN}" in stdout
        assert "2: -" in stdout
        assert "Found 2/3" in stdout
        assert json.loads(out.read_text())['summary']['total'] == 3

    def test_json_with_output_keeps_stdout_parseable(self, capsys, scan_log, tmp_path):
        out = tmp_path / "out.json"
        assert main(['--json', 'batch', str(scan_log), '--output', str(out)]) == 0
        captured = capsys.readouterr()
        assert json.loads(captured.out)['summary']['found'] == 2
        assert "Results saved to" in captured.err


class TestGlobalOptions:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "vin-check" in capsys.readouterr().out

    def test_config_file_enables_json(self, capsys, tmp_path):
        config = tmp_path / "vin.yaml"
        config.write_text("output:\n  json_output: true\n  json_indent: 0\n")
        assert main(['--config', str(config), 'extract', REFERENCE_VIN]) == 0
        assert json.loads(capsys.readouterr().out) == {'found': True, 'vins': [REFERENCE_VIN]}

    def test_bad_config_exit_code(self, capsys, tmp_path):
        assert main(['--config', str(tmp_path / "vin.toml"), 'check', REFERENCE_VIN]) == 2
        assert "Configuration error" in capsys.readouterr().err

    def test_non_mapping_config_section_exit_code(self, capsys, tmp_path):
        config = tmp_path / "vin.yaml"
        config.write_text("logging: [1]\n")
        assert main(['--config', str(config), 'check', REFERENCE_VIN]) == 2
        assert "must be a mapping" in capsys.readouterr().err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(['--version'])
        assert exc_info.value.code == 0
        assert "1.0.0" in capsys.readouterr().out
