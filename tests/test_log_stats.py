"""Tests for the log_stats.py CLI"""

from click.testing import CliRunner

from log_stats import main


def test_prints_summary_and_tables(write_log, make_line):
    path = write_log([make_line(path="/zeta"), make_line(path="/alpha", status="404"), "garbage\n"])
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 0
    assert "Total requests: 2" in result.output
    assert "success: 1 (50.000%)" in result.output
    assert "error:   1 (50.000%)" in result.output
    assert "Bad lines skipped: 1" in result.output
    assert "Files" in result.output
    assert "Referers" in result.output
    assert result.output.index("/zeta") < result.output.index("/alpha")


def test_top_limits_tables(write_log, make_line):
    path = write_log([make_line(path="/first"), make_line(path="/second")])
    result = CliRunner().invoke(main, [str(path), "--top", "1"])
    assert result.exit_code == 0
    assert "/first" in result.output
    assert "/second" not in result.output


def test_json_output(write_log, make_line):
    path = write_log([make_line(status="200"), make_line(status="500")])
    result = CliRunner().invoke(main, [str(path), "--json"])
    assert result.exit_code == 0
    assert '"total_count": 2' in result.output
    assert '"success_pct": "50.000"' in result.output
    assert '"bad_lines": 0' in result.output


def test_missing_file_exits_with_error(tmp_path):
    result = CliRunner().invoke(main, [str(tmp_path / "missing.log")])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_empty_file_reports_no_data(write_log):
    path = write_log([])
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 0
    assert "No valid log entries" in result.output
    assert "Total requests" not in result.output
