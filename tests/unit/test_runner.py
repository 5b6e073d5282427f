"""Unit tests for the command-line runner."""
import json

import pytest

from tsanalysis.runner import EXIT_INVALID_ARGUMENT, EXIT_IO_ERROR, EXIT_OK, main


def test_runner_json_summary(capsys):
    code = main(["1", "2", "3", "4", "100", "--window", "3", "--method", "iqr",
                 "--threshold", "1.5", "--json"])

    assert code == EXIT_OK
    summary = json.loads(capsys.readouterr().out)
    assert summary["count"] == 5
    assert summary["anomaly_indices"] == [4]


def test_runner_table_output(capsys):
    code = main(["1", "2", "3", "4", "5", "--window", "3", "--alpha", "0.5"])

    assert code == EXIT_OK
    out = capsys.readouterr().out
    assert "moving_average" in out
    assert "smoothed" in out


def test_runner_negative_values(capsys):
    code = main(["-1.5", "2", "-3", "--window", "2", "--json"])

    assert code == EXIT_OK
    assert json.loads(capsys.readouterr().out)["min"] == -3.0


def test_runner_invalid_window():
    assert main(["1", "2", "--window", "5"]) == EXIT_INVALID_ARGUMENT


def test_runner_empty_input():
    assert main(["--window", "1"]) == EXIT_INVALID_ARGUMENT


def test_runner_window_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("TSA_WINDOW", "2")

    assert main(["1", "2", "3", "--json"]) == EXIT_OK
    capsys.readouterr()


def test_runner_csv_input(tmp_path, capsys):
    path = tmp_path / "prices.csv"
    path.write_text("ts,close\n1,1\n2,2\n3,3\n4,4\n5,100\n")

    code = main(["--csv", str(path), "--column", "close", "--window", "2",
                 "--method", "iqr", "--threshold", "1.5", "--json"])

    assert code == EXIT_OK
    assert json.loads(capsys.readouterr().out)["anomaly_indices"] == [4]


def test_runner_csv_missing_file(tmp_path):
    assert main(["--csv", str(tmp_path / "missing.csv")]) == EXIT_IO_ERROR


def test_runner_csv_unknown_column(tmp_path):
    path = tmp_path / "prices.csv"
    path.write_text("close\n1\n2\n")

    with pytest.raises(SystemExit):
        main(["--csv", str(path), "--column", "open"])


def test_runner_rejects_unknown_method():
    with pytest.raises(SystemExit):
        main(["1", "2", "--method", "bogus"])


def test_runner_csv_non_numeric_cell(tmp_path):
    path = tmp_path / "prices.csv"
    path.write_text("close\n1\nabc\n3\n")

    assert main(["--csv", str(path), "--column", "close", "--window", "1"]) == EXIT_INVALID_ARGUMENT


def test_runner_csv_malformed(tmp_path):
    path = tmp_path / "prices.csv"
    path.write_text('close\n1\n"2\n')

    assert main(["--csv", str(path), "--column", "close", "--window", "1"]) == EXIT_IO_ERROR


@pytest.mark.parametrize("name,value", [
    ("TSA_WINDOW", "abc"),
    ("TSA_METHOD", "median"),
    ("TSA_LOG_LEVEL", "verbose"),
])
def test_runner_invalid_environment(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    assert main(["1", "2", "3"]) == EXIT_INVALID_ARGUMENT
