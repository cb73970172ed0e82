"""Tests for the command-line entry point."""

import io
import sys

import pytest

from topic_index._cli import main
from topic_index._indexer import TopicIndexer

CARS = b"Cars are great. I love cars. Cars drive on roads."


@pytest.fixture
def cars_file(tmp_path):
    path = tmp_path / "cars.txt"
    path.write_bytes(CARS)
    return path


def test_report_from_file(cars_file, capsys):
    assert main(["Cars", str(cars_file)]) == 0
    out = capsys.readouterr().out
    assert "Topic word: 'Cars'" in out
    assert "Total words: 11" in out
    assert "Total sentences: 3" in out
    rows = out.splitlines()[8:-1]
    assert [r.split()[0] for r in rows] == ["cars", "great", "love", "drive", "roads"]


def test_report_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"red blue red green")))
    assert main(["red"]) == 0
    out = capsys.readouterr().out
    assert "Total sentences: 1" in out
    assert out.splitlines()[8].split() == ["red", "2", "50.00%", "1/1", "100.00%"]


def test_absent_topic_row_omitted(cars_file, capsys):
    assert main(["boats", str(cars_file)]) == 0
    rows = capsys.readouterr().out.splitlines()[8:-1]
    assert [r.split()[0] for r in rows] == ["great", "love", "drive", "roads"]


def test_others_option(cars_file, capsys):
    assert main(["--others", "1", "cars", str(cars_file)]) == 0
    rows = capsys.readouterr().out.splitlines()[8:-1]
    assert len(rows) == 2


def test_stop_words_option(cars_file, tmp_path, capsys):
    extra = tmp_path / "extra.txt"
    extra.write_text("great\n")
    assert main(["-s", str(extra), "cars", str(cars_file)]) == 0
    rows = capsys.readouterr().out.splitlines()[8:-1]
    assert "great" not in [r.split()[0] for r in rows]


def test_missing_topic_is_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2
    assert "topic_word" in capsys.readouterr().err


def test_empty_topic_is_usage_error(cars_file, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["", str(cars_file)])
    assert excinfo.value.code == 2
    assert "must not be empty" in capsys.readouterr().err


def test_unreadable_file(tmp_path, capsys):
    assert main(["cars", str(tmp_path / "missing.txt")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Cannot open" in captured.err


def test_bad_stop_words_file(cars_file, tmp_path, capsys):
    assert main(["-s", str(tmp_path / "nope.json"), "cars", str(cars_file)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Stop-word file not found" in captured.err


def test_invalid_others(cars_file, capsys):
    assert main(["--others", "-1", "cars", str(cars_file)]) == 1
    assert "Invalid configuration" in capsys.readouterr().err


def test_out_of_memory(cars_file, monkeypatch, capsys):
    def exhausted(self, path, topic_word):
        raise MemoryError

    monkeypatch.setattr(TopicIndexer, "analyze_file", exhausted)
    assert main(["cars", str(cars_file)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "out of memory" in captured.err


def test_debug_logs_to_stderr(cars_file, capsys):
    assert main(["--debug", "cars", str(cars_file)]) == 0
    captured = capsys.readouterr()
    assert "Indexed 8 distinct words" in captured.err
    assert "Indexed" not in captured.out
