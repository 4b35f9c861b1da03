import logging

import pytest

pytest.importorskip("PySide6")

import ghanfoot.__main__ as entry


def test_build_parser_defaults():
    args = entry.build_parser().parse_args([])
    assert args.debug is False
    assert args.log_file is None


@pytest.fixture
def captured_main(monkeypatch):
    calls = []

    def fake_main(argv, level=None, log_file=None):
        calls.append((argv, level, log_file))
        return 0

    monkeypatch.setattr(entry, "main", fake_main)
    return calls


def test_cli_debug_and_log_file(captured_main):
    assert entry.cli(["--debug", "--log-file", "out.log"]) == 0

    argv, level, log_file = captured_main[0]
    assert level == logging.DEBUG
    assert log_file == "out.log"
    assert argv[1:] == []


def test_cli_passes_unknown_args_to_qt(captured_main):
    entry.cli(["-style", "fusion"])

    argv, level, log_file = captured_main[0]
    assert argv[1:] == ["-style", "fusion"]
    assert level is None
    assert log_file is None
