import logging

import pytest

from todo_api import run


def test_defaults() -> None:
    args = run.parse_args([])
    assert args.port == 8888
    assert args.hostname == "localhost"
    assert args.log_level == "info"


def test_short_flags() -> None:
    args = run.parse_args(["-p", "9000", "-n", "0.0.0.0"])
    assert args.port == 9000
    assert args.hostname == "0.0.0.0"


def test_long_flags() -> None:
    args = run.parse_args(["--port", "8080", "--hostname", "127.0.0.1", "--log-level", "debug"])
    assert args.port == 8080
    assert args.hostname == "127.0.0.1"
    assert args.log_level == "debug"


def test_main_runs_server_with_parsed_options(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(run, "run_server", lambda *args: calls.append(args))
    run.main(["-p", "1234", "-n", "example.local"])
    assert calls == [("example.local", 1234, "info")]


def test_main_exits_on_server_error(monkeypatch, caplog) -> None:
    def fail(*args) -> None:
        raise RuntimeError("address in use")

    monkeypatch.setattr(run, "run_server", fail)
    with caplog.at_level(logging.ERROR, logger="todo_api.run"):
        with pytest.raises(SystemExit) as exc_info:
            run.main([])
    assert exc_info.value.code == 1

    records = [record for record in caplog.records if record.name == "todo_api.run"]
    assert [record.getMessage() for record in records] == ["Error: address in use"]
    assert records[0].exc_info is not None
