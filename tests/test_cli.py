"""Tests for the command-line interface."""

import pytest

from coffee_api import CoffeeApiError, __version__
from coffee_api.cli import main


def test_schema_prints_sdl(capsys):
    assert main(["schema"]) == 0

    out = capsys.readouterr().out
    assert "type Coffee" in out
    assert "type Mutation" in out


def test_serve_runs_uvicorn(mocker, monkeypatch):
    monkeypatch.delenv("COFFEE_API_LOG_LEVEL", raising=False)
    run = mocker.patch("coffee_api.cli.uvicorn.run")

    assert main(["serve", "--host", "0.0.0.0", "--port", "9000"]) == 0

    run.assert_called_once_with(
        "coffee_api.app:create_app",
        factory=True,
        host="0.0.0.0",
        port=9000,
        reload=False,
        log_level="info",
    )


def test_serve_defaults_from_env(mocker, monkeypatch):
    monkeypatch.setenv("COFFEE_API_PORT", "8123")
    run = mocker.patch("coffee_api.cli.uvicorn.run")

    main(["serve"])

    assert run.call_args.kwargs["port"] == 8123


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_command_is_required():
    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 2


def test_serve_error_prints_message(mocker, capsys):
    mocker.patch("coffee_api.cli.uvicorn.run", side_effect=CoffeeApiError("boom"))

    assert main(["serve"]) == 1

    assert "Error: boom" in capsys.readouterr().err


def test_schema_error_prints_message(mocker, capsys):
    mocker.patch("coffee_api.cli._print_schema", side_effect=CoffeeApiError("no schema"))

    assert main(["schema"]) == 1

    assert "Error: no schema" in capsys.readouterr().err
