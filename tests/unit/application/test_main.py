import json
from unittest.mock import patch

import pytest
from environs import Env

from rrl_profile.adapter import RrlProfileAPI
from rrl_profile.main import build_parser, main, run
from tests.mocks import FailingElevationProvider, MockElevationProvider

ARGV = [
    "--a", "52.072472", "113.376417",
    "--b", "52.074328", "113.385764",
    "--antenna-a", "30",
    "--antenna-b", "20",
    "--freq", "18",
]


@pytest.fixture
def mock_api():
    """Replaces the environment-built facade with one backed by a mock provider."""
    provider = MockElevationProvider(name="opentopodata")
    with patch(
        "rrl_profile.main.RrlProfileAPI.create_from_env",
        return_value=RrlProfileAPI(provider),
    ) as factory:
        yield factory


def test_parser_defaults():
    args = build_parser().parse_args(ARGV)

    assert args.a == [52.072472, 113.376417]
    assert args.k == 1.33
    assert args.step == 30.0
    assert not args.json


def test_parser_requires_sites():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--antenna-a", "30"])


@pytest.mark.asyncio
async def test_run_console_output(mock_api, capsys):
    args = build_parser().parse_args(ARGV + ["--name-a", "Tower A"])

    exit_code = await run(args, Env())

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "RRL Path Profile" in out
    assert "Tower A" in out
    assert "opentopodata" in out
    assert "Samples:" in out
    mock_api.assert_called_once()


@pytest.mark.asyncio
async def test_run_json_output(mock_api, capsys):
    args = build_parser().parse_args(ARGV + ["--json"])

    exit_code = await run(args, Env())

    data = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert data["summary"]["los_ok"] is True
    assert data["elevation_provider"] == "opentopodata"
    assert data["samples"][0]["distance_meters"] == 0.0


@pytest.mark.asyncio
async def test_run_validation_error(mock_api, capsys):
    args = build_parser().parse_args(ARGV[:-1] + ["0"])

    exit_code = await run(args, Env())

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "VALIDATION_ERROR" in captured.err


@pytest.mark.asyncio
async def test_run_elevation_error_as_json(capsys):
    args = build_parser().parse_args(ARGV + ["--json"])
    with patch(
        "rrl_profile.main.RrlProfileAPI.create_from_env",
        return_value=RrlProfileAPI(FailingElevationProvider()),
    ):
        exit_code = await run(args, Env())

    err = capsys.readouterr().err
    payload = json.loads(err[err.index("{"):])
    assert exit_code == 1
    assert payload["error"]["code"] == "ELEVATION_ERROR"


def test_main_exits_with_run_status(mock_api, monkeypatch):
    monkeypatch.setattr("sys.argv", ["rrl-profile"] + ARGV)
    with patch("rrl_profile.main.Env") as MockEnv, patch(
        "rrl_profile.main.setup_logging"
    ) as mock_setup_logging:
        with pytest.raises(SystemExit) as exc_info:
            main()

    assert exc_info.value.code == 0
    MockEnv.return_value.read_env.assert_called_once_with(".env")
    mock_setup_logging.assert_called_once_with(MockEnv.return_value)
