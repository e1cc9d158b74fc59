import argparse
import logging

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from gitbook2pdf import __version__, cli
from gitbook2pdf.config import Settings
from gitbook2pdf.downloader import RunSummary
from gitbook2pdf.errors import DownloadError


@pytest.fixture
def calls(monkeypatch):
    """Replace the real run() and record the settings it receives."""
    recorded = []

    def fake_run(settings):
        recorded.append(settings)
        return RunSummary()

    monkeypatch.setattr(cli, "run", fake_run)
    return recorded


@pytest.mark.parametrize("value, expected", [("30", 30.0), ("0", 0.0), ("2.5", 2.5)])
def test_validate_timeout(value, expected):
    assert cli.validate_timeout(value) == expected


@pytest.mark.parametrize("value", ["abc", "-1", "nan", "inf", ""])
def test_validate_timeout_rejects(value):
    with pytest.raises(argparse.ArgumentTypeError):
        cli.validate_timeout(value)


def test_validate_url():
    assert cli.validate_url("HTTPS://docs.example.com") == "HTTPS://docs.example.com"
    with pytest.raises(argparse.ArgumentTypeError):
        cli.validate_url("docs.example.com")


def test_defaults(calls):
    cli.main(["https://docs.example.com"])

    (settings,) = calls
    assert settings == Settings(url="https://docs.example.com", out_dir="pages", timeout=30)
    assert settings.timeout_ms == 30000
    assert settings.check_gitbook and settings.headless


def test_options(calls):
    cli.main(["https://docs.example.com", "-o", "out", "-t", "1.5", "--skip-gitbook-check", "--show-browser"])

    (settings,) = calls
    assert settings.out_dir == "out"
    assert settings.timeout_ms == 1500
    assert not settings.check_gitbook
    assert not settings.headless


@pytest.mark.parametrize("flag", ["--outDir", "--out-dir"])
def test_out_dir_spellings(calls, flag):
    cli.main(["https://docs.example.com", flag, "archive"])
    assert calls[0].out_dir == "archive"


@pytest.mark.parametrize("argv", [
    ["https://docs.example.com", "-t", "soon"],
    ["https://docs.example.com", "--timeout", "-3"],
    ["ftp://docs.example.com"],
    [],
])
def test_invalid_arguments_exit_before_any_work(calls, argv, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    assert exc.value.code == 2
    assert calls == []
    assert not (tmp_path / "pages").exists()


@pytest.mark.parametrize("error", [
    DownloadError("Not Found (404)"),
    PlaywrightTimeoutError("Timeout 30000ms exceeded."),
])
def test_fatal_run_exits_non_zero(monkeypatch, error):
    def failing_run(settings):
        raise error

    monkeypatch.setattr(cli, "run", failing_run)
    with pytest.raises(SystemExit) as exc:
        cli.main(["https://docs.example.com"])
    assert exc.value.code == 1


def test_verbosity_flags(calls):
    cli.main(["https://docs.example.com", "-v"])
    assert logging.getLogger("gitbook2pdf").level == logging.DEBUG
    cli.main(["https://docs.example.com", "-q"])
    assert logging.getLogger("gitbook2pdf").level == logging.WARNING


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--version"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out
