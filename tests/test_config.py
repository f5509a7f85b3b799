import logging

import pytest

from toylisp.__main__ import main
from toylisp.config import load_settings, flag_from_env, resolve_log_level, DEFAULT_PROMPT


def test_defaults(monkeypatch):
    for var in ("TOYLISP_TRACE", "TOYLISP_COLOR", "TOYLISP_PROMPT", "TOYLISP_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    settings = load_settings()
    assert settings.trace is False
    assert settings.color is True
    assert settings.prompt == DEFAULT_PROMPT
    assert settings.log_level == "WARNING"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TOYLISP_TRACE", "yes")
    monkeypatch.setenv("TOYLISP_COLOR", "0")
    monkeypatch.setenv("TOYLISP_PROMPT", "lisp> ")
    monkeypatch.setenv("TOYLISP_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.trace is True
    assert settings.color is False
    assert settings.prompt == "lisp> "
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("raw,expected", [("1", True), ("ON", True), ("false", False), ("maybe", True), ("", True)])
def test_flag_parsing(monkeypatch, raw, expected):
    monkeypatch.setenv("TOYLISP_FLAG", raw)
    assert flag_from_env("TOYLISP_FLAG", True) is expected


@pytest.mark.parametrize(
    "name,expected",
    [
        ("DEBUG", logging.DEBUG),
        ("info", logging.INFO),
        (" error ", logging.ERROR),
        ("getLogger", logging.WARNING),
        ("basicConfig", logging.WARNING),
        ("nonsense", logging.WARNING),
    ]
)
def test_resolve_log_level(name, expected):
    assert resolve_log_level(name) == expected


def test_main_ignores_non_level_names(tmp_path, capsys):
    program = tmp_path / "prog.lisp"
    program.write_text("(add 2 2)\n")
    assert main([str(program), "--no-color", "--log-level", "getLogger"]) == 0
    assert capsys.readouterr().out.splitlines() == ["4"]
