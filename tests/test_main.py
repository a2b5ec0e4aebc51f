import io
import logging
import sys

import pytest

from voicecommand.main import main, run_demo, wait_for_enter
from voicecommand.adapters import config_env
from voicecommand.config import Config
from voicecommand.core.config_model import AppConfig


class _Sink:
    def __init__(self):
        self.lines = []

    def write(self, line: str) -> None:
        self.lines.append(line)


def _use_env(monkeypatch, **env):
    for name in ("VOICECOMMAND_PHRASE", "VOICECOMMAND_DEVICE_AVAILABLE", "VOICECOMMAND_WAIT_FOR_ENTER", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    monkeypatch.setattr(config_env, "env_config", Config())


def test_run_demo_default_scenario():
    sink = _Sink()

    result = run_demo(AppConfig(), sink)

    assert result == "OPEN YOUTUBE"
    assert sink.lines == [
        "\n--- Bot is waiting for a command ---",
        "[VoiceSystem] Microphone enabled.",
        "[VoiceSystem] Listening...",
        "[Adapter] Voice converted to text: 'Open YouTube'",
        "BOT: Executing command: >> OPEN YOUTUBE <<",
    ]


def test_run_demo_reports_missing_microphone():
    sink = _Sink()

    result = run_demo(AppConfig(device_available=False), sink)

    assert result is None
    assert sink.lines[-1] == "BOT: Voice input unavailable (microphone not found)"


def test_main_prints_scenario_and_waits_for_enter(monkeypatch, capsys):
    _use_env(monkeypatch)
    reads = []
    monkeypatch.setattr("builtins.input", lambda *args: reads.append(args) or "")

    main()

    lines = capsys.readouterr().out.splitlines()
    assert "[Adapter] Voice converted to text: 'Open YouTube'" in lines
    assert lines[-1].endswith("OPEN YOUTUBE <<")
    assert lines.index("[Adapter] Voice converted to text: 'Open YouTube'") < len(lines) - 1
    assert reads == [()]


def test_main_skips_wait_when_disabled(monkeypatch, capsys):
    _use_env(monkeypatch, VOICECOMMAND_WAIT_FOR_ENTER="false", VOICECOMMAND_PHRASE="Play music")
    reads = []
    monkeypatch.setattr("builtins.input", lambda *args: reads.append(args) or "")

    main()

    assert capsys.readouterr().out.splitlines()[-1] == "BOT: Executing command: >> PLAY MUSIC <<"
    assert reads == []


def test_wait_for_enter_tolerates_closed_stdin():
    def closed():
        raise EOFError

    wait_for_enter(closed)


def test_main_prints_non_ascii_command_on_ascii_console(monkeypatch):
    _use_env(monkeypatch, VOICECOMMAND_WAIT_FOR_ENTER="false", VOICECOMMAND_PHRASE="Відкрити YouTube")
    stream = io.TextIOWrapper(io.BytesIO(), encoding="ascii")
    monkeypatch.setattr(sys, "stdout", stream)

    main()

    stream.flush()
    lines = stream.buffer.getvalue().decode("utf-8").splitlines()
    assert "[Adapter] Voice converted to text: 'Відкрити YouTube'" in lines
    assert lines[-1] == "BOT: Executing command: >> ВІДКРИТИ YOUTUBE <<"


@pytest.mark.parametrize(
    "env, level",
    [
        ({}, logging.WARNING),
        ({"DEBUG": "true"}, logging.DEBUG),
    ],
)
def test_main_log_level_follows_debug_flag(monkeypatch, env, level):
    _use_env(monkeypatch, VOICECOMMAND_WAIT_FOR_ENTER="false", **env)
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    main()

    assert len(calls) == 1
    assert calls[0]["level"] == level
