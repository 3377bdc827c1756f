"""Tests for the command-line entry point."""
from __future__ import annotations

import logging

import pytest
from langchain_core.messages import AIMessage
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from conftest import make_config
from mancala_agent.agents import run_agent
from mancala_agent.logging_utils import configure_root_logger
from mancala_agent.models.content import ActionResponse


def test_build_runtime_registers_move_game():
    runtime = run_agent.build_runtime(make_config(), llm=FakeListChatModel(responses=["x"]))

    assert runtime.find_action("MAKE_MOVE") is not None


def test_printer_echoes_and_remembers(capsys):
    runtime = run_agent.build_runtime(make_config(), llm=FakeListChatModel(responses=["x"]))
    printer = run_agent.make_printer(runtime)

    printer(ActionResponse(text="I've selected pit 3", content={}))

    assert capsys.readouterr().out == "Eliza: I've selected pit 3\n"
    assert isinstance(runtime.messages[-1], AIMessage)


@pytest.mark.asyncio
async def test_handle_message_dispatches_action(monkeypatch, capsys):
    runtime = run_agent.build_runtime(make_config(), llm=FakeListChatModel(responses=["x"]))
    action = runtime.find_action("MOVE_GAME")

    async def fake_handler(rt, message, state, options, callback):
        callback(ActionResponse(text=f"got {message.content} from {message.name}"))
        return True

    monkeypatch.setattr(action, "handler", fake_handler)

    ok = await run_agent.handle_message(runtime, "your turn", "MOVE_GAME", sender="bob")

    assert ok is True
    assert "got your turn from bob" in capsys.readouterr().out


def test_main_without_api_key_exits_with_error(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    monkeypatch.delenv("LOG_DIR", raising=False)
    monkeypatch.delenv("AGENT_LOG_DIR", raising=False)

    assert run_agent.main(["--message", "your turn"]) == 1


def test_configure_root_logger_writes_file(monkeypatch, tmp_path):
    monkeypatch.setenv("TEST_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("TEST_LOG_LEVEL", "debug")

    log_path = configure_root_logger(service_name="mancala-test", env_prefix="TEST_")

    assert log_path == tmp_path / "mancala-test.log"
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("starknet_py").level == logging.WARNING


def test_configure_root_logger_defaults_to_agent_prefix(monkeypatch, tmp_path):
    monkeypatch.setenv("AGENT_LOG_DIR", str(tmp_path / "agent"))
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "shared"))
    monkeypatch.setenv("AGENT_LOG_LEVEL", "warning")

    log_path = configure_root_logger()

    assert log_path == tmp_path / "agent" / "mancala-agent.log"
    assert logging.getLogger().level == logging.WARNING


def test_configure_root_logger_stdout_only(monkeypatch):
    monkeypatch.delenv("AGENT_LOG_DIR", raising=False)
    monkeypatch.delenv("LOG_DIR", raising=False)
    monkeypatch.delenv("AGENT_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "nonsense")

    assert configure_root_logger() is None
    assert logging.getLogger().level == logging.INFO
