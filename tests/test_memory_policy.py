"""Tests for the conversation memory policy"""
import logging

from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from mancala_agent.agents.memory_policy import MancalaMemoryPolicy


def test_recent_drops_system_messages_and_keeps_last_n():
    policy = MancalaMemoryPolicy(conversation_length=2)
    messages = [
        SystemMessage(content="rules"),
        HumanMessage(content="one"),
        AIMessage(content="two"),
        HumanMessage(content="three"),
    ]

    recent = policy.recent(messages)

    assert [m.content for m in recent] == ["two", "three"]


def test_zero_length_window_is_empty():
    policy = MancalaMemoryPolicy(conversation_length=0)
    assert policy.recent([HumanMessage(content="hello")]) == []


def test_trimming_kicks_in_over_threshold():
    policy = MancalaMemoryPolicy(max_tokens=100, conversation_length=50)
    messages = [HumanMessage(content="x" * 200) for _ in range(5)]

    assert policy.should_trim_memory(messages)

    recent = policy.recent(messages)

    assert len(recent) < len(messages)
    assert not policy.should_trim_memory(recent)


def test_format_messages_names_speakers():
    policy = MancalaMemoryPolicy()
    messages = [
        HumanMessage(content="your turn", name="alice"),
        AIMessage(content="pit 3"),
        HumanMessage(content=[{"type": "text", "text": "nice"}]),
    ]

    assert policy.format_messages(messages, "Eliza") == (
        "alice: your turn\nEliza: pit 3\nuser: nice"
    )


def test_compression_status():
    policy = MancalaMemoryPolicy(max_tokens=1000)
    status = policy.get_compression_status([HumanMessage(content="hello")])

    assert status["max_tokens"] == 1000
    assert status["compression_threshold"] == 700
    assert status["message_count"] == 1
    assert status["needs_trimming"] is False


def test_trimming_logs_budget_usage(caplog):
    policy = MancalaMemoryPolicy(max_tokens=100, conversation_length=50)
    messages = [HumanMessage(content="x" * 200) for _ in range(5)]

    with caplog.at_level(logging.INFO, logger="mancala_agent.agents.memory_policy"):
        policy.recent(messages)

    assert "Trimmed conversation at" in caplog.text
    assert "5 ->" in caplog.text
