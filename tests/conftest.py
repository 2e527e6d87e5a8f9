"""Pytest fixtures for Chat Markup tests."""

import json

import pytest
from pathlib import Path

from chat_markup import config


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Reset the global settings so each test sees defaults."""
    for name in (
        "CHAT_MARKUP_PERSONA_NAME",
        "CHAT_MARKUP_USER_LABEL",
        "CHAT_MARKUP_LINE_GAP_CLASS",
        "CHAT_MARKUP_WRAPPER_CLASS",
        "CHAT_MARKUP_CODE_STYLE",
        "CHAT_MARKUP_DOCX_FONT",
        "CHAT_MARKUP_DOCX_CODE_FONT",
        "CHAT_MARKUP_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "_settings", None)
    yield
    monkeypatch.setattr(config, "_settings", None)


@pytest.fixture
def sample_message() -> str:
    """Sample persona reply using every markup kind."""
    return (
        "Hey **there**! I *love* that idea.\n"
        "Try `pip install` first, then ~~panic~~ relax."
    )


@pytest.fixture
def sample_messages() -> list[dict]:
    """Messages as exported from the chat site."""
    return [
        {
            "id": 1,
            "sender": "user",
            "content": "hi *there*",
            "created_at": "2024-05-01T10:00:00Z",
        },
        {
            "id": 2,
            "sender": "influencer",
            "content": "**Hello!**\n\nHow are you `today`?",
            "created_at": "2024-05-01T10:00:05Z",
        },
        {
            "id": 3,
            "sender": "user",
            "content": "   ",
            "created_at": "2024-05-01T10:00:09Z",
        },
    ]


@pytest.fixture
def tmp_message_file(tmp_path: Path, sample_message: str) -> Path:
    """Create a temporary message file for testing."""
    file_path = tmp_path / "message.txt"
    file_path.write_text(sample_message, encoding="utf-8")
    return file_path


@pytest.fixture
def tmp_transcript_file(tmp_path: Path, sample_messages: list[dict]) -> Path:
    """Create a temporary transcript JSON file for testing."""
    file_path = tmp_path / "chat.json"
    file_path.write_text(
        json.dumps({"persona_name": "Selena", "messages": sample_messages}),
        encoding="utf-8",
    )
    return file_path
