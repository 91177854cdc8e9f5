# civracontext/core/models.py
"""civracontext core data models"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

MESSAGE_ROLES = ("user", "assistant", "system")


@dataclass(frozen=True)
class ConversationMessage:
    """One chat message as stored by the conversation owner."""
    role: str
    content: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ConversationMessage":
        if not isinstance(data, dict):
            raise ValueError(f"Conversation message must be a mapping, got: {type(data).__name__}")
        role = data.get("role")
        if role not in MESSAGE_ROLES:
            raise ValueError(f"Unknown message role: {role!r}")
        content = data.get("content")
        if content is None:
            content = ""
        if not isinstance(content, str):
            raise ValueError(f"Message content must be a string, got: {type(content).__name__}")
        return cls(role=role, content=content)


@dataclass
class ContextRequest:
    """
    Input for a ContextManager run.
    """
    message: str
    conversation_history: List[ConversationMessage] = field(default_factory=list)
    # How many of the most recent messages are scanned for touched files
    history_window: int = 5


@dataclass
class ContextSelection:
    """
    Files selected for the next prompt, unique and in first-insertion order.
    """
    paths: List[str] = field(default_factory=list)
    provider_diagnostics: List[Dict[str, Any]] = field(default_factory=list)
