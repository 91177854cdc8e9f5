# civra/core/models.py
"""
Core civra data structures: the file operations extracted from an LLM
response and the parsed response that carries them.
These objects flow from the response parser to whatever layer applies the
changes and renders the chat.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union


class OperationType(Enum):
    """Kind of a file operation."""
    WRITE = "write"
    DELETE = "delete"
    RENAME = "rename"
    ADD_DEPENDENCY = "add-dependency"


@dataclass(frozen=True)
class WriteOperation:
    """Create or overwrite a file with the given content."""
    file_path: str
    content: str = ""

    @property
    def type(self) -> OperationType:
        return OperationType.WRITE

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, **asdict(self)}


@dataclass(frozen=True)
class DeleteOperation:
    """Remove a file."""
    file_path: str

    @property
    def type(self) -> OperationType:
        return OperationType.DELETE

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, **asdict(self)}


@dataclass(frozen=True)
class RenameOperation:
    """Move a file from original_path to new_path."""
    original_path: str
    new_path: str

    @property
    def type(self) -> OperationType:
        return OperationType.RENAME

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, **asdict(self)}


@dataclass(frozen=True)
class AddDependencyOperation:
    """Install a package into the project."""
    package_name: str

    @property
    def type(self) -> OperationType:
        return OperationType.ADD_DEPENDENCY

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, **asdict(self)}


FileOperation = Union[WriteOperation, DeleteOperation, RenameOperation, AddDependencyOperation]


@dataclass(frozen=True)
class ParsedResponse:
    """
    Result of parsing one LLM response.

    `code_block` and `summary` are None when the response has no command
    block at all; in that case the whole (stripped) text is the explanation.
    """
    explanation: str = ""
    summary: Optional[str] = None
    code_block: Optional[str] = None
    operations: Tuple[FileOperation, ...] = field(default_factory=tuple)

    @property
    def has_operations(self) -> bool:
        return bool(self.operations)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "explanation": self.explanation,
            "summary": self.summary,
            "code_block": self.code_block,
            "operations": [op.to_dict() for op in self.operations],
        }
