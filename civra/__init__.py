# civra/__init__.py
"""
civra - parses file operations out of LLM responses and picks the project
files to send with the next prompt.
"""

from .core.models import (
    AddDependencyOperation,
    DeleteOperation,
    FileOperation,
    OperationType,
    ParsedResponse,
    RenameOperation,
    WriteOperation,
)
from .core.parser import (
    extract_clean_messages,
    extract_text_content,
    has_code_operations,
    parse_response,
)

__version__ = "0.1.0"

__all__ = [
    'AddDependencyOperation', 'DeleteOperation', 'FileOperation', 'OperationType',
    'ParsedResponse', 'RenameOperation', 'WriteOperation',
    'extract_clean_messages', 'extract_text_content', 'has_code_operations',
    'parse_response', '__version__',
]
