# civracontext/__init__.py
"""
civracontext - selects which project files go into the next LLM prompt.
"""

from typing import Iterable, List, Optional, Sequence

from .core.manager import ContextManager
from .core.models import ContextRequest, ContextSelection, ConversationMessage
from .core.provider import IContextProvider
from .core.render import build_file_context, is_file_in_context
from .providers.core_files import CORE_FILES, CoreFilesProvider
from .providers.file_references import FileReferencesProvider, extract_file_references
from .providers.history import DEFAULT_HISTORY_WINDOW, HistoryFilesProvider, get_files_from_history
from .providers.keywords import KEYWORD_RULES, KeywordFilesProvider, KeywordRule, infer_relevant_files


def create_default_manager(
    core_files: Iterable[str] = CORE_FILES,
    keyword_rules: Optional[Sequence[KeywordRule]] = None,
) -> ContextManager:
    """Manager with the four standard providers: core, references, history, keywords."""
    return ContextManager([
        CoreFilesProvider(core_files),
        FileReferencesProvider(),
        HistoryFilesProvider(),
        KeywordFilesProvider(KEYWORD_RULES if keyword_rules is None else keyword_rules),
    ])


def get_relevant_files(
    message: str,
    conversation_history: Sequence[ConversationMessage] = (),
    history_window: int = DEFAULT_HISTORY_WINDOW,
) -> List[str]:
    """Paths to attach to the next prompt for this message and conversation."""
    request = ContextRequest(
        message=message,
        conversation_history=list(conversation_history),
        history_window=history_window,
    )
    return create_default_manager().get_context(request).paths


__all__ = [
    'ContextManager', 'ContextRequest', 'ContextSelection', 'ConversationMessage',
    'IContextProvider', 'CoreFilesProvider', 'FileReferencesProvider',
    'HistoryFilesProvider', 'KeywordFilesProvider', 'CORE_FILES', 'KEYWORD_RULES',
    'build_file_context', 'is_file_in_context', 'extract_file_references',
    'get_files_from_history', 'infer_relevant_files', 'create_default_manager',
    'get_relevant_files', 'DEFAULT_HISTORY_WINDOW', 'KeywordRule',
]
