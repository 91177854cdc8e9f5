# civracontext/providers/history.py
"""Provider: files the assistant wrote or renamed in recent turns"""

import re
from typing import List, Sequence
from ..core.provider import IContextProvider
from ..core.models import ContextRequest, ConversationMessage

DEFAULT_HISTORY_WINDOW = 5

# Opening tags are enough here, bodies are irrelevant
WRITE_TAG = re.compile(r'<dec-write\s+file_path="([^"]+)"')
SEARCH_REPLACE_TAG = re.compile(r'<dec-search-replace\s+file_path="([^"]+)"')
RENAME_TAG = re.compile(r'<dec-rename\s+original_file_path="([^"]+)"\s+new_file_path="([^"]+)"')


def get_files_from_history(
    conversation_history: Sequence[ConversationMessage],
    last_n: int = DEFAULT_HISTORY_WINDOW,
) -> List[str]:
    """
    Collect paths touched by assistant messages among the last `last_n`
    messages. A renamed file is reported under its new path only.
    """
    if last_n <= 0:
        return []

    files = {}
    for message in list(conversation_history)[-last_n:]:
        if message.role != "assistant" or not message.content:
            continue
        for match in WRITE_TAG.finditer(message.content):
            files.setdefault(match.group(1), None)
        for match in SEARCH_REPLACE_TAG.finditer(message.content):
            files.setdefault(match.group(1), None)
        for match in RENAME_TAG.finditer(message.content):
            files.setdefault(match.group(2), None)
    return list(files)


class HistoryFilesProvider(IContextProvider):

    @property
    def name(self) -> str:
        return "history"

    def get_priority(self, request: ContextRequest) -> int:
        return 80

    def can_provide(self, request: ContextRequest) -> bool:
        return bool(request.conversation_history)

    def provide(self, request: ContextRequest) -> List[str]:
        return get_files_from_history(request.conversation_history, request.history_window)
