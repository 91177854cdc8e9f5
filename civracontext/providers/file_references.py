# civracontext/providers/file_references.py
"""Provider: files the user names explicitly in the message"""

import re
from typing import List
from ..core.provider import IContextProvider
from ..core.models import ContextRequest

# Scanned in this order; a match's group 1 wins over the full match
REFERENCE_PATTERNS = (
    # app/page.tsx, src/components/Button.tsx
    re.compile(r"(?:app|src|components|lib|pages|utils|styles)/[\w\-/]+\.[jt]sx?", re.ASCII),
    # "app/layout.tsx"
    re.compile(r'"([\w\-/]+\.[jt]sx?)"', re.ASCII),
    # `app/page.tsx`
    re.compile(r"`([\w\-/]+\.[jt]sx?)`", re.ASCII),
)


def extract_file_references(text: str) -> List[str]:
    """Return the source-file paths mentioned in text, deduplicated, in scan order."""
    files = {}
    for pattern in REFERENCE_PATTERNS:
        for match in pattern.finditer(text):
            path = match.group(1) if match.groups() else match.group(0)
            files.setdefault(path, None)
    return list(files)


class FileReferencesProvider(IContextProvider):

    @property
    def name(self) -> str:
        return "file_references"

    def get_priority(self, request: ContextRequest) -> int:
        return 90

    def can_provide(self, request: ContextRequest) -> bool:
        return bool(request.message)

    def provide(self, request: ContextRequest) -> List[str]:
        return extract_file_references(request.message)
