# civracontext/providers/keywords.py
"""Provider: files implied by what the message talks about"""

from typing import Iterable, List, Sequence, Tuple
from ..core.provider import IContextProvider
from ..core.models import ContextRequest

KeywordRule = Tuple[Tuple[str, ...], Tuple[str, ...]]

# (keywords, paths); every rule with a matching keyword contributes
KEYWORD_RULES: Tuple[KeywordRule, ...] = (
    (("button", "click"), ("components/ui/button.tsx",)),
    (("form", "input"), ("components/ui/input.tsx", "components/ui/form.tsx")),
    (("layout", "navbar", "header"), ("app/layout.tsx",)),
    (("home", "landing", "main page"), ("app/page.tsx",)),
    (("style", "color", "design", "theme"), ("app/globals.css", "tailwind.config.ts")),
)


def infer_relevant_files(message: str, rules: Sequence[KeywordRule] = KEYWORD_RULES) -> List[str]:
    """Match lower-cased message substrings against the keyword rules."""
    lower_message = message.lower()
    files = {}
    for keywords, paths in rules:
        if any(keyword in lower_message for keyword in keywords):
            for path in paths:
                files.setdefault(path, None)
    return list(files)


class KeywordFilesProvider(IContextProvider):

    def __init__(self, rules: Iterable[KeywordRule] = KEYWORD_RULES):
        self.rules = tuple(rules)

    @property
    def name(self) -> str:
        return "keywords"

    def get_priority(self, request: ContextRequest) -> int:
        return 70

    def can_provide(self, request: ContextRequest) -> bool:
        return bool(request.message)

    def provide(self, request: ContextRequest) -> List[str]:
        return infer_relevant_files(request.message, self.rules)
