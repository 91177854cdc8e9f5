# civracontext/providers/core_files.py
"""Provider: project configuration files that are always in context"""

from typing import Iterable, List
from ..core.provider import IContextProvider
from ..core.models import ContextRequest

CORE_FILES = (
    "package.json",
    "tsconfig.json",
    "next.config.ts",
    "next.config.js",
    "tailwind.config.ts",
    "app/globals.css",
)


class CoreFilesProvider(IContextProvider):
    """Always proposes the project's configuration and entry-point files"""

    def __init__(self, core_files: Iterable[str] = CORE_FILES):
        self.core_files = tuple(core_files)

    @property
    def name(self) -> str:
        return "core_files"

    def get_priority(self, request: ContextRequest) -> int:
        return 100

    def provide(self, request: ContextRequest) -> List[str]:
        return list(self.core_files)
