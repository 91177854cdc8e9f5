# civracontext/core/provider.py
"""ContextProvider abstract base class"""

from abc import ABC, abstractmethod
from typing import List
from .models import ContextRequest


class IContextProvider(ABC):
    """Proposes file paths for a context request"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique provider name"""
        pass

    @abstractmethod
    def provide(self, request: ContextRequest) -> List[str]:
        """
        Return the file paths this provider considers relevant, in the order
        they were found.
        """
        pass

    def get_priority(self, request: ContextRequest) -> int:
        """
        (optional) Priority 0-100. Higher priority providers run first, so
        their paths come first in the selection.
        """
        return 50

    def can_provide(self, request: ContextRequest) -> bool:
        """
        (optional) Whether this provider takes part in the request at all.
        """
        return True
