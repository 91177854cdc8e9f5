# civracontext/core/manager.py
"""civracontext core manager"""

import logging
from typing import Any, Dict, Iterable, List
from .models import ContextRequest, ContextSelection
from .provider import IContextProvider

logger = logging.getLogger(__name__)


class ContextManager:
    """Runs the registered providers and unions their paths into one selection"""

    def __init__(self, providers: Iterable[IContextProvider] = ()):
        self._providers: List[IContextProvider] = list(providers)

    @property
    def providers(self) -> List[IContextProvider]:
        return list(self._providers)

    def register_provider(self, provider: IContextProvider):
        """Register a provider; a provider with an already registered name replaces it."""
        self._providers = [p for p in self._providers if p.name != provider.name]
        self._providers.append(provider)

    def get_context(self, request: ContextRequest) -> ContextSelection:
        """
        Build the selection for a request.

        Providers are filtered with can_provide and run by descending
        priority; equal priorities keep registration order. A provider that
        fails is logged and skipped, the others still contribute.
        """
        diagnostics: List[Dict[str, Any]] = []
        seen = set()
        paths: List[str] = []

        filtered_providers = [p for p in self._providers if p.can_provide(request)]
        sorted_providers = sorted(filtered_providers, key=lambda p: p.get_priority(request), reverse=True)

        for provider in sorted_providers:
            try:
                provided = provider.provide(request)
            except Exception as e:
                logger.warning("Provider %s failed: %s", provider.name, e)
                diagnostics.append({
                    "provider": provider.name,
                    "status": "error",
                    "error": str(e),
                })
                continue

            for path in provided:
                if path not in seen:
                    seen.add(path)
                    paths.append(path)
            diagnostics.append({
                "provider": provider.name,
                "status": "success",
                "paths_provided": len(provided),
            })

        logger.debug("Selected %d context files", len(paths))
        return ContextSelection(paths=paths, provider_diagnostics=diagnostics)
