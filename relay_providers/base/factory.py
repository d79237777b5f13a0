"""Provider factory.

Purpose
-------
Resolve a provider selector (``"anthropic"``, ``"azure"``, ``"openai"``) to a
concrete client built from application settings. Client modules are imported
lazily with ``importlib`` so that importing the factory has no side effects.

The set of providers is closed: an unknown selector raises
:class:`UnknownProviderError` and is never defaulted to another provider.
Both the production query path and the connectivity check build their
clients here.

Timeout and fallback semantics
------------------------------
- No timeouts are introduced here. The factory performs no retries or
  fallbacks; it either returns an instance or raises a clear error.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Optional, Tuple, Type

from .http import HttpTransport
from .interfaces import ChatProvider


class UnknownProviderError(Exception):
    """Raised when a provider selector cannot be resolved.

    Failure modes include:
    - The selector is not one of the supported providers.
    - The provider module cannot be imported or the client class is missing.
    """


class ProviderFactory:
    """Create provider clients from a canonical selector and settings."""

    # Map canonical provider names to import paths and class names
    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "anthropic": {"module": "relay_providers.anthropic.client", "class": "AnthropicProvider"},
        "azure": {"module": "relay_providers.azure.client", "class": "AzureOpenAIProvider"},
        "openai": {"module": "relay_providers.openai.client", "class": "OpenAIProvider"},
    }

    @classmethod
    def resolve(cls, selector: str) -> Type[Any]:
        """Return the client class registered for ``selector``.

        Raises
        ------
        UnknownProviderError
            If the selector is unknown or its module/class cannot be loaded.
        """
        name = (selector or "").lower().strip()
        spec = cls._PROVIDERS.get(name)
        if not spec:
            raise UnknownProviderError(
                f"Unknown provider '{selector}'. Supported: {', '.join(cls.supported())}"
            )

        module_path, class_name = spec["module"], spec["class"]
        try:
            mod = import_module(module_path)
        except ImportError as exc:
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{selector}': {exc}"
            ) from exc
        try:
            return getattr(mod, class_name)
        except AttributeError as exc:  # pragma: no cover - packaging failure path
            raise UnknownProviderError(
                f"Client class '{class_name}' not found in '{module_path}' for provider '{selector}'"
            ) from exc

    @classmethod
    def create(
        cls,
        selector: str,
        settings: Any,
        *,
        transport: Optional[HttpTransport] = None,
    ) -> ChatProvider:
        """Build the client for ``selector`` from ``settings``.

        Parameters
        ----------
        selector:
            Provider name, compared case-insensitively after stripping.
        settings:
            Application settings (see :class:`relay_providers.config.Settings`).
        transport:
            Optional transport shared with the client (tests, proxies).
        """
        klass = cls.resolve(selector)
        return klass.from_settings(settings, transport=transport)

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported provider names in deterministic order."""
        return tuple(cls._PROVIDERS.keys())


def create_from_settings(settings: Any, *, transport: Optional[HttpTransport] = None) -> ChatProvider:
    """Build the client selected by ``settings.api_provider``."""
    return ProviderFactory.create(settings.api_provider, settings, transport=transport)


__all__ = ["ProviderFactory", "UnknownProviderError", "create_from_settings"]
