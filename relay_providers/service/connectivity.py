"""Connectivity check consumer.

Drives one provider's ``check_configuration`` and maps the outcome onto four
states a settings screen (or the CLI) can render:

``NOT_STARTED`` -> ``LOADING`` -> ``SUCCESS`` | ``FAILURE``

Changing the settings resets the state to ``NOT_STARTED``. A run requested
while another is in flight is ignored. The user-facing notice carries the
first problem's raw message; no remediation hints are added.

The client is always built through the factory, so an unsupported
``api_provider`` raises :class:`UnknownProviderError` out of :meth:`run`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, List, Optional

from ..base.factory import create_from_settings
from ..base.interfaces import ChatProvider
from ..base.logging import LogContext, get_logger, log_event


class ConnectivityStatus(str, Enum):
    """Presentation state of a connectivity check."""

    NOT_STARTED = "not_started"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


Notify = Callable[[str], None]


def failure_notice(provider: str, problem: Optional[str]) -> str:
    text = f"Cannot connect to the {provider} API. Please check your settings."
    return f"{text} {problem}" if problem else text


def success_notice(provider: str) -> str:
    return f"Successfully connected to the {provider} API."


class ConnectivityCheck:
    """Four-state wrapper around :meth:`ChatProvider.check_configuration`.

    Parameters:
        settings: Application settings; ``settings.api_provider`` selects the
            client.
        notify: Optional callback receiving the user-facing notice text.
        client_factory: Builds the client from settings; defaults to
            :func:`create_from_settings`.
    """

    def __init__(
        self,
        settings: Any,
        notify: Optional[Notify] = None,
        client_factory: Callable[[Any], ChatProvider] = create_from_settings,
    ) -> None:
        self._settings = settings
        self._notify = notify
        self._client_factory = client_factory
        self._status = ConnectivityStatus.NOT_STARTED
        self._problems: List[str] = []
        self._logger = get_logger("connectivity")

    @property
    def status(self) -> ConnectivityStatus:
        return self._status

    @property
    def problems(self) -> List[str]:
        """Problems reported by the last completed run."""
        return list(self._problems)

    @property
    def settings(self) -> Any:
        return self._settings

    def update_settings(self, settings: Any) -> None:
        """Replace the settings and reset the state to ``NOT_STARTED``."""
        self._settings = settings
        self._status = ConnectivityStatus.NOT_STARTED
        self._problems = []

    async def run(self) -> ConnectivityStatus:
        """Check the configured provider once and return the final state.

        Ignored (returns ``LOADING``) while a previous run is in flight.
        """
        if self._status is ConnectivityStatus.LOADING:
            return self._status

        provider = self._settings.api_provider
        self._status = ConnectivityStatus.LOADING
        try:
            client = self._client_factory(self._settings)
            problems = await client.check_configuration()
        except BaseException:
            # Reset so the check can run again.
            self._status = ConnectivityStatus.NOT_STARTED
            raise

        self._problems = list(problems)
        ctx = LogContext(provider=client.provider_name)
        if problems:
            self._status = ConnectivityStatus.FAILURE
            log_event(self._logger, "connectivity.failure", ctx, problems=len(problems))
            self._emit(failure_notice(provider, problems[0]))
        else:
            self._status = ConnectivityStatus.SUCCESS
            log_event(self._logger, "connectivity.success", ctx)
            self._emit(success_notice(provider))
        return self._status

    def _emit(self, text: str) -> None:
        if self._notify is not None:
            self._notify(text)


__all__ = [
    "ConnectivityStatus",
    "ConnectivityCheck",
    "failure_notice",
    "success_notice",
]
