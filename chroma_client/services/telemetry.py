"""Optional Statsig product telemetry for client operations.

Events are only sent when ``CHROMA_STATSIG_SERVER_SECRET`` is configured.
Telemetry must never break an API call, so Statsig failures are logged and
dropped here.
"""
from __future__ import annotations

import logging
from typing import Any

from statsig import StatsigEvent, StatsigOptions, StatsigServer, StatsigUser

from chroma_client.config import Settings, get_settings

logger = logging.getLogger(__name__)


class Telemetry:
    def __init__(self, settings: Settings | None = None):
        settings = settings or get_settings()
        self._user_id = settings.app_name
        self._server: StatsigServer | None = None
        if not settings.statsig_server_secret:
            return

        try:
            server = StatsigServer()
            server.initialize(
                settings.statsig_server_secret,
                StatsigOptions(tier=settings.environment),
            )
            self._server = server
        except Exception as exc:  # noqa: BLE001
            logger.warning("Statsig initialization failed: %s", exc)
            self._server = None

    @property
    def enabled(self) -> bool:
        return self._server is not None

    def capture(self, event_name: str, **metadata: Any) -> None:
        """Record ``event_name`` with stringified, non-null metadata."""
        if not self._server:
            return

        fields = {key: str(value) for key, value in metadata.items() if value is not None}
        try:
            self._server.log_event(
                StatsigEvent(StatsigUser(self._user_id), event_name, metadata=fields or None)
            )
        except Exception as exc:  # noqa: BLE001
            logger.debug("Statsig event %s failed: %s", event_name, exc)

    def shutdown(self) -> None:
        if not self._server:
            return

        try:
            self._server.shutdown()
        except Exception as exc:  # noqa: BLE001
            logger.debug("Statsig shutdown failed: %s", exc)
        finally:
            self._server = None
