"""Verification code notifiers: log-only sender and HTTP webhook sender."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

import httpx

from admin_management.domain.exceptions import NotificationDeliveryException
from admin_management.shared.telemetry.logging import get_logger
from admin_management.shared.utils.datetime import utc_now

logger = get_logger(__name__)


def _mask_email(email: str) -> str:
    local, _, domain = email.partition("@")
    if not domain:
        return "***"
    return f"{local[:1]}***@{domain}"


class LogOnlyVerificationNotifier:
    """IVerificationCodeNotifier that logs instead of sending anything.

    Use when no delivery channel is configured. The code itself is never logged.
    """

    async def send(self, admin_user_id: str, code: str, destination_email: str) -> None:
        logger.info(
            "Verification notify: would send code to %s for admin %s",
            _mask_email(destination_email),
            admin_user_id,
        )


class WebhookVerificationNotifier:
    """IVerificationCodeNotifier that POSTs the code to a delivery webhook.

    The webhook owns the actual email. Non-2xx responses and transport
    errors raise NotificationDeliveryException.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout_seconds: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout_seconds
        self._shared_http = http_client

    @asynccontextmanager
    async def _http_cm(self):
        """Yield shared HTTP client or a short-lived one."""
        if self._shared_http is not None:
            yield self._shared_http
            return
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            yield client

    async def send(self, admin_user_id: str, code: str, destination_email: str) -> None:
        payload: dict[str, Any] = {
            "admin_user_id": admin_user_id,
            "code": code,
            "destination_email": destination_email,
            "sent_at": utc_now().isoformat(),
        }
        try:
            async with self._http_cm() as client:
                response = await client.post(self._url, json=payload)
        except httpx.HTTPError as e:
            logger.error(
                "Verification webhook unreachable for admin %s: %s", admin_user_id, str(e)
            )
            raise NotificationDeliveryException(
                f"Verification webhook request failed: {e}"
            ) from e
        if not response.is_success:
            logger.error(
                "Verification webhook rejected admin %s: status=%d",
                admin_user_id,
                response.status_code,
            )
            raise NotificationDeliveryException(
                f"Verification webhook returned status {response.status_code}",
                details={"status_code": response.status_code},
            )
