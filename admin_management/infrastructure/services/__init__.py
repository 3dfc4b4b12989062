"""Infrastructure services: verification code notifiers."""

from admin_management.infrastructure.services.verification_notifier import (
    LogOnlyVerificationNotifier,
    WebhookVerificationNotifier,
)

__all__ = ["LogOnlyVerificationNotifier", "WebhookVerificationNotifier"]
