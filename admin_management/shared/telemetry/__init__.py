"""Shared telemetry: logging setup."""

from admin_management.shared.telemetry.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
