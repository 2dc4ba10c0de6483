"""Notifier adapter registry — pluggable confirmation dispatch.

Uses FakeNotifier by default; configure via the NOTIFICATION_ADAPTER
environment variable.
"""

import os

from orders.notification.port import NotificationGateway

_notifier_instance: NotificationGateway | None = None


def get_notifier() -> NotificationGateway:
    """Return the configured notifier adapter (singleton)."""
    global _notifier_instance
    if _notifier_instance is None:
        adapter = os.environ.get("NOTIFICATION_ADAPTER", "fake")
        if adapter == "fake":
            from orders.notification.fake_notifier import FakeNotifier

            _notifier_instance = FakeNotifier()
        else:
            raise ValueError(f"Unknown notification adapter: {adapter}")
    return _notifier_instance


def set_notifier(notifier: NotificationGateway) -> None:
    """Override the active notifier (useful for tests)."""
    global _notifier_instance
    _notifier_instance = notifier


def reset_notifier():
    """Reset the notifier singleton (useful for testing)."""
    global _notifier_instance
    _notifier_instance = None
