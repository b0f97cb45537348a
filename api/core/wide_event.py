"""Request-scoped wide event (canonical log line) context.

RequestTimingMiddleware creates one dict per request, routes/services/
repositories add fields to it, and the middleware emits it as a single
``request.completed`` log line when the response finishes.

Usage:
    from core.wide_event import set_wide_event_fields

    set_wide_event_fields(user_id=user.id, db_operation="create_user")
"""

from contextvars import ContextVar
from typing import Any

_wide_event: ContextVar[dict[str, Any]] = ContextVar("wide_event")


def init_wide_event() -> dict[str, Any]:
    """Start a fresh wide event for the current async context."""
    event: dict[str, Any] = {}
    _wide_event.set(event)
    return event


def get_wide_event() -> dict[str, Any]:
    """Get the current wide event dict. Returns empty dict if not initialized."""
    try:
        return _wide_event.get()
    except LookupError:
        return {}


def set_wide_event_field(key: str, value: Any) -> None:
    """Set a single field on the current wide event.

    No-op outside a request (CLI, startup, tests without the fixture).
    """
    event = _wide_event.get(None)
    if event is not None:
        event[key] = value


def set_wide_event_fields(**kwargs: Any) -> None:
    """Set multiple fields on the current wide event. No-op outside a request."""
    event = _wide_event.get(None)
    if event is not None:
        event.update(kwargs)


def clear_wide_event() -> None:
    _wide_event.set({})
