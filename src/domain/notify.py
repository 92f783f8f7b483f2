import logging
from collections.abc import Callable
from typing import TypeVar

logger = logging.getLogger(__name__)

EventT = TypeVar("EventT")


def notify_safely(name: str, handler: Callable[[EventT], None] | None, event: EventT) -> None:
    """Invoke an application event handler, discarding anything it raises.

    Handlers are best-effort observers; their failures are logged and must
    never reach the protocol code that emitted the event.
    """
    if handler is None:
        return
    try:
        handler(event)
    except Exception:
        logger.warning("Event handler '%s' raised", name, exc_info=True)
