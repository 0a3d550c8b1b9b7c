"""
Base classes for domain events and event handling.
Events are delivered synchronously, in registration order, on the caller's thread.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional
import uuid


logger = logging.getLogger(__name__)


class DomainEvent(ABC):
    """Base class for all domain events."""

    def __init__(self, event_id: Optional[str] = None, occurred_at: Optional[datetime] = None):
        self.event_id = event_id or str(uuid.uuid4())
        self.occurred_at = occurred_at or datetime.now(timezone.utc)

    @property
    def event_type(self) -> str:
        """Event type, derived from the class name."""
        return self.__class__.__name__

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "occurred_at": self.occurred_at.isoformat(),
            "data": self._get_event_data()
        }

    @abstractmethod
    def _get_event_data(self) -> Dict[str, Any]:
        """Get event-specific data for serialization."""
        pass


class EventHandler(ABC):
    """Base class for event handlers."""

    @abstractmethod
    def handle(self, event: DomainEvent) -> None:
        """Handle a domain event."""
        pass

    def can_handle(self, event: DomainEvent) -> bool:
        """Check if this handler can process the given event."""
        return True


class CallbackHandler(EventHandler):
    """Adapts a plain callable to the EventHandler interface."""

    def __init__(
        self,
        callback: Callable[[DomainEvent], None],
        event_types: Optional[List[str]] = None
    ):
        self.callback = callback
        self.event_types = event_types

    def handle(self, event: DomainEvent) -> None:
        self.callback(event)

    def can_handle(self, event: DomainEvent) -> bool:
        return self.event_types is None or event.event_type in self.event_types


class EventDispatcher:
    """Dispatches domain events to registered handlers."""

    def __init__(self):
        """Initialize event dispatcher."""
        self._handlers: Dict[str, List[EventHandler]] = {}
        self._global_handlers: List[EventHandler] = []
        self._event_log: List[Dict[str, Any]] = []

    def register_handler(self, event_type: str, handler: EventHandler) -> None:
        """Register an event handler for specific event type."""
        if event_type not in self._handlers:
            self._handlers[event_type] = []

        self._handlers[event_type].append(handler)
        logger.debug(f"Registered handler {handler.__class__.__name__} for {event_type}")

    def register_global_handler(self, handler: EventHandler) -> None:
        """Register a handler that receives all events it can handle."""
        self._global_handlers.append(handler)
        logger.debug(f"Registered global handler {handler.__class__.__name__}")

    def dispatch(self, event: DomainEvent) -> int:
        """
        Dispatch event to all registered handlers.
        Returns the number of handlers the event was delivered to.
        """
        self._event_log.append(event.to_dict())

        specific_handlers = self._handlers.get(event.event_type, [])
        all_handlers = specific_handlers + [
            h for h in self._global_handlers
            if h.can_handle(event)
        ]

        if not all_handlers:
            logger.debug(f"No handlers registered for event: {event.event_type}")
            return 0

        for handler in all_handlers:
            self._safe_handle(handler, event)

        logger.debug(f"Dispatched {event.event_type} to {len(all_handlers)} handler(s)")
        return len(all_handlers)

    def _safe_handle(self, handler: EventHandler, event: DomainEvent) -> None:
        """Execute a handler; a failing handler never affects the others."""
        try:
            handler.handle(event)
        except Exception as e:
            logger.error(
                f"Handler {handler.__class__.__name__} failed to process "
                f"{event.event_type}: {str(e)}"
            )

    def get_event_log(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Get recent events from the log, newest first."""
        events = list(reversed(self._event_log))
        return events[:limit] if limit else events

    def clear_event_log(self) -> None:
        """Clear the event log."""
        self._event_log.clear()

    def get_registered_handlers(self) -> Dict[str, List[str]]:
        """Get information about registered handlers."""
        result = {}

        for event_type, handlers in self._handlers.items():
            result[event_type] = [h.__class__.__name__ for h in handlers]

        if self._global_handlers:
            result["global"] = [h.__class__.__name__ for h in self._global_handlers]

        return result
