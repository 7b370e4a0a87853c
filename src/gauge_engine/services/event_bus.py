"""
Event Bus - Gauge event routing

Implements pub-sub pattern:
- Publishers: publish(event)
- Subscribers: subscribe(event_type, handler, priority, filter_fn)
- Middleware: add_middleware(middleware_fn)

Publishing is synchronous: gauge events are raised from inside frame
callbacks, which must finish before the host's next frame.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from gauge_engine.models.enums import GaugeEventType, LogCategory
from gauge_engine.models.events import Event
from gauge_engine.utils.logger import get_logger

log = get_logger().for_category(LogCategory.EVENT)


@dataclass
class EventHandler:
    """Event handler registration"""
    handler: Callable[[Event], None]
    priority: int
    filter_fn: Optional[Callable[[Event], bool]]


class EventBus:
    """
    Event bus for gauge observers

    Features:
    - Priority-based handler execution (high priority first)
    - Per-handler filtering
    - Middleware pipeline (logging, blocking, rewriting)
    - Fault tolerance (one handler crash doesn't stop others)

    Example:
        bus = EventBus()
        bus.subscribe(
            GaugeEventType.OUTPUTS_UPDATED,
            lambda e: redraw(e.outputs),
            priority=10,
        )
        gauge = GaugeState(event_bus=bus)
    """

    def __init__(self, history_limit: int = 100):
        self._handlers: Dict[GaugeEventType, List[EventHandler]] = {}
        self._middleware: List[Callable[[Event], Optional[Event]]] = []

        # Event history (bounded, newest last)
        self._event_history: List[Event] = []
        self._history_limit = history_limit

    def subscribe(
        self,
        event_type: GaugeEventType,
        handler: Callable[[Event], None],
        priority: int = 0,
        filter_fn: Optional[Callable[[Event], bool]] = None
    ) -> None:
        """
        Subscribe to event type

        Args:
            event_type: Which events to listen for
            handler: Function to call with the event
            priority: Execution priority (higher = called first, default: 0)
            filter_fn: Optional filter (return True = handle, False = skip)
        """
        handlers = self._handlers.setdefault(event_type, [])
        handlers.append(EventHandler(handler, priority, filter_fn))

        # Stable sort keeps registration order within one priority
        handlers.sort(key=lambda h: h.priority, reverse=True)

        log.debug(
            "Event handler subscribed",
            event_type=event_type.name,
            handler=getattr(handler, "__name__", repr(handler)),
            priority=priority
        )

    def unsubscribe(self, event_type: GaugeEventType, handler: Callable[[Event], None]) -> bool:
        """
        Remove a handler.

        Returns:
            True if the handler was registered
        """
        handlers = self._handlers.get(event_type, [])
        remaining = [h for h in handlers if h.handler != handler]
        self._handlers[event_type] = remaining
        return len(remaining) != len(handlers)

    def add_middleware(self, middleware: Callable[[Event], Optional[Event]]) -> None:
        """
        Add middleware to event processing pipeline

        Middleware can modify events (return a new one), block them (return
        None) or just observe them. Runs in registration order.
        """
        self._middleware.append(middleware)
        log.debug("Middleware registered", middleware=getattr(middleware, "__name__", repr(middleware)))

    def publish(self, event: Event) -> None:
        """
        Publish event to all subscribers

        Flow:
        1. Apply middleware (can modify or block event)
        2. Save to event history
        3. Execute handlers by priority, applying per-handler filters
        4. Log handler exceptions and continue
        """
        for middleware in self._middleware:
            processed_event = middleware(event)
            if processed_event is None:
                return
            event = processed_event

        self._event_history.append(event)
        if len(self._event_history) > self._history_limit:
            self._event_history.pop(0)

        for handler_entry in self._handlers.get(event.type, []):
            if handler_entry.filter_fn and not handler_entry.filter_fn(event):
                continue

            try:
                handler_entry.handler(event)
            except Exception as e:
                log.error(
                    f"Event handler failed for {event.type.name}",
                    handler=getattr(handler_entry.handler, "__name__", repr(handler_entry.handler)),
                    exception=repr(e)
                )

    def handler_count(self, event_type: GaugeEventType) -> int:
        return len(self._handlers.get(event_type, []))

    def get_event_history(self, limit: int = 10) -> List[Event]:
        """
        Get recent events from history

        Args:
            limit: Number of recent events to return

        Returns:
            List of recent events (newest last)
        """
        return self._event_history[-limit:]

    def clear_history(self) -> None:
        """Clear event history"""
        self._event_history.clear()
