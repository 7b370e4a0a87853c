"""Event bus middleware"""

from gauge_engine.models.enums import GaugeEventType, LogCategory
from gauge_engine.models.events import Event
from gauge_engine.utils.logger import get_logger

log = get_logger().for_category(LogCategory.EVENT)


def log_middleware(event: Event) -> Event:
    """Log every event except per-frame output updates."""
    if event.type != GaugeEventType.OUTPUTS_UPDATED:
        log.debug(f"Event: {event.type.name}", **event.to_data())
    return event
