import pytest

from gauge_engine.engine.frame_scheduler import ImmediateFrameScheduler, ManualFrameScheduler
from gauge_engine.models.enums import GaugeEventType, LogLevel
from gauge_engine.models.gauge_config import GaugeConfig
from gauge_engine.services.event_bus import EventBus
from gauge_engine.utils.logger import configure_logger, get_logger


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep test output readable; restore logger settings afterwards."""
    logger = get_logger()
    previous = (logger.min_level, logger.use_colors)
    configure_logger(min_level=LogLevel.WARN, use_colors=False)
    yield logger
    configure_logger(*previous)


@pytest.fixture
def manual_scheduler():
    return ManualFrameScheduler()


@pytest.fixture
def immediate_scheduler():
    return ImmediateFrameScheduler()


@pytest.fixture
def event_bus():
    return EventBus(history_limit=1000)


@pytest.fixture
def recorder(event_bus):
    """
    Collects gauge events by type.

    recorder[GaugeEventType.OUTPUTS_UPDATED] -> list of events
    """
    events = {event_type: [] for event_type in GaugeEventType}
    for event_type in GaugeEventType:
        event_bus.subscribe(event_type, events[event_type].append)
    return events


@pytest.fixture
def static_config():
    """Canonical 270° dial without animation"""
    return GaugeConfig(min_value=0, max_value=100, start_angle=135, end_angle=45, animation_enabled=False)
