"""
Console logger for the gauge engine.

Every line carries a time, a category and a level symbol; keyword arguments
are printed underneath as a small tree:

    [14:23:45] ANIMATION · Animation session started
               ├─ start: 0.0
               ├─ end: 50.0
               └─ frames: 60

Modules bind once at import time:

    log = get_logger().for_category(LogCategory.STATE)
    log.debug("Target value changed", target=50)
"""

from datetime import datetime

from gauge_engine.models.enums import LogLevel, LogCategory

RESET = '\033[0m'
DIM = '\033[2m'

CATEGORY_COLORS = {
    LogCategory.CONFIG: '\033[36m',
    LogCategory.GEOMETRY: '\033[94m',
    LogCategory.ANIMATION: '\033[93m',
    LogCategory.STATE: '\033[96m',
    LogCategory.EVENT: '\033[95m',
    LogCategory.RENDER: '\033[35m',
    LogCategory.SYSTEM: '\033[97m',
    LogCategory.GENERAL: '\033[37m',
}

# symbol, color, priority
LEVELS = {
    LogLevel.DEBUG: ('·', DIM, 0),
    LogLevel.INFO: ('✓', '\033[32m', 1),
    LogLevel.WARN: ('⚠', '\033[33m', 2),
    LogLevel.ERROR: ('✗', '\033[31m', 3),
}

DETAIL_INDENT = " " * 11


class Logger:
    """Prints gauge log lines at or above min_level."""

    def __init__(self, min_level: LogLevel = LogLevel.INFO, use_colors: bool = True):
        self.min_level = min_level
        self.use_colors = use_colors

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{RESET}" if self.use_colors else text

    def log(self, category: LogCategory, message: str, level: LogLevel = LogLevel.INFO, **details):
        symbol, color, priority = LEVELS[level]
        if priority < LEVELS[self.min_level][2]:
            return

        stamp = datetime.now().strftime('[%H:%M:%S]')
        name = self._paint(category.name.ljust(9), CATEGORY_COLORS.get(category, ''))
        print(f"{stamp} {name} {self._paint(symbol, color)} {self._paint(message, color)}")

        items = list(details.items())
        for i, (key, value) in enumerate(items):
            branch = "└─" if i == len(items) - 1 else "├─"
            print(f"{DETAIL_INDENT}{self._paint(branch, DIM)} {key}: {value}")

    def for_category(self, category: LogCategory) -> 'BoundLogger':
        return BoundLogger(self, category)


class BoundLogger:
    """Logger with a fixed category."""

    def __init__(self, base: Logger, category: LogCategory):
        self._base = base
        self.category = category

    def debug(self, message: str, **details): self._base.log(self.category, message, LogLevel.DEBUG, **details)
    def info(self, message: str, **details): self._base.log(self.category, message, LogLevel.INFO, **details)
    def warn(self, message: str, **details): self._base.log(self.category, message, LogLevel.WARN, **details)
    def error(self, message: str, **details): self._base.log(self.category, message, LogLevel.ERROR, **details)


_logger = Logger()


def get_logger() -> Logger:
    return _logger


def configure_logger(min_level: LogLevel = LogLevel.INFO, use_colors: bool = True):
    """
    Reconfigure the shared logger.

    Modules keep BoundLogger references to it, so it is updated in place.
    """
    _logger.min_level = min_level
    _logger.use_colors = use_colors
