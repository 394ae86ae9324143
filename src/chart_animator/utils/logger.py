"""
Structured console logger

One line per message, keyword details rendered as a tree below it:

    [14:23:45] ANIMATOR  ✓ Animator stopped
               ├─ forced: True
               └─ phases: X=1.000, Y=1.000

Detail values are rendered for the engine's own types: Dimension-keyed
phase maps, enum members by name, floats without trailing zeros and
exceptions as "Type: message".

Modules bind a category once at import time:

    log = get_category_logger(LogCategory.ANIMATOR)
    log.debug("Dimension armed", dimension=Dimension.X, duration=1.5)
"""

from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional

from chart_animator.models.enums import Dimension, LogCategory, LogLevel

RESET = "\033[0m"
DIM = "\033[2m"
DEFAULT_COLOR = "\033[37m"

CATEGORY_COLORS = {
    LogCategory.CONFIG: "\033[36m",      # cyan
    LogCategory.ANIMATOR: "\033[93m",    # bright yellow
    LogCategory.TICK: "\033[94m",        # bright blue
    LogCategory.OBSERVER: "\033[95m",    # bright magenta
    LogCategory.SYSTEM: "\033[97m",      # bright white
}

# level -> (rank, symbol, color)
LEVEL_STYLES = {
    LogLevel.DEBUG: (0, "·", DIM),
    LogLevel.INFO: (1, "✓", "\033[32m"),
    LogLevel.WARN: (2, "⚠", "\033[33m"),
    LogLevel.ERROR: (3, "✗", "\033[31m"),
}

CATEGORY_WIDTH = 9
DETAIL_INDENT = " " * 11


def format_phases(phases: Mapping[Dimension, float]) -> str:
    """{X: 0.3, Y: 1.0} -> "X=0.300, Y=1.000" """
    return ", ".join(f"{dimension.name}={phase:.3f}" for dimension, phase in phases.items())


def format_value(value: Any) -> str:
    """Render one detail value"""
    if isinstance(value, BaseException):
        return f"{type(value).__name__}: {value}"
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, float):
        return f"{value:.4f}".rstrip("0").rstrip(".")
    if isinstance(value, Mapping) and value and all(isinstance(k, Dimension) for k in value):
        return format_phases(value)
    return str(value)


class Logger:
    """Level-filtered, category-tagged console logger (one shared instance)"""

    def __init__(self, min_level: LogLevel = LogLevel.INFO, use_colors: bool = True):
        self.min_level = min_level
        self.use_colors = use_colors

    def enabled_for(self, level: LogLevel) -> bool:
        return LEVEL_STYLES[level][0] >= LEVEL_STYLES[self.min_level][0]

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{RESET}" if self.use_colors else text

    def log(self, category: LogCategory, message: str, level: LogLevel = LogLevel.INFO, **details):
        """
        Print message and its details if level passes the threshold.

        Args:
            category: Subsystem tag shown after the timestamp
            message: Main line text
            level: DEBUG, INFO, WARN or ERROR
            **details: Rendered one per line with format_value()
        """
        if not self.enabled_for(level):
            return

        _, symbol, color = LEVEL_STYLES[level]
        stamp = datetime.now().strftime("[%H:%M:%S]")
        tag = self._paint(category.name.ljust(CATEGORY_WIDTH), CATEGORY_COLORS.get(category, DEFAULT_COLOR))
        print(f"{stamp} {tag} {self._paint(symbol, color)} {self._paint(message, color)}")

        last = len(details) - 1
        for i, (key, value) in enumerate(details.items()):
            branch = self._paint("└─" if i == last else "├─", DIM)
            print(f"{DETAIL_INDENT}{branch} {key}: {format_value(value)}")

    def debug(self, category: LogCategory, message: str, **details): self.log(category, message, LogLevel.DEBUG, **details)
    def info(self, category: LogCategory, message: str, **details): self.log(category, message, LogLevel.INFO, **details)
    def warn(self, category: LogCategory, message: str, **details): self.log(category, message, LogLevel.WARN, **details)
    def error(self, category: LogCategory, message: str, **details): self.log(category, message, LogLevel.ERROR, **details)

    def for_category(self, category: LogCategory) -> "BoundLogger":
        return BoundLogger(self, category)


class BoundLogger:
    """View of the shared Logger with a default category (overridable per call)"""

    def __init__(self, base: Logger, category: LogCategory):
        self._base = base
        self._category = category

    def log(self, message: str, level: LogLevel = LogLevel.INFO, category: Optional[LogCategory] = None, **details):
        self._base.log(category or self._category, message, level, **details)

    def debug(self, message: str, **details): self.log(message, LogLevel.DEBUG, **details)
    def info(self, message: str, **details): self.log(message, LogLevel.INFO, **details)
    def warn(self, message: str, **details): self.log(message, LogLevel.WARN, **details)
    def error(self, message: str, **details): self.log(message, LogLevel.ERROR, **details)

    def with_category(self, category: LogCategory) -> "BoundLogger":
        return BoundLogger(self._base, category)


_logger = Logger()


def get_logger() -> Logger:
    return _logger


def get_category_logger(category: LogCategory) -> BoundLogger:
    return _logger.for_category(category)


def configure_logger(min_level: LogLevel = LogLevel.INFO, use_colors: bool = True) -> None:
    """
    Apply logging settings to the shared Logger in place.

    Module-level bound loggers keep pointing at the same instance, so they
    pick up the change without being recreated.
    """
    _logger.min_level = min_level
    _logger.use_colors = use_colors
