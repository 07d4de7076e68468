"""
debug.py - Debug and logging support for the Connect Four arcade engine

This module wraps the standard logging module with a small manager that adds
named verbosity levels, per-component filtering and performance timers.
Every engine component logs through the shared ``debug`` instance.
"""

import logging
import sys
import time
from enum import Enum
from typing import Dict, Iterable, Optional, Set


class DebugLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


# Python logging has no TRACE level, so it shares DEBUG's numeric level
LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 10,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: logging.DEBUG,
}

COMPONENTS = ("board", "rules", "controller", "popup", "animation", "env", "cli")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class DebugManager:
    """Routes engine log messages to a ``logging.Logger`` with filtering."""

    def __init__(self, logger_name: str = "connect4_arcade"):
        self._level = DebugLevel.WARNING
        self._enabled = True
        self._log_file: Optional[str] = None
        self._components: Set[str] = set()  # empty means every component
        self._timers: Dict[str, float] = {}
        self._logger = self._setup_logger(logger_name)

    def _setup_logger(self, name: str) -> logging.Logger:
        logger = logging.getLogger(name)
        logger.setLevel(LEVEL_MAP[self._level])
        logger.propagate = False

        if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
                   for h in logger.handlers):
            console = logging.StreamHandler(sys.stdout)
            console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
            logger.addHandler(console)

        return logger

    @property
    def level(self) -> DebugLevel:
        return self._level

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def configure(self, level: Optional[DebugLevel] = None,
                  enabled: Optional[bool] = None,
                  log_file: Optional[str] = None,
                  components: Optional[Iterable[str]] = None) -> None:
        """
        Change the manager's settings. Arguments left as None are untouched.

        Args:
            level: Most verbose level that is still emitted
            enabled: Master switch for all output
            log_file: Path of a log file to append to ("" removes file output)
            components: Components to emit messages for (empty for all)
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])

        if enabled is not None:
            self._enabled = enabled

        if log_file is not None:
            for handler in self._logger.handlers[:]:
                if isinstance(handler, logging.FileHandler):
                    self._logger.removeHandler(handler)
                    handler.close()

            self._log_file = log_file or None
            if self._log_file:
                file_handler = logging.FileHandler(self._log_file)
                file_handler.setFormatter(
                    logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
                self._logger.addHandler(file_handler)

        if components is not None:
            unknown = set(components) - set(COMPONENTS)
            if unknown:
                self.warning(f"Unknown debug components: {sorted(unknown)}", "cli")
            self._components = set(components)

    def should_log(self, level: DebugLevel, component: Optional[str] = None) -> bool:
        if not self._enabled or level == DebugLevel.NONE:
            return False
        if level.value > self._level.value:
            return False
        if component and self._components and component not in self._components:
            return False
        return True

    def log(self, level: DebugLevel, message: str, component: Optional[str] = None) -> None:
        """Emit ``message`` at ``level``, tagged with its component."""
        if not self.should_log(level, component):
            return

        if component:
            message = f"[{component}] {message}"

        if level == DebugLevel.ERROR:
            self._logger.error(message)
        elif level == DebugLevel.WARNING:
            self._logger.warning(message)
        elif level == DebugLevel.INFO:
            self._logger.info(message)
        elif level == DebugLevel.DEBUG:
            self._logger.debug(message)
        else:
            self._logger.debug(f"TRACE: {message}")

    def error(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.TRACE, message, component)

    def start_timer(self, marker: str) -> None:
        self._timers[marker] = time.perf_counter()

    def end_timer(self, marker: str, component: Optional[str] = None) -> Optional[float]:
        """
        Stop a timer started with ``start_timer`` and log the elapsed time.

        Returns:
            Elapsed seconds, or None if the marker was never started
        """
        started = self._timers.pop(marker, None)
        if started is None:
            self.warning(f"Timer '{marker}' not started", component)
            return None

        elapsed = time.perf_counter() - started
        self.debug(f"Performance [{marker}]: {elapsed:.6f} seconds", component)
        return elapsed

    def set_from_string(self, level_str: str) -> None:
        """Set the level from a command-line name such as ``"info"``."""
        try:
            level = DebugLevel[level_str.upper()]
        except KeyError:
            self.warning(f"Unknown debug level: {level_str}", "cli")
            return
        self.configure(level=level)
        self.info(f"Debug level set to {level.name}", "cli")


debug = DebugManager()
