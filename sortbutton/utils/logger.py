# sortbutton/utils/logger.py
import datetime
from typing import Callable

class LogLevel:
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4 # Only fatal errors

    NAMES = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARN",
        ERROR: "ERROR",
        CRITICAL: "CRIT"
    }

    @classmethod
    def from_name(cls, name: str) -> int:
        """Resolves 'warning', 'WARN', 'Error'... to a level. Unknown names map to INFO."""
        name = (name or "").strip().upper()
        if name == "WARNING":
            name = "WARN"
        for level, level_name in cls.NAMES.items():
            if level_name == name:
                return level
        return cls.INFO

class Logger:
    _level = LogLevel.INFO
    _sink: Callable[[str], None] = print

    @classmethod
    def set_level(cls, level: int):
        """Sets the minimum logging level."""
        cls._level = level

    @classmethod
    def get_level(cls) -> int:
        return cls._level

    @classmethod
    def set_sink(cls, sink: Callable[[str], None]):
        """Redirects formatted log lines (tests capture them here)."""
        cls._sink = sink

    @classmethod
    def reset_sink(cls):
        cls._sink = print

    @classmethod
    def _log(cls, level: int, source: str, message: str):
        if level < cls._level:
            return
        timestamp = datetime.datetime.now().strftime("%H:%M:%S")
        level_name = LogLevel.NAMES.get(level, "LOG")

        # Format: [TIME] [LEVEL] [Source] Message
        cls._sink(f"[{timestamp}] [{level_name:<5}] [{source}] {message}")

    @classmethod
    def debug(cls, source: str, message: str):
        cls._log(LogLevel.DEBUG, source, message)

    @classmethod
    def info(cls, source: str, message: str):
        cls._log(LogLevel.INFO, source, message)

    @classmethod
    def warning(cls, source: str, message: str):
        cls._log(LogLevel.WARNING, source, message)

    @classmethod
    def error(cls, source: str, message: str):
        cls._log(LogLevel.ERROR, source, message)

    @classmethod
    def critical(cls, source: str, message: str):
        cls._log(LogLevel.CRITICAL, source, message)
