"""
Debug logger for the sizing engine.

Supports configurable log levels (NONE, INFO, DEBUG, TRACE) and dual output:
- Console: Human-readable formatted output
- File: JSON Lines format for parsing and analysis
"""

import json
import os
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv


LOG_FILENAME = "responsive_images.jsonl"


class LogLevel(Enum):
    """Logging levels for engine debug output."""

    NONE = 0
    INFO = 1
    DEBUG = 2
    TRACE = 3


class EngineLogger:
    """Centralized logger for size resolution with configurable levels."""

    _instance: Optional["EngineLogger"] = None

    def __new__(cls):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize the logger with configuration from environment."""
        if self._initialized:
            return

        load_dotenv()

        level_str = os.getenv("RESPONSIVE_IMAGES_DEBUG_LEVEL", "NONE").upper()
        try:
            self.level = LogLevel[level_str]
        except KeyError:
            self.level = LogLevel.NONE

        self.log_to_file = os.getenv("RESPONSIVE_IMAGES_LOG_TO_FILE", "false").lower() == "true"
        self.log_dir = Path(os.getenv("RESPONSIVE_IMAGES_LOG_DIR", "outputs"))

        self._initialized = True

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton so the next access re-reads the environment."""
        cls._instance = None

    def _should_log(self, min_level: LogLevel) -> bool:
        """Check if we should log at the given level."""
        return self.level.value >= min_level.value

    def _format_timestamp(self) -> str:
        """Get ISO8601 formatted timestamp."""
        return datetime.now().isoformat()

    def _write_to_file(self, entry: Dict[str, Any]) -> None:
        """Append a log entry to the JSON Lines file."""
        self.log_dir.mkdir(parents=True, exist_ok=True)
        with open(self.log_dir / LOG_FILENAME, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry, default=str) + "\n")

    def log(self, level: LogLevel, component: str, event: str, **fields: Any) -> None:
        """
        Log an engine event.

        Args:
            level: Minimal level at which the event is emitted.
            component: Emitting component (e.g. "grid", "attributes").
            event: Short event name.
            **fields: Event details.
        """
        if not self._should_log(level):
            return

        timestamp = self._format_timestamp()
        details = " ".join(f"{key}={value}" for key, value in fields.items())
        print(f"[{timestamp}] {level.name} {component}: {event} {details}".rstrip())

        if self.log_to_file:
            self._write_to_file({
                "timestamp": timestamp,
                "level": level.name,
                "component": component,
                "event": event,
                "fields": fields,
            })

    def info(self, component: str, event: str, **fields: Any) -> None:
        self.log(LogLevel.INFO, component, event, **fields)

    def debug(self, component: str, event: str, **fields: Any) -> None:
        self.log(LogLevel.DEBUG, component, event, **fields)

    def trace(self, component: str, event: str, **fields: Any) -> None:
        self.log(LogLevel.TRACE, component, event, **fields)


def get_logger() -> EngineLogger:
    """Get the singleton logger instance."""
    return EngineLogger()
