"""
File Chain (see DEVELOPER.md):
Doc Version: v1.0.0
Date Modified: 2026-10-19

- Called by: __init__.py, applications configuring their loggers
- Purpose: Configurable log line formatter with logger attach/detach

FlexFormat Color Log Formatter - Configurable Log Line Rendering

PURPOSE:
    Renders log records as "[date] [name] [LEVEL] message" lines where each
    bracketed field can be switched on or off, optionally wrapped in an ANSI
    color. The formatter attaches itself to loggers by installing a console
    handler and detaches again, restoring the logger's parent output.

WHO READS ME:
    - __init__.py: Exports FlexibleFormatter and ConsoleHandler

WHO I READ:
    - config.py: FormatterConfig (rendering options)
    - datefmt.py: format_datetime() for the date field
    - models.py: FlexibleColor, RESET

DEPENDENCIES:
    - logging: Standard library logging.Formatter and logging.StreamHandler
    - threading: Lock serializing attach/detach
    - dataclasses: replace() to derive updated configurations

KEY EXPORTS:
    - FlexibleFormatter: logging.Formatter subclass with fluent configuration
    - ConsoleHandler: stderr handler installed by FlexibleFormatter.attach()

LOG FORMAT:
    <color>[date] [name] [LEVEL] message<reset>\\n
    Disabled fields leave no trace, color codes only appear for a color other
    than DEFAULT. Example with level enabled: "[INFO] Configuration loaded\\n"

NOTES:
    - The date field shows the time the line is rendered, not record.created.
    - The rendered line carries its own newline, ConsoleHandler adds none.
"""

import logging
import threading
from dataclasses import replace

from flexformat.config import FormatterConfig
from flexformat.datefmt import format_datetime, validate_pattern
from flexformat.models import RESET, FlexibleColor

_LOGGER = logging.getLogger(__name__)


class ConsoleHandler(logging.StreamHandler):
    """stderr handler writing lines exactly as the formatter renders them"""

    terminator = ""

    def __init__(self, formatter: logging.Formatter):
        super().__init__()
        self.setFormatter(formatter)


class FlexibleFormatter(logging.Formatter):
    """return a formatter that prints log messages with optional date, name,
    level and color"""

    def __init__(self, config: FormatterConfig | None = None):
        super().__init__()
        self._config = config if config is not None else FormatterConfig()
        self._attached: dict[int, logging.Logger] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_file(cls, filename: str) -> "FlexibleFormatter":
        """create a formatter configured from the given TOML file"""
        return cls(FormatterConfig.load(filename))

    @property
    def config(self) -> FormatterConfig:
        return self._config

    @property
    def date_pattern(self) -> str:
        return self._config.date_pattern

    def get_date_pattern(self) -> str:
        return self._config.date_pattern

    def set_date_pattern(self, date_pattern: str) -> "FlexibleFormatter":
        """set the date pattern, raises FlexFormatError if it is invalid"""
        validate_pattern(date_pattern)
        self._config = replace(self._config, date_pattern=date_pattern)
        return self

    def set_color(self, color: FlexibleColor | str) -> "FlexibleFormatter":
        """set the color of every line, DEFAULT disables coloring"""
        self._config = replace(self._config, color=FlexibleColor.parse(color))
        return self

    def enable_date(self, enable: bool) -> "FlexibleFormatter":
        self._config = replace(self._config, show_date=bool(enable))
        return self

    def enable_level(self, enable: bool) -> "FlexibleFormatter":
        self._config = replace(self._config, show_level=bool(enable))
        return self

    def enable_name(self, enable: bool) -> "FlexibleFormatter":
        self._config = replace(self._config, show_name=bool(enable))
        return self

    @property
    def attached_loggers(self) -> tuple[logging.Logger, ...]:
        with self._lock:
            return tuple(self._attached.values())

    def attached(self, logger: logging.Logger) -> bool:
        """True if this formatter is attached to this very logger object"""
        return logger is not None and id(logger) in self._attached

    def attach(self, logger: logging.Logger) -> "FlexibleFormatter":
        """Send the records of the given logger to a ConsoleHandler using this
        formatter instead of the parent loggers' handlers.

        Attaching to a logger this formatter is already attached to changes
        nothing.
        """
        if logger is None:
            return self
        with self._lock:
            if id(logger) in self._attached:
                return self
            self._attached[id(logger)] = logger
            logger.propagate = False
            logger.addHandler(ConsoleHandler(self))
        _LOGGER.debug("attached to logger %s", logger.name)
        return self

    def detach(self, logger: logging.Logger) -> "FlexibleFormatter":
        """Undo attach(): remove every handler of the logger that uses this
        formatter and let records propagate to the parent loggers again.

        Detaching from a logger this formatter is not attached to changes
        nothing.
        """
        if logger is None:
            return self
        with self._lock:
            if self._attached.pop(id(logger), None) is None:
                return self
            logger.propagate = True
            for handler in list(logger.handlers):
                if handler.formatter is self:
                    logger.removeHandler(handler)
                    if isinstance(handler, ConsoleHandler):
                        handler.close()
        _LOGGER.debug("detached from logger %s", logger.name)
        return self

    def detach_all(self) -> "FlexibleFormatter":
        """detach from every logger this formatter is attached to"""
        for logger in self.attached_loggers:
            self.detach(logger)
        return self

    def _date(self, cfg: FormatterConfig) -> str:
        if not cfg.show_date:
            return ""
        return f"[{format_datetime(cfg.date_pattern)}]"

    def _message(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            message = f"{message}\n{record.exc_text}"
        if record.stack_info:
            message = f"{message}\n{self.formatStack(record.stack_info)}"
        return message

    def format(self, record: logging.LogRecord) -> str:
        cfg = self._config
        fields = (
            self._date(cfg),
            f"[{record.name}]" if cfg.show_name else "",
            f"[{record.levelname}]" if cfg.show_level else "",
        )
        line = [cfg.color.ansi]
        line.extend(f"{field} " for field in fields if field)
        line.append(self._message(record))
        if cfg.color is not FlexibleColor.DEFAULT:
            line.append(RESET)
        line.append("\n")
        return "".join(line)
