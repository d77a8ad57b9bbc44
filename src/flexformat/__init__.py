"""
File Chain (see DEVELOPER.md):
Doc Version: v1.0.0

- Called by: Python import system (when `import flexformat` is executed)
- Reads from: importlib.metadata (package metadata), colorlog.py, config.py, models.py
- Writes to: None (package initialization only, exports public API)

Purpose: Package initialization for FlexFormat. Defines public API exports
         (FlexibleFormatter, FormatterConfig, FlexibleColor, FlexFormatError) and
         loads package metadata (__version__, __description__).

Package Structure:
    - colorlog.py: FlexibleFormatter, rendering and attach/detach to loggers
    - config.py: FormatterConfig, rendering options and TOML loading
    - datefmt.py: Date pattern compilation and formatting
    - models.py: Colors and the package error type

Usage:
    >>> import logging
    >>> from flexformat import FlexibleColor, FlexibleFormatter
    >>> formatter = FlexibleFormatter().enable_level(True).set_color(FlexibleColor.GREEN)
    >>> formatter.attach(logging.getLogger("app"))

Public API Exports:
    - FlexibleFormatter: Configurable log formatter
    - ConsoleHandler: stderr handler installed by FlexibleFormatter.attach()
    - FormatterConfig: Rendering options
    - FlexibleColor: Line colors
    - FlexFormatError: Base class of all flexformat errors
    - __version__: Package version from metadata
    - __description__: Package description from metadata
"""

import importlib.metadata as importlib_metadata

from .colorlog import ConsoleHandler, FlexibleFormatter
from .config import FormatterConfig
from .models import FlexibleColor, FlexFormatError

_metadata = importlib_metadata.metadata("flexformat")
__version__ = _metadata["Version"]
__description__ = _metadata["Summary"]


__all__ = [
    "ConsoleHandler",
    "FlexibleColor",
    "FlexibleFormatter",
    "FlexFormatError",
    "FormatterConfig",
]
