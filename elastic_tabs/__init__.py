"""
elastic_tabs - elastic tabstops for byte streams.

Modules:
- buffer: Cell/line buffering of raw input
- width: Display width measurement
- align: Column block width computation and padded emission
- writer: TabWriter, the streaming front end
- config: Alignment options and config file loading
"""

__version__ = "1.0.0"

VERSION = __version__

from .buffer import Cell, LineBuffer
from .width import char_width, display_columns
from .align import cell_widths, emit
from .writer import TabWriter
from .config import (
    ConfigError,
    TabWriterConfig,
    load_config,
    load_config_file,
)
from .logging_config import (
    setup_logging,
    get_logger,
)

__all__ = [
    "__version__",
    "VERSION",
    "Cell",
    "LineBuffer",
    "char_width",
    "display_columns",
    "cell_widths",
    "emit",
    "TabWriter",
    "ConfigError",
    "TabWriterConfig",
    "load_config",
    "load_config_file",
    "setup_logging",
    "get_logger",
]
