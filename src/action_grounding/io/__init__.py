"""Import utilities used for logging, configuration files, and textual parameters."""

from .logging import configure_logging as configure_logging
from .logging import console as console
from .logging import log_info as log_info
from .logging import logger as logger
