"""Root logger setup for a stackreport run.

WARNING covers the comment fallback (listing or updating failed, a new
comment is posted instead) and trimmed output; DEBUG adds the comment
lookup details. Set logging.level / logging.format in config.yaml or
LOGGING_LEVEL / LOGGING_FORMAT in the environment.
"""

import logging

from stackreport.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# HTTP transport used by the GitHub adapter
TRANSPORT_LOGGER = "urllib3"


def _resolve_level(level: str) -> int:
    """Map a level name to its logging constant, INFO when unknown."""
    return LEVELS.get(level.upper().strip(), logging.INFO)


class StackReportLogging:
    """Applies LoggingConfig to the root logger."""

    def __init__(self, config: LoggingConfig) -> None:
        self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT

    def setup(self) -> None:
        """Configure the root logger; connection chatter from the transport
        stays at WARNING unless DEBUG was asked for."""
        logging.basicConfig(level=self._level, format=self._format, force=True)
        transport_level = logging.DEBUG if self._level == logging.DEBUG else logging.WARNING
        logging.getLogger(TRANSPORT_LOGGER).setLevel(transport_level)
