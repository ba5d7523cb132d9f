"""Process-wide logging configuration."""

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def config_configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for CLI and server processes.

    Args:
        level: Logging level name such as `INFO` or `DEBUG`.

    Returns:
        None: Configures the root logger as side effect.
    """

    logging.basicConfig(level=level.upper(), format=_LOG_FORMAT)
