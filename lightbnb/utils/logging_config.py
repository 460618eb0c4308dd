"""
Logging setup shared by the command line entry points.
Library modules only create loggers; handlers are configured here once.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger.
    
    Args:
        level: Log level name, e.g. "INFO" or "DEBUG"
    """
    global _configured
    if _configured:
        logging.getLogger().setLevel(level)
        return
    logging.basicConfig(level=level, format=LOG_FORMAT)
    _configured = True
