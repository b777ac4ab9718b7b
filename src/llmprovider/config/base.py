"""Base configuration models for the application."""

import logging
import sys
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field(default="INFO")
    file: Optional[str] = Field(default=None)

    model_config = ConfigDict(validate_assignment=True)


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """Attach handlers to the package logger according to ``config``.

    Calling this more than once replaces the handlers installed by the
    previous call instead of stacking them.
    """
    config = config or LoggingConfig()
    logger = logging.getLogger("llmprovider")
    logger.setLevel(config.level.upper())

    for handler in list(logger.handlers):
        if getattr(handler, "_llmprovider_handler", False):
            logger.removeHandler(handler)
            handler.close()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.file:
        handlers.append(logging.FileHandler(config.file))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler._llmprovider_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
