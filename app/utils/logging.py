"""
Logging setup.

Configures loguru logger for the application.
Sets up log rotation and retention policies.
"""

from loguru import logger

from app.config.settings import Settings


def setup_logging(config: Settings) -> int:
    """
    Configure logger with file rotation.

    Args:
        config: Application settings

    Returns:
        Id of the added file sink (for logger.remove)
    """
    sink_id = logger.add(
        config.log_file,
        rotation=config.log_rotation,
        retention=config.log_retention,
        level="DEBUG" if config.debug else config.log_level,
        encoding="utf-8",
    )

    logger.info(
        "Starting referral network...",
        extra={"environment": config.environment},
    )

    return sink_id
