import logging
import sys


def setup_logging(name: str = "expense_capture", level: int = logging.INFO) -> logging.Logger:
    """
    Sets up the project logger.

    Args:
        name: Name of the logger.
        level: Logging level (default: INFO).

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)

    # Avoid duplicate handlers if already configured
    if logger.handlers:
        return logger

    logger.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


def set_level(level: int) -> None:
    """Changes the level of the project logger, e.g. for --verbose runs."""
    logger.setLevel(level)


# Default logger for the project
logger = setup_logging()
