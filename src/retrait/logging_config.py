import logging
import sys

from retrait.config import TraitSettings

DEFAULT_LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _level_from_name(name: str, source: str) -> int:
    level_name = name.upper()
    level = logging.getLevelName(level_name)
    if isinstance(level, int):
        return level
    print(  # noqa: T201
        f"Warning: Invalid {source} '{name}'. Defaulting to {logging.getLevelName(DEFAULT_LOG_LEVEL)}.",
        file=sys.stderr,
    )
    return DEFAULT_LOG_LEVEL


def setup_logging(level: int | str | None = None) -> None:
    """
    Set up logging for the retrait logger namespace.

    Args:
        level: The logging level to set. Can be an integer (e.g., logging.INFO),
               a string (e.g., "INFO"), or None. If None, the level comes from
               the RETRAIT_LOG_LEVEL setting, defaulting to DEFAULT_LOG_LEVEL.

    """
    if level is None:
        log_level = _level_from_name(TraitSettings().log_level, "RETRAIT_LOG_LEVEL")
    elif isinstance(level, str):
        log_level = _level_from_name(level, "log level string")
    else:
        log_level = level

    app_logger = logging.getLogger("retrait")
    app_logger.setLevel(log_level)

    # Replace handlers so the new one writes to the current sys.stderr.
    for handler_to_remove in list(app_logger.handlers):
        app_logger.removeHandler(handler_to_remove)
        handler_to_remove.close()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    app_logger.addHandler(handler)
