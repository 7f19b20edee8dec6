"""structlog configuration."""

import logging

import structlog

from srtkit.utils.config import get_settings


def setup_logging(level: str | None = None, *, json: bool | None = None) -> None:
    """Configure structlog for applications embedding srtkit.

    The library itself never calls this; it only emits events through
    ``structlog.get_logger()``.

    Args:
        level: Level name, defaults to ``Settings.log_level``
        json: Render JSON lines, defaults to ``Settings.log_json``
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    use_json = settings.log_json if json is None else json
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )
