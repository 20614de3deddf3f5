"""structlog logging setup for the cspheader package logger.

The builder is embedded in other applications' middleware, so only the
"cspheader" logger tree is configured here; the host's root logger is left
alone.
"""

from __future__ import annotations

import logging
import sys

import structlog

from cspheader.config.loader import CSPSettings, get_settings

PACKAGE_LOGGER = "cspheader"


def _rename_logger_to_module(
    logger: logging.Logger, method_name: str, event_dict: dict
) -> dict:
    """Rename 'logger' key to 'module' for structured log field consistency."""
    if "logger" in event_dict:
        event_dict["module"] = event_dict.pop("logger")
    return event_dict


# Applied to structlog events and, via foreign_pre_chain, to plain stdlib records
_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    _rename_logger_to_module,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.format_exc_info,
]


def _resolve_level(log_level: str) -> int:
    """Map a level name to its number, falling back to INFO."""
    level = logging.getLevelName(log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    log_level: str | None = None,
    json_format: bool | None = None,
    settings: CSPSettings | None = None,
) -> logging.Logger:
    """Route cspheader logs to stdout as JSON or console output.

    Arguments left as None come from settings (CSP_LOG_LEVEL / CSP_LOG_JSON).
    Returns the configured package logger.
    """
    if log_level is None or json_format is None:
        settings = settings or get_settings()
        log_level = settings.log_level if log_level is None else log_level
        json_format = settings.log_json if json_format is None else json_format

    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if json_format else structlog.dev.ConsoleRenderer()
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_PRE_CHAIN,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    ))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(_resolve_level(log_level))
    package_logger.propagate = False
    return package_logger
