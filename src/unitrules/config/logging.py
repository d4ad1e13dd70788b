"""structlog configuration for unitrules.

Library modules log through ``logging.getLogger(__name__)`` and pass
violation context as ``extra={"section": ..., "directive": ..., "kind": ...}``.
:func:`configure_logging` attaches one stderr handler to the ``unitrules``
logger only, so an embedding tool's root logger is left alone. The handler
renders records through structlog and lifts the context keys into fields.

Two output modes:
- Human (default): console-rendered output to stderr
- JSON (log_json=True): one JSON object per line on stderr
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from unitrules.config.settings import UnitRulesSettings

LOGGER_NAME = "unitrules"

# LogRecord ``extra`` keys promoted to structured fields.
CONTEXT_KEYS: tuple[str, ...] = ("section", "directive", "kind")


def _record_processors() -> list[structlog.types.Processor]:
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(CONTEXT_KEYS),
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _build_handler(log_json: bool) -> logging.Handler:
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_record_processors(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route ``unitrules`` log records through structlog on stderr.

    Repeated calls replace the handler rather than stacking a new one.

    Args:
        verbose: Emit DEBUG records (catalog construction, per-unit counts).
            When False, only policy warnings and above.
        log_json: Use JSON renderer instead of console renderer.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.addHandler(_build_handler(log_json))
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


def configure_from_settings(settings: UnitRulesSettings) -> None:
    """Apply the logging flags carried by *settings*."""
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
