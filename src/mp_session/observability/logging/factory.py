"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from mp_session.config.settings import LoggingSettings


class JsonLoggerFactory:
    """Route stdlib log records (``session.*`` events included) through structlog.

    With ``json=True`` records are rendered as one JSON object per line,
    otherwise with structlog's console renderer.
    """

    @staticmethod
    def configure(level: int = logging.INFO, json: bool = True) -> logging.Handler:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        renderer: Any = (
            structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
        )

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)
        return handler

    @classmethod
    def configure_from_settings(cls, settings: LoggingSettings) -> logging.Handler:
        return cls.configure(level=settings.level_number, json=settings.json)


__all__ = ["JsonLoggerFactory"]
