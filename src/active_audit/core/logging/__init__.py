"""Structured logging setup."""

import logging

import structlog

from active_audit.config import AuditSettings, get_settings


def configure_logging(audit_settings: AuditSettings | None = None) -> None:
    """Configure structlog for the audit library.

    Hosts that already configure structlog should not call this.

    Args:
        audit_settings: Settings to read level and environment from
    """
    audit_settings = audit_settings or get_settings()
    level = logging.getLevelName(audit_settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            (
                structlog.processors.JSONRenderer()
                if audit_settings.is_production
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


__all__ = [
    "configure_logging",
]
