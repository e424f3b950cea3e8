"""Observability: opt-in logging of constructed errors."""

from .logging import configure_logging, logging_observer

__all__ = ["configure_logging", "logging_observer"]
