"""
Utilities package for the Kudu data generator.

Exports shared helpers for logging and other cross-cutting concerns.
Keep this package lightweight and free of Kudu-specific logic.
"""

from kudu_datagen.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
