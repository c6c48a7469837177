"""
Core utilities for querylab.

This package provides the logging configuration, the database layer and the
models shared with the web API.
"""

from querylab.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
