"""Utility modules for pipemark.

Provides:
- logger: get_logger for namespaced logging
"""

from pipemark.utils.logger import get_logger

__all__ = ["get_logger"]
