"""Utility modules for letras.

Provides:
- logger: get_logger for namespaced logging
"""

from letras.utils.logger import get_logger

__all__ = ["get_logger"]
