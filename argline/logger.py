# Argline CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Argline."""
import logging

logger: logging.Logger = logging.getLogger("argline")
