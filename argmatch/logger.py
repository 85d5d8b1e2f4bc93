# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Argmatch."""
import logging

logger: logging.Logger = logging.getLogger("argmatch")
