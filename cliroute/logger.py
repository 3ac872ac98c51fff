# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for cliroute."""
import logging

logger: logging.Logger = logging.getLogger("cliroute")
