"""
Logging System for the Symbolic Kernel

Centralized logger with verbosity levels. The simplifier and the evaluator
log rewrites and evaluation failures at debug level, the simplifier warns
when it cancels a quotient whose operand may be zero, and the demonstration
entry point uses the informational levels.
"""

import logging
import sys
from typing import Optional
from enum import Enum


class LogLevel(Enum):
    """Enumeration of logging levels for the kernel"""
    SILENT = 0      # No output
    MINIMAL = 1     # Results and warnings
    MODERATE = 2    # Informational messages
    DETAILED = 3    # Per-expression details
    VERBOSE = 4     # Everything, including simplifier rewrites


class KernelLogger:
    """
    Centralized logger for the symbolic kernel
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL):
        self.log_level = log_level

        self.logger = logging.getLogger('symbolic_kernel')
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()  # Remove any existing handlers

        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(levelname)s - %(message)s',
                datefmt='%H:%M:%S'
            ))
            self.logger.addHandler(console_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def info(self, message: str, required_level: LogLevel = LogLevel.MINIMAL):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message)

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")


# Global logger instance
_global_logger: Optional[KernelLogger] = None


def get_logger() -> KernelLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = KernelLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = KernelLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL) -> KernelLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = KernelLogger(log_level=log_level)
    return _global_logger


def log_info(message: str, level: LogLevel = LogLevel.MINIMAL):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_warning(message: str):
    """Log warning message"""
    get_logger().warning(message)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)
