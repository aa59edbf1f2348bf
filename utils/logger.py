# utils/logger.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Logging utility for formula processing with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for truth table generation."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class TruthTableLogger:
    """Centralized logger for formula processing with structured output."""

    def __init__(self, name: str = "veritas", level: LogLevel = LogLevel.WARNING):
        """Initialize the logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(TruthTableFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for formula processing events
    def formula_received(self, line_number: int, formula: str):
        """Log a formula read from the input."""
        self.info(f"📋 Line {line_number}: {formula}")

    def formula_rejected(self, line_number: int, formula: str, reason: str):
        """Log a formula that could not be turned into a table."""
        self.error(f"❌ Line {line_number} rejected ({formula!r}): {reason}")

    def formula_accepted(self, line_number: int, formula: str):
        """Log a formula that parsed successfully."""
        self.info(f"✅ Line {line_number} is well-formed: {formula}")

    def table_built(self, variable_count: int, row_count: int):
        """Log truth table dimensions."""
        self.debug(f"Truth table built: {variable_count} variable(s), {row_count} row(s)")

    def run_summary(self, accepted: int, rejected: int):
        """Log the totals of an input run."""
        self.info(f"\n📊 Formulas accepted: {accepted}, rejected: {rejected}")


class TruthTableFormatter(logging.Formatter):
    """Custom formatter with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[TruthTableLogger] = None


def get_logger(name: str = "veritas") -> TruthTableLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name (default: "veritas")

    Returns:
        TruthTableLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = TruthTableLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
