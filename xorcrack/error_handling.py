"""
Error handling and reporting for XORCrack.

This module defines the typed failures raised by the analysis core and
the central handler that turns them into log records at the CLI boundary.
"""

import sys
import traceback
import logging
from enum import Enum
from typing import Optional, Dict, Any, Type
from dataclasses import dataclass


class ErrorSeverity(Enum):
    """Error severity levels."""
    ERROR = "ERROR"
    WARNING = "WARNING"


class ErrorCategory(Enum):
    """Categories of errors that can occur."""
    INPUT_ERROR = "Input Error"
    CONFIGURATION_ERROR = "Configuration Error"
    INTERNAL_ERROR = "Internal Error"


@dataclass
class ErrorContext:
    """Context information for an error."""
    function: Optional[str] = None
    operation: Optional[str] = None
    input_length: Optional[int] = None
    additional_info: Optional[Dict[str, Any]] = None


class XORCrackError(Exception):
    """Base exception class for XORCrack errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.INTERNAL_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: Optional[ErrorContext] = None,
        suggestion: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.suggestion = suggestion
        self.original_exception = original_exception

    def __str__(self):
        """Format error message with all context."""
        lines = [
            f"\n{'='*70}",
            f"{self.severity.value}: {self.category.value}",
            f"{'='*70}",
            f"\nMessage: {self.message}",
        ]

        if self.context.function:
            lines.append(f"Function: {self.context.function}")
        if self.context.operation:
            lines.append(f"Operation: {self.context.operation}")
        if self.context.input_length is not None:
            lines.append(f"Input length: {self.context.input_length} bytes")
        if self.context.additional_info:
            lines.append("\nAdditional Information:")
            for key, value in self.context.additional_info.items():
                lines.append(f"  {key}: {value}")

        if self.suggestion:
            lines.append(f"\nSuggestion: {self.suggestion}")

        if self.original_exception:
            lines.append(f"\nOriginal Exception: {type(self.original_exception).__name__}")
            lines.append(f"  {str(self.original_exception)}")

        lines.append(f"{'='*70}\n")

        return "\n".join(lines)


class InputError(XORCrackError):
    """Error related to invalid input."""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message,
            category=ErrorCategory.INPUT_ERROR,
            **kwargs
        )


class ConfigurationError(XORCrackError, ValueError):
    """Error related to configuration."""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION_ERROR,
            **kwargs
        )


class LengthMismatchError(InputError, ValueError):
    """Two buffers that must line up byte-for-byte have different lengths."""


class InvalidBlockSizeError(InputError, ValueError):
    """Block size is not a positive integer."""


class EmptyInputError(InputError, ValueError):
    """A component that needs ciphertext was given zero bytes."""


class DecodingError(InputError, ValueError):
    """Ciphertext text is not valid for the requested encoding."""


class InvalidRangeError(ConfigurationError):
    """Key length range or key byte sweep range is empty or inverted."""


class ErrorHandler:
    """Central error handler for XORCrack."""

    def __init__(self, debug_mode: bool = False):
        self.debug_mode = debug_mode
        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Set up logging configuration."""
        logger = logging.getLogger("xorcrack")
        logger.setLevel(logging.DEBUG if self.debug_mode else logging.INFO)

        # Avoid stacking handlers when the handler is rebuilt
        for handler in list(logger.handlers):
            if getattr(handler, "_xorcrack_console", False):
                logger.removeHandler(handler)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG if self.debug_mode else logging.INFO)
        console_handler._xorcrack_console = True

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(formatter)

        logger.addHandler(console_handler)

        return logger

    def handle_error(
        self,
        error: Exception,
        context: Optional[ErrorContext] = None
    ):
        """
        Handle an error with appropriate logging and reporting.

        Args:
            error: The exception to handle
            context: Additional context information
        """
        if isinstance(error, XORCrackError):
            self._log_xorcrack_error(error)
        else:
            wrapped = XORCrackError(
                message=str(error),
                context=context,
                original_exception=error
            )
            self._log_xorcrack_error(wrapped)

        if self.debug_mode:
            traceback.print_exception(type(error), error, error.__traceback__)

    def _log_xorcrack_error(self, error: XORCrackError):
        """Log an XORCrack error at the level of its severity."""
        self.logger.log(getattr(logging, error.severity.value), str(error))


# Global error handler instance
_error_handler: Optional[ErrorHandler] = None


def get_error_handler(debug_mode: bool = False) -> ErrorHandler:
    """Get or create the global error handler."""
    global _error_handler
    if _error_handler is None or (debug_mode and not _error_handler.debug_mode):
        _error_handler = ErrorHandler(debug_mode=debug_mode)
    return _error_handler


# Common error messages with suggestions
ERROR_MESSAGES = {
    "empty_ciphertext": {
        "message": "No ciphertext provided ({source})",
        "suggestion": "Pass a non-empty file or pipe ciphertext on stdin."
    },
    "invalid_hex": {
        "message": "Input is not valid hex: {reason}",
        "suggestion": "Use --encoding base64 or --encoding raw if the input is not hex."
    },
    "invalid_base64": {
        "message": "Input is not valid base64: {reason}",
        "suggestion": "Use --encoding hex or --encoding raw if the input is not base64."
    },
    "unknown_encoding": {
        "message": "Unknown ciphertext encoding: {encoding}",
        "suggestion": "Supported encodings are raw, hex and base64."
    },
    "invalid_key_range": {
        "message": "Invalid key byte range: {value}",
        "suggestion": "Use LO-HI with bounds in 0..255, e.g. 0x00-0xff."
    },
}


def create_error(
    error_key: str,
    severity: ErrorSeverity = ErrorSeverity.ERROR,
    context: Optional[ErrorContext] = None,
    error_cls: Type[XORCrackError] = XORCrackError,
    **format_args
) -> XORCrackError:
    """
    Create an XORCrack error from a predefined error message.

    Args:
        error_key: Key in ERROR_MESSAGES dictionary
        severity: Error severity level
        context: Error context
        error_cls: Exception class to instantiate
        **format_args: Arguments to format the error message

    Returns:
        Configured error instance

    Raises:
        KeyError: If error_key is not in ERROR_MESSAGES
    """
    error_info = ERROR_MESSAGES[error_key]
    message = error_info["message"].format(**format_args)
    suggestion = error_info.get("suggestion")

    return error_cls(
        message,
        severity=severity,
        context=context,
        suggestion=suggestion
    )
