"""Status definitions and exceptions for CurrencyTracker.

This module provides:
    - Status: enumeration of possible application states
    - STATUS_MESSAGE: user-facing messages for each status
    - get_message: retrieve the message for a status
    - BaseStatusException: base exception carrying a Status
    - Specific exceptions raised by the expense form and the settings loader
"""
import enum
import logging
from typing import Dict, Optional


class Status(enum.StrEnum):
    """Enumeration of application status codes."""
    UnknownStatus = enum.auto()

    # Config status
    ConfigNotFound = enum.auto()
    ConfigInvalid = enum.auto()

    # Expense form status
    InvalidAmount = enum.auto()
    MissingFields = enum.auto()


STATUS_MESSAGE: Dict[Status, str] = {
    Status.UnknownStatus: 'Unknown status.',

    Status.ConfigNotFound: 'Could not find the application settings.',
    Status.ConfigInvalid: 'The application settings seem to be incomplete, or contain invalid values.',

    Status.InvalidAmount: 'Amount must be a valid number.',
    Status.MissingFields: 'Please fill all fields.',
}


def get_message(status: Status) -> str:
    """
    Get the message for a given status.

    Args:
        status (Status): The status enum.

    Returns:
        str: The message associated with the status.
    """
    return STATUS_MESSAGE.get(status, 'Unknown status')


class BaseStatusException(Exception):
    """Base exception for status-based errors in CurrencyTracker.

    Attributes:
        status (Status): Status code associated with this error.
        status_message (str): User-facing message for the status.
        log_level (int): Level the exception is logged at when raised.

    Args:
        message (str): Optional additional context for the error.
    """
    status = Status.UnknownStatus
    log_level = logging.ERROR

    def __init__(self, message: Optional[str] = None):
        self.status_message = get_message(self.status)
        exception_message = f'{self.status_message} {message}' if message else self.status_message
        super().__init__(exception_message)

        logging.log(self.log_level, exception_message)

        from ..ui.actions import signals
        signals.error.emit(message or self.status_message)


class ConfigNotFoundException(BaseStatusException):
    """Exception raised when the bundled settings file cannot be found."""
    status = Status.ConfigNotFound


class ConfigInvalidException(BaseStatusException):
    """Exception raised when the settings file is invalid or malformed."""
    status = Status.ConfigInvalid


class InvalidAmountException(BaseStatusException):
    """Exception raised when the amount entered does not parse as a number."""
    status = Status.InvalidAmount
    log_level = logging.WARNING


class MissingFieldsException(BaseStatusException):
    """Exception raised when a required expense field was left empty."""
    status = Status.MissingFields
    log_level = logging.WARNING
