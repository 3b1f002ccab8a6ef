"""Exception hierarchy for validate_params."""

from __future__ import annotations

from typing import Any


class ValidateParamsError(Exception):
    """Base class for every error raised by validate_params."""


class InvalidArgumentError(ValidateParamsError, TypeError):
    """The validation call itself was made with arguments of the wrong shape."""


class ParameterValidationError(ValidateParamsError, ValueError):
    """One or more parameters failed their constraints.

    ``validation_errors`` holds the errors in whichever format was requested
    (grouped mapping, flat list, or detailed list).
    """

    def __init__(self, message: str, validation_errors: Any = None) -> None:
        super().__init__(message)
        self.validation_errors = validation_errors
