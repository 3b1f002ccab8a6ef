"""Validate a function's parameters against a list of per-parameter constraints."""

from __future__ import annotations

from validate_params.arguments import Arguments, capture_arguments, is_arguments
from validate_params.config.settings import ValidationOptions, ValidatorSettings
from validate_params.errors import (
    InvalidArgumentError,
    ParameterValidationError,
    ValidateParamsError,
)
from validate_params.utils.formatting import ParameterError, as_ordinal
from validate_params.validator import (
    MISSING,
    ParamValidator,
    assert_params,
    get_default_validator,
    reset_default_validator,
    set_default_validator,
    validate_params,
)

__all__ = [
    "MISSING",
    "Arguments",
    "InvalidArgumentError",
    "ParamValidator",
    "ParameterError",
    "ParameterValidationError",
    "ValidateParamsError",
    "ValidationOptions",
    "ValidatorSettings",
    "as_ordinal",
    "assert_params",
    "capture_arguments",
    "get_default_validator",
    "is_arguments",
    "reset_default_validator",
    "set_default_validator",
    "validate_params",
]
