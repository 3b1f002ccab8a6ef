"""Function parameter validation.

Both the values to be tested and the constraints they are tested against are
given as lists, one constraint per parameter.  Each parameter is checked
under the name ``param1``, ``param2`` and so on by the injected
:class:`~validate_params.constraints.base.ConstraintValidator`.

Example::

    def repeat_string(s, n):
        assert_params(capture_arguments(), [
            {"type": "string"},
            {"type": "integer", "exclusiveMinimum": 0},
        ])
        return s * n
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final

from pydantic import ValidationError

from validate_params.arguments import as_list, is_arguments
from validate_params.config.settings import ValidationOptions, ValidatorSettings
from validate_params.constraints.jsonschema_validator import JsonSchemaValidator
from validate_params.errors import InvalidArgumentError, ParameterValidationError
from validate_params.utils.formatting import ParameterError, format_errors, full_message

if TYPE_CHECKING:
    from validate_params.constraints.base import ConstraintValidator

logger = logging.getLogger(__name__)


class _Missing:
    """Marker for an omitted ``options`` argument (``None`` counts as given)."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()

_BAD_PARAMS = "first parameter must be an array of parameters to test, or an Arguments object"
_BAD_CONSTRAINTS = "second parameter must be an array of constraints to test against"
_BAD_OPTIONS = "if present, the third parameter must be a plain object"


class ParamValidator:
    """Validates function parameters through an injected constraint collaborator."""

    def __init__(
        self,
        collaborator: ConstraintValidator | None = None,
        settings: ValidatorSettings | None = None,
    ) -> None:
        self._settings = settings if settings is not None else ValidatorSettings()
        if collaborator is None:
            collaborator = JsonSchemaValidator(self._settings.draft)
        self._collaborator = collaborator

    @property
    def collaborator(self) -> ConstraintValidator:
        return self._collaborator

    @property
    def settings(self) -> ValidatorSettings:
        return self._settings

    def validate(
        self,
        params: Any,
        constraints: Any,
        options: Any = MISSING,
    ) -> Any:
        """Validate *params* against *constraints*.

        Returns ``True`` when every parameter passes.  Otherwise returns the
        errors in the format selected by ``options["format"]``, or raises
        :class:`ParameterValidationError` when ``options["fatal"]`` is set.
        Option values must have the documented types: ``{"fatal": 2}`` is an
        invalid option, not a truthy one.
        Raises :class:`InvalidArgumentError` if the call itself is malformed.
        """
        self._check_shape(params, constraints, options)
        return self._run(params, constraints, self._resolve_options(options))

    def assert_valid(
        self,
        params: Any,
        constraints: Any,
        options: Any = MISSING,
    ) -> None:
        """Like :meth:`validate`, but always raises on constraint failures."""
        self._check_shape(params, constraints, options)
        opts = self._resolve_options(options).model_copy(update={"fatal": True})
        self._run(params, constraints, opts)

    def _run(self, params: Any, constraints: list[Any], opts: ValidationOptions) -> Any:
        values = as_list(params)
        errors: list[ParameterError] = []
        for index, constraint in enumerate(constraints):
            position = index + 1
            name = f"param{position}"
            value = values[index] if index < len(values) else None
            if not isinstance(constraint, (Mapping, bool)):
                logger.debug("No usable constraint for %s (%r), accepting any value", name, constraint)
                constraint = {}
            for message in self._collaborator.single(value, constraint, opts):
                if opts.full_messages:
                    message = full_message(position, message)
                errors.append(ParameterError(name, position, value, message))

        logger.debug(
            "Validated %d parameter(s) against %d constraint(s): %d error(s)",
            len(values),
            len(constraints),
            len(errors),
        )
        if not errors:
            return True

        formatted = format_errors(errors, opts.format)
        if opts.fatal:
            lines = "\n".join(err.message for err in errors)
            raise ParameterValidationError(
                f"parameter validation failed with the following errors:\n{lines}",
                formatted,
            )
        return formatted

    def _check_shape(self, params: Any, constraints: Any, options: Any) -> None:
        c = self._collaborator
        if params is None or not (c.is_array(params) or is_arguments(params)):
            raise InvalidArgumentError(_BAD_PARAMS)
        if not c.is_array(constraints):
            raise InvalidArgumentError(_BAD_CONSTRAINTS)
        if options is not MISSING and not (c.is_object(options) and not c.is_array(options)):
            raise InvalidArgumentError(_BAD_OPTIONS)

    def _resolve_options(self, options: Any) -> ValidationOptions:
        """Layer the caller's options over the configured defaults."""
        defaults = self._settings.options
        if options is MISSING:
            return defaults
        if isinstance(options, ValidationOptions):
            given = options
        else:
            try:
                if isinstance(options, Mapping):
                    given = ValidationOptions.model_validate(dict(options))
                else:
                    given = ValidationOptions.model_validate(options, from_attributes=True)
            except ValidationError as e:
                raise InvalidArgumentError(f"invalid options: {e}") from e
        return defaults.model_copy(
            update={field: getattr(given, field) for field in given.model_fields_set}
        )


# ---------------------------------------------------------------------------
# Process-wide default validator
# ---------------------------------------------------------------------------

_default_validator: ParamValidator | None = None


def get_default_validator() -> ParamValidator:
    """Return the validator used by the module-level functions, creating it on first use."""
    global _default_validator
    if _default_validator is None:
        _default_validator = ParamValidator()
    return _default_validator


def set_default_validator(validator: ParamValidator) -> None:
    """Replace the validator used by :func:`validate_params` and :func:`assert_params`."""
    global _default_validator
    _default_validator = validator


def reset_default_validator() -> None:
    """Drop the current default so the next call builds a fresh one."""
    global _default_validator
    _default_validator = None


def validate_params(params: Any, constraints: Any, options: Any = MISSING) -> Any:
    """Validate *params* against *constraints* with the default validator.

    See :meth:`ParamValidator.validate`.
    """
    return get_default_validator().validate(params, constraints, options)


def assert_params(params: Any, constraints: Any, options: Any = MISSING) -> None:
    """Validate with ``fatal`` forced on; raises :class:`ParameterValidationError` on failure."""
    get_default_validator().assert_valid(params, constraints, options)
