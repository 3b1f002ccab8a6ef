from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from jsonschema import (
    Draft4Validator,
    Draft6Validator,
    Draft7Validator,
    Draft201909Validator,
    Draft202012Validator,
    FormatChecker,
)
from jsonschema.exceptions import SchemaError
from jsonschema.validators import validator_for
from referencing.exceptions import Unresolvable

from validate_params.config.settings import ValidationOptions
from validate_params.errors import InvalidArgumentError

if TYPE_CHECKING:
    from validate_params.config.settings import JsonSchemaDraft

logger = logging.getLogger(__name__)

_DRAFTS: dict[str, type] = {
    "4": Draft4Validator,
    "6": Draft6Validator,
    "7": Draft7Validator,
    "2019-09": Draft201909Validator,
    "2020-12": Draft202012Validator,
}


class JsonSchemaValidator:
    """Constraint collaborator backed by ``jsonschema``.

    Each constraint descriptor is a JSON Schema fragment (a mapping, or
    ``True``/``False``) describing a single parameter value.  Fragments that
    declare ``$schema`` are validated under that dialect; the rest use
    *draft*.
    """

    def __init__(self, draft: JsonSchemaDraft = "2020-12") -> None:
        if draft not in _DRAFTS:
            raise InvalidArgumentError(f"unsupported JSON Schema draft: {draft!r}")
        self._default_cls = _DRAFTS[draft]

    @property
    def default_validator_class(self) -> type:
        return self._default_cls

    def single(self, value: Any, constraint: Any, options: ValidationOptions) -> list[str]:
        schema = dict(constraint) if isinstance(constraint, Mapping) else constraint
        if isinstance(schema, dict) and not isinstance(schema.get("$schema", ""), str):
            raise InvalidArgumentError(
                f"invalid constraint: $schema must be a string, got {schema['$schema']!r}"
            )
        validator_cls = validator_for(schema, default=self._default_cls)
        try:
            validator_cls.check_schema(schema)
        except SchemaError as e:
            raise InvalidArgumentError(f"invalid constraint: {e.message}") from e

        format_checker = FormatChecker() if options.check_formats else None
        validator = validator_cls(schema, format_checker=format_checker)
        try:
            errors = sorted(validator.iter_errors(value), key=lambda err: err.json_path)
        except Unresolvable as e:
            raise InvalidArgumentError(f"invalid constraint: unresolvable reference: {e}") from e
        if errors:
            logger.debug("%d constraint failure(s) for value %r", len(errors), value)
        return [
            err.message if not err.absolute_path else f"{err.json_path}: {err.message}"
            for err in errors
        ]

    def is_array(self, value: Any) -> bool:
        return isinstance(value, list)

    def is_object(self, value: Any) -> bool:
        return isinstance(value, (Mapping, ValidationOptions))
