"""Constraint-validation collaborator protocol.

:class:`~validate_params.validator.ParamValidator` never evaluates a
constraint itself.  It checks the shape of the call with :pymeth:`is_array`
and :pymeth:`is_object`, then hands every parameter to :pymeth:`single`.
Any object satisfying this protocol can be injected in place of the default
:class:`~validate_params.constraints.jsonschema_validator.JsonSchemaValidator`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from validate_params.config.settings import ValidationOptions


@runtime_checkable
class ConstraintValidator(Protocol):
    """Protocol that every constraint collaborator must satisfy."""

    def single(self, value: Any, constraint: Any, options: ValidationOptions) -> list[str]:
        """Validate one value against one constraint descriptor.

        Returns the failure messages, or an empty list when *value* passes.
        Raises :class:`~validate_params.errors.InvalidArgumentError` if the
        descriptor itself is malformed.
        """
        ...

    def is_array(self, value: Any) -> bool:
        """Return ``True`` if *value* counts as an array."""
        ...

    def is_object(self, value: Any) -> bool:
        """Return ``True`` if *value* counts as a key-value object."""
        ...
