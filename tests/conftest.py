"""Shared test fixtures for the validate_params test suite."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import pytest

from validate_params.validator import reset_default_validator

if TYPE_CHECKING:
    from validate_params.config.settings import ValidationOptions

# ---------------------------------------------------------------------------
# Dummy data
# ---------------------------------------------------------------------------

# name -> (description, value); one entry per basic Python type
DUMMY_BASIC_TYPES: dict[str, tuple[str, Any]] = {
    "none": ("None", None),
    "bool": ("a boolean", True),
    "num": ("a number", 42),
    "str": ("a generic string", "boogers!"),
    "tuple": ("a tuple", (1, 2, 3)),
    "list": ("a list", [1, 2, 3]),
    "dict": ("a plain dict", {"b": "boogers"}),
    "fn": ("a function", lambda a, b: a + b),
}


def dummy_basic_types_except(*names: str) -> list[str]:
    """Return the sorted names of all dummy basic types except *names*."""
    return sorted(name for name in DUMMY_BASIC_TYPES if name not in names)


# ---------------------------------------------------------------------------
# Mock collaborator
# ---------------------------------------------------------------------------

class RecordingValidator:
    """Constraint collaborator that records every call and fails on demand.

    A constraint mapping with a ``"fail"`` key makes :meth:`single` report
    that key's value as the only error message.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[Any, Any, ValidationOptions]] = []

    def single(self, value: Any, constraint: Any, options: ValidationOptions) -> list[str]:
        self.calls.append((value, constraint, options))
        if isinstance(constraint, Mapping) and "fail" in constraint:
            return [constraint["fail"]]
        return []

    def is_array(self, value: Any) -> bool:
        return isinstance(value, list)

    def is_object(self, value: Any) -> bool:
        return isinstance(value, Mapping)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_default_validator() -> None:
    """Ensure every test starts and ends with a fresh default validator."""
    reset_default_validator()
    yield  # type: ignore[misc]
    reset_default_validator()


@pytest.fixture
def recorder() -> RecordingValidator:
    return RecordingValidator()
