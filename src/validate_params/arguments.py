"""Captured function arguments and the predicate that recognises them.

A plain ``list`` is the usual way to hand parameters to
:func:`~validate_params.validator.validate_params`.  When the values come
straight from a function call, :func:`capture_arguments` (or
:meth:`Arguments.from_bound`) produces an :class:`Arguments` instead, which
:func:`is_arguments` tells apart from an ordinary sequence.
"""

from __future__ import annotations

import inspect
from collections.abc import Iterator, Sequence
from typing import Any, overload

from validate_params.errors import InvalidArgumentError


class Arguments(Sequence[Any]):
    """Immutable, ordered positional arguments of a single function call."""

    __slots__ = ("_values", "function_name")

    def __init__(self, values: Sequence[Any] = (), function_name: str | None = None) -> None:
        self._values: tuple[Any, ...] = tuple(values)
        self.function_name = function_name

    @classmethod
    def from_bound(cls, bound: inspect.BoundArguments) -> Arguments:
        """Build from :meth:`inspect.Signature.bind` output (positional part only)."""
        return cls(bound.args)

    @overload
    def __getitem__(self, index: int) -> Any: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Any, ...]: ...

    def __getitem__(self, index: int | slice) -> Any:
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Arguments):
            return self._values == other._values
        return NotImplemented

    def __hash__(self) -> int:
        # only hashable when every captured value is
        return hash(self._values)

    def __repr__(self) -> str:
        name = f"{self.function_name}: " if self.function_name else ""
        return f"Arguments({name}{', '.join(repr(v) for v in self._values)})"


def capture_arguments() -> Arguments:
    """Capture the positional parameters of the calling function.

    Values are read from the caller's frame in declaration order, followed by
    anything collected in ``*args``.  Keyword-only parameters and ``**kwargs``
    are left out.  Call this before rebinding any parameter names, since the
    frame's current values are what get captured.  Raises
    :class:`~validate_params.errors.InvalidArgumentError` if a positional
    parameter has already been deleted with ``del``.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is None:
        return Arguments()
    try:
        code = caller.f_code
        local_values = caller.f_locals
        # co_varnames starts with positional params, then keyword-only, then *args
        names = list(code.co_varnames[: code.co_argcount])
        if code.co_flags & inspect.CO_VARARGS:
            varargs = code.co_varnames[code.co_argcount + code.co_kwonlyargcount]
        else:
            varargs = None

        missing = [name for name in (*names, varargs) if name and name not in local_values]
        if missing:
            raise InvalidArgumentError(
                f"cannot capture arguments of {code.co_name}(): "
                f"parameter(s) no longer bound: {', '.join(missing)}"
            )

        values = [local_values[name] for name in names]
        if varargs:
            values.extend(local_values[varargs])
        return Arguments(values, function_name=code.co_name)
    finally:
        del frame, caller


def is_arguments(item: Any) -> bool:
    """Return ``True`` if *item* is a captured argument list.

    Only :class:`Arguments` and :class:`inspect.BoundArguments` qualify;
    lists, tuples, mappings, ``None`` and scalars all return ``False``.
    """
    return isinstance(item, (Arguments, inspect.BoundArguments))


def as_list(params: Any) -> list[Any]:
    """Normalise an accepted params value into a list."""
    if isinstance(params, inspect.BoundArguments):
        return list(params.args)
    return list(params)
