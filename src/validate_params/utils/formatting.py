from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Literal

ErrorFormat = Literal["grouped", "flat", "detailed"]

_TEEN_ENDING = re.compile(r"1[123]$")
_SUFFIXES = {"1": "st", "2": "nd", "3": "rd"}


@dataclass(frozen=True)
class ParameterError:
    """A single constraint failure for one parameter."""

    name: str
    position: int
    value: Any
    message: str


def as_ordinal(n: Any) -> str:
    """Render an integer as an English ordinal (``1`` -> ``"1st"``).

    *n* is passed through :func:`int` first, so ``"2"`` and ``3.7`` are
    accepted.  Raises :class:`ValueError` when *n* cannot be converted.
    """
    try:
        number = int(n)
    except (TypeError, ValueError) as e:
        raise ValueError(f"cannot convert {n!r} to an ordinal") from e

    text = str(number)
    if _TEEN_ENDING.search(text):
        return f"{text}th"
    return f"{text}{_SUFFIXES.get(text[-1], 'th')}"


def full_message(position: int, message: str) -> str:
    """Prefix *message* with the parameter's ordinal position (``"2nd parameter: ..."``).

    The ordinal is used rather than the ``param2`` key, which already labels
    the message in grouped and detailed output.
    """
    return f"{as_ordinal(position)} parameter: {message}"


def format_errors(errors: list[ParameterError], fmt: ErrorFormat) -> Any:
    """Arrange *errors* into the requested output format."""
    if fmt == "flat":
        return [err.message for err in errors]
    if fmt == "detailed":
        return list(errors)

    grouped: dict[str, list[str]] = {}
    for err in errors:
        grouped.setdefault(err.name, []).append(err.message)
    return grouped
