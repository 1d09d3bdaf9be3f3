"""Engine exception types.

All of them derive from :class:`ValueError` so callers that already guard
against bad inputs with ``except ValueError`` keep working. None of these are
recovered inside the engine: a call either returns a complete partition or
raises.
"""

from __future__ import annotations

from typing import Any, Optional


class StrataError(ValueError):
    """Base class for partitioning / resampling errors."""


class InvalidParameterError(StrataError):
    """Raised when a split parameter (holdout fraction, fold count) is out of domain."""

    def __init__(self, name: str, value: Any, expected: str):
        self.name = name
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid {name}={value!r}; expected {expected}.")


class InsufficientDataError(StrataError):
    """Raised when a class has too few rows for the requested split or fold count."""

    def __init__(
        self,
        label: Any,
        count: int,
        *,
        required: Optional[int] = None,
        message: Optional[str] = None,
    ):
        self.label = label
        self.count = int(count)
        self.required = required
        if message is None:
            if required is not None:
                message = (
                    f"Class {label!r} has {self.count} member(s); "
                    f"at least {required} required."
                )
            else:
                message = f"Class {label!r} has {self.count} member(s)."
        super().__init__(message)


class SchemaMismatchError(StrataError):
    """Raised when labels and dataset rows disagree (length, column schema)."""
