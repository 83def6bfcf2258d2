"""
Big Five — error taxonomy.

Every error carries a ``status_code`` hint so an HTTP collaborator can map
client mistakes to 4xx and missing model data to 503 without inspecting
the class hierarchy.
"""

from __future__ import annotations

from typing import Any, Optional


class Big5Error(Exception):
    """Base exception for the scoring engine."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ResponseValidationError(Big5Error, ValueError):
    """The submitted answers are unusable; resubmit with corrected input."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message, status_code=400, details=details)


class WrongResponseCount(ResponseValidationError):
    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected {expected} responses, got {actual}",
            details={"expected": expected, "actual": actual},
        )


class InvalidResponseLevel(ResponseValidationError):
    def __init__(self, indices: list[int], values: Optional[list[Any]] = None) -> None:
        self.indices = list(indices)
        self.values = list(values) if values is not None else []
        if len(self.indices) == 1:
            message = f"Invalid response level at index {self.indices[0]}"
        else:
            joined = ", ".join(str(i) for i in self.indices)
            message = f"Invalid response levels at indices {joined}"
        super().__init__(
            message,
            details={"indices": self.indices, "values": [repr(v) for v in self.values]},
        )


class ModelDataUnavailable(Big5Error, RuntimeError):
    """Static item/coefficient tables could not be loaded."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message, status_code=503, details=details)
