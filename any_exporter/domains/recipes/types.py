"""Recipe domain types and errors."""

from enum import Enum
from typing import Optional

from any_exporter.core.exceptions import AnyExporterException


class MetricKind(str, Enum):
    """Metric kinds a recipe may declare."""

    COUNTER = "counter"
    GAUGE = "gauge"
    HISTOGRAM = "histogram"

    @classmethod
    def parse(cls, value: str) -> Optional["MetricKind"]:
        """Return the kind named by ``value`` or None if unknown."""
        try:
            return cls(value)
        except ValueError:
            return None


class RecipeError(AnyExporterException):
    """Base error for a rejected recipe batch.

    ``index`` points at the offending recipe inside the submitted batch and
    ``row`` (when set) at the offending data row inside that recipe.
    """

    def __init__(self, message: str, index: int = -1, row: Optional[int] = None):
        self.index = index
        self.row = row
        location = []
        if index >= 0:
            location.append(f"recipe #{index}")
        if row is not None:
            location.append(f"data row #{row}")
        if location:
            message = f"{message} ({', '.join(location)})"
        super().__init__(message)


class SequenceFormatError(RecipeError):
    """A value sequence cannot be compiled."""

    def __init__(self, message: str, token: Optional[str] = None, **kwargs):
        self.token = token
        super().__init__(message, **kwargs)


class RecipeValidationError(RecipeError):
    """A spec or data row is malformed or inconsistent."""


class RecipeConflictError(RecipeError):
    """A submitted metric name is already taken."""

    def __init__(self, name: str, index: int = -1):
        self.name = name
        super().__init__(f"{name}: metrics conflict", index=index)
