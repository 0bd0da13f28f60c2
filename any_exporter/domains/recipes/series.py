"""Per-label-set cursor over a compiled value sequence."""

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable


@dataclass
class Series:
    """Remaining values for one label set.

    ``last_emitted`` is the absolute value most recently applied; counters
    use it to turn absolute readings into increments.
    """

    labels: dict[str, str]
    values: deque[float] = field(default_factory=deque)
    last_emitted: float = 0.0

    @classmethod
    def build(cls, labels: dict[str, str], values: Iterable[float]) -> "Series":
        return cls(labels=dict(labels), values=deque(values))

    @property
    def drained(self) -> bool:
        return not self.values

    def pop(self) -> float:
        """Consume the next value.

        Raises:
            IndexError: The series is already drained.
        """
        return self.values.popleft()
