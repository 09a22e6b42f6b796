"""Queue operations for scripted workloads."""

from dataclasses import dataclass
from typing import Any

INSERT = "insert"
POP = "pop"


@dataclass
class Operation:
    """A single insert or pop applied to a queue."""

    kind: str
    value: Any = None  # Only used by inserts

    def __str__(self):
        if self.kind == INSERT:
            return f"insert({self.value})"
        return f"{self.kind}()"
