"""Deque-backed FIFO used to check the two-stack queue."""

from collections import deque
from typing import Any, Optional


class ReferenceQueue:
    """FIFO queue with the same interface as TwoStackQueue."""

    def __init__(self):
        self.items: deque = deque()

    def insert(self, value: Any):
        self.items.append(value)

    def pop(self) -> Optional[Any]:
        if not self.items:
            return None
        return self.items.popleft()

    def length(self) -> int:
        return len(self.items)

    def __len__(self):
        return self.length()
