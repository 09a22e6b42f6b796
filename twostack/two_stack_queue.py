"""FIFO queue built from two LIFO stacks."""

from typing import Any, Iterator, List, Optional


class TwoStackQueue:
    """First-in, first-out queue that only pushes and pops at list ends.

    New values go onto the in stack. Pops are served from the out stack;
    when it runs dry, the whole in stack is reversed onto it so that the
    oldest value ends up on top.
    """

    def __init__(self):
        self.in_stack: List[Any] = []
        self.out_stack: List[Any] = []
        self.moves = 0

    def insert(self, value: Any):
        """Add a value at the back of the queue."""
        self.in_stack.append(value)

    # mccole: pop
    def pop(self) -> Optional[Any]:
        """Remove and return the front value, or None if empty."""
        if not self.out_stack:
            self._transfer()
        if not self.out_stack:
            return None
        return self.out_stack.pop()
    # mccole: /pop

    def peek(self) -> Optional[Any]:
        """Return the front value without removing it."""
        if not self.out_stack:
            self._transfer()
        if not self.out_stack:
            return None
        return self.out_stack[-1]

    def length(self) -> int:
        """Return number of values in the queue."""
        return len(self.in_stack) + len(self.out_stack)

    def is_empty(self) -> bool:
        """Check if queue is empty."""
        return self.length() == 0

    # mccole: transfer
    def _transfer(self):
        """Move everything from the in stack to the out stack."""
        # Only called when out_stack is empty, so the reversed in_stack
        # becomes the out_stack as-is.
        self.in_stack.reverse()
        self.moves += len(self.in_stack)
        self.out_stack, self.in_stack = self.in_stack, []
    # mccole: /transfer

    def __len__(self):
        return self.length()

    def __iter__(self) -> Iterator[Any]:
        yield from reversed(self.out_stack)
        yield from self.in_stack

    def __repr__(self):
        return f"TwoStackQueue({list(self)})"
