"""Generate and replay sequences of queue operations."""

import random
from typing import Any, List, Optional
from operation import INSERT, POP, Operation


def random_operations(
    num_ops: int, insert_probability: float = 0.5, seed: Optional[int] = None
) -> List[Operation]:
    """Randomly interleave inserts of increasing integers with pops."""
    rng = random.Random(seed)
    operations = []
    next_value = 0
    for _ in range(num_ops):
        if rng.random() < insert_probability:
            operations.append(Operation(INSERT, next_value))
            next_value += 1
        else:
            operations.append(Operation(POP))
    return operations


def bursty_operations(num_bursts: int, burst_size: int) -> List[Operation]:
    """Bursts of inserts, each drained completely before the next."""
    operations = []
    next_value = 0
    for _ in range(num_bursts):
        for _ in range(burst_size):
            operations.append(Operation(INSERT, next_value))
            next_value += 1
        operations.extend(Operation(POP) for _ in range(burst_size))
    return operations


# mccole: replay
def replay(queue: Any, operations: List[Operation]) -> List[Any]:
    """Apply operations to a queue and return what each pop produced."""
    results = []
    for op in operations:
        if op.kind == INSERT:
            queue.insert(op.value)
        elif op.kind == POP:
            results.append(queue.pop())
        else:
            raise ValueError(f"unknown operation {op.kind!r}")
    return results
# mccole: /replay
