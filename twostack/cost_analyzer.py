"""Measure the amortized cost of two-stack queue operations."""

from dataclasses import dataclass
from typing import List
from operation import INSERT, POP, Operation
from two_stack_queue import TwoStackQueue


@dataclass
class CostReport:
    """Work done by a queue over one sequence of operations."""

    num_operations: int = 0
    num_inserts: int = 0
    num_pops: int = 0
    total_moves: int = 0
    max_pop_cost: int = 0  # Most elements moved by a single pop

    @property
    def amortized_cost(self) -> float:
        """Average work per operation: one unit each, plus one per move."""
        if self.num_operations == 0:
            return 0.0
        return (self.num_operations + self.total_moves) / self.num_operations

    def summary(self, title: str = "Cost Analysis"):
        """Print the report."""
        print(f"\n=== {title} ===")
        print(f"Operations: {self.num_operations}")
        print(f"Inserts: {self.num_inserts}")
        print(f"Pops: {self.num_pops}")
        print(f"Elements moved: {self.total_moves}")
        print(f"Most expensive pop: {self.max_pop_cost} moves")
        print(f"Amortized cost: {self.amortized_cost:.2f} per operation")


def analyze(operations: List[Operation]) -> CostReport:
    """Replay operations on a fresh queue, recording how much each costs."""
    queue = TwoStackQueue()
    report = CostReport()

    for op in operations:
        report.num_operations += 1
        if op.kind == INSERT:
            report.num_inserts += 1
            queue.insert(op.value)
        elif op.kind == POP:
            report.num_pops += 1
            before = queue.moves
            queue.pop()
            report.max_pop_cost = max(report.max_pop_cost, queue.moves - before)
        else:
            raise ValueError(f"unknown operation {op.kind!r}")

    report.total_moves = queue.moves
    return report
