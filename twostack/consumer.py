"""Consumer process draining a two-stack queue."""

from asimpy import Process
from typing import List
from item import Item
from two_stack_queue import TwoStackQueue


class Consumer(Process):
    """Polls a shared queue and processes items in arrival order."""

    def init(
        self,
        queue: TwoStackQueue,
        name: str,
        poll_interval: float,
        processing_time: float = 0.0,
    ):
        self.queue = queue
        self.name = name
        self.poll_interval = poll_interval
        self.processing_time = processing_time
        self.consumed: List[Item] = []
        self.empty_polls = 0
        self.total_latency = 0.0

    async def run(self):
        """Main consumer loop: pop and process, or wait for more items."""
        while True:
            item = self.queue.pop()

            if item is None:
                # Nothing queued yet
                self.empty_polls += 1
                await self.timeout(self.poll_interval)
                continue

            self.consumed.append(item)
            latency = self.now - item.created_at
            self.total_latency += latency
            print(
                f"[{self.now:.1f}] {self.name}: Consumed {item} "
                f"(latency: {latency:.1f}, moves so far: {self.queue.moves})"
            )

            if self.processing_time > 0:
                await self.timeout(self.processing_time)
            else:
                await self.timeout(self.poll_interval)

    def average_latency(self) -> float:
        """Mean time items spent in the queue."""
        if not self.consumed:
            return 0.0
        return self.total_latency / len(self.consumed)
