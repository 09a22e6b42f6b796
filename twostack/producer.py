from typing import Optional
from asimpy import Process
from item import Item
from two_stack_queue import TwoStackQueue


class Producer(Process):
    """Inserts items into a shared queue at a fixed interval."""

    def init(
        self,
        queue: TwoStackQueue,
        name: str,
        interval: float,
        limit: Optional[int] = None,
    ):
        self.queue = queue
        self.name = name
        self.interval = interval
        self.limit = limit
        self.items_produced = 0

    async def run(self):
        """Generate items until the limit (if any) is reached."""
        while self.limit is None or self.items_produced < self.limit:
            self.items_produced += 1
            item = Item(
                item_id=self.items_produced, producer=self.name, created_at=self.now
            )
            self.queue.insert(item)
            print(
                f"[{self.now:.1f}] {self.name} inserted {item} "
                f"(queue length: {self.queue.length()})"
            )

            await self.timeout(self.interval)
