from dataclasses import dataclass


@dataclass
class Item:
    """A unit of work passed from producers to consumers."""

    item_id: int
    producer: str
    created_at: float

    def __str__(self):
        return f"Item({self.producer}-{self.item_id})"
