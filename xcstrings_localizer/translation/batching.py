"""Fixed-size, order-preserving batching of translation work."""

from dataclasses import dataclass
from typing import Generic, List, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_BATCH_SIZE = 15


@dataclass(frozen=True)
class Batch(Generic[T]):
    """A group of items sent to the service in one call."""

    number: int  # 1-based
    total: int
    items: List[T]

    def __len__(self) -> int:
        return len(self.items)


class BatchScheduler:
    """Splits work items into ordered batches of at most ``batch_size``."""

    def __init__(self, batch_size: int = DEFAULT_BATCH_SIZE):
        if batch_size < 1:
            raise ValueError(f"Batch size must be at least 1, got {batch_size}")
        self.batch_size = batch_size

    def partition(self, items: Sequence[T]) -> List[Batch[T]]:
        """
        Partition items into batches, keeping their relative order.

        Every batch except possibly the last holds exactly ``batch_size`` items.
        An empty input yields no batches.
        """
        chunks = [
            list(items[i:i + self.batch_size])
            for i in range(0, len(items), self.batch_size)
        ]
        return [
            Batch(number=index + 1, total=len(chunks), items=chunk)
            for index, chunk in enumerate(chunks)
        ]
