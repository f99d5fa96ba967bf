from typing import List, Sequence, TypeVar

T = TypeVar("T")


def partition(records: Sequence[T], size: int = 10) -> List[List[T]]:
    """
    Split records into contiguous batches of at most `size`, preserving order.

    Raises:
        ValueError: If size is smaller than 1.
    """
    if size < 1:
        raise ValueError(f"Batch size must be at least 1, got {size}")
    return [list(records[i:i + size]) for i in range(0, len(records), size)]
