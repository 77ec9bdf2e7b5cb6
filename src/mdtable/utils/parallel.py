"""Thread pool helper for formatting many documents at once.

Batch processing pattern adapted from CAMEL-AI MarkItDownLoader
(camel/loaders/markitdown.py)
Copyright 2023-2026 @ CAMEL-AI.org. All Rights Reserved.
Licensed under the Apache License, Version 2.0
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterator, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def process_batch(
    items: Sequence[T],
    processor: Callable[[T], R],
    max_workers: int = 4,
    skip_failed: bool = False,
) -> Iterator[tuple[T, R | Exception]]:
    """Apply ``processor`` to every item on a thread pool.

    Results are yielded in the order of ``items``, not completion order.

    Args:
        items: Items to process.
        processor: Function to apply to each item.
        max_workers: Maximum concurrent workers.
        skip_failed: If True, drop items whose processor raised.

    Yields:
        Tuples of (item, result_or_exception).
    """
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(processor, item) for item in items]

        for item, future in zip(items, futures):
            try:
                outcome: R | Exception = future.result()
            except Exception as e:
                if skip_failed:
                    continue
                outcome = e
            yield item, outcome
