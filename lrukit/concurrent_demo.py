"""Demonstration of an LRU cache shared between many threads."""

from __future__ import annotations

import argparse
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, TextIO

from lrukit.lru import Cache

__all__ = ["main", "concurrent_put_demo", "concurrent_get_demo", "mixed_concurrent_demo"]


def _format_duration(seconds: float) -> str:
    return f"{seconds * 1000:.3f}ms"


def _run_all(tasks: List[Callable[[], None]]) -> float:
    """Run every task on its own thread; return the elapsed seconds."""
    start = time.perf_counter()
    with ThreadPoolExecutor(max_workers=max(1, len(tasks))) as pool:
        futures = [pool.submit(task) for task in tasks]
        for future in futures:
            future.result()
    return time.perf_counter() - start


def concurrent_put_demo(cache: Cache, out: Optional[TextIO] = None) -> int:
    """Insert items from ten writer threads; return the final cache size."""
    out = sys.stdout if out is None else out
    workers = 10
    items_per_worker = 20

    def writer(worker_id: int) -> None:
        for j in range(items_per_worker):
            cache.put(f"worker{worker_id}_item{j}", worker_id * 1000 + j)

    duration = _run_all([lambda w=w: writer(w) for w in range(workers)])
    size = len(cache)
    print(
        f"Added {workers * items_per_worker} items concurrently in {_format_duration(duration)}",
        file=out,
    )
    print(f"Final cache size: {size}", file=out)
    return size


def concurrent_get_demo(cache: Cache, out: Optional[TextIO] = None) -> int:
    """Populate fifty keys and read them from twenty threads.

    Returns the number of reads performed.
    """
    out = sys.stdout if out is None else out
    for i in range(50):
        cache.put(f"key{i}", i * 10)

    readers = 20
    reads_per_reader = 50

    def reader() -> None:
        for j in range(reads_per_reader):
            cache.get(f"key{j % 50}")

    duration = _run_all([reader for _ in range(readers)])
    reads = readers * reads_per_reader
    print(f"Performed {reads} reads concurrently in {_format_duration(duration)}", file=out)
    return reads


def mixed_concurrent_demo(cache: Cache, out: Optional[TextIO] = None) -> int:
    """Run writers, readers and a metadata reader together; return the final size."""
    out = sys.stdout if out is None else out
    operations = 1000

    def writer(writer_id: int) -> None:
        for j in range(operations // 5):
            cache.put(f"mixed_key_{writer_id}_{j}", writer_id * 1000 + j)

    def reader(reader_id: int) -> None:
        for j in range(operations // 10):
            key = f"mixed_key_{reader_id % 5}_{j}"
            cache.get(key)
            cache.peek(key)
            cache.contains(key)

    def metadata_reader() -> None:
        for _ in range(operations // 10):
            len(cache)
            cache.keys()
            time.sleep(1e-6)

    tasks: List[Callable[[], None]] = [lambda w=w: writer(w) for w in range(5)]
    tasks += [lambda r=r: reader(r) for r in range(10)]
    tasks.append(metadata_reader)

    duration = _run_all(tasks)
    size = len(cache)
    print(f"Mixed operations completed in {_format_duration(duration)}", file=out)
    print(f"Final cache size: {size}", file=out)
    return size


def main(argv: Optional[List[str]] = None) -> int:
    """Run the three concurrent demos on one shared cache."""
    parser = argparse.ArgumentParser(description="Exercise the LRU cache from many threads.")
    parser.parse_args(argv)

    out = sys.stdout
    print("=== LRU Cache Concurrent Demo ===", file=out)
    cache = Cache(100)

    print("\n1. Concurrent Put operations:", file=out)
    concurrent_put_demo(cache, out)

    print("\n2. Concurrent Get operations:", file=out)
    concurrent_get_demo(cache, out)

    print("\n3. Mixed concurrent operations:", file=out)
    mixed_concurrent_demo(cache, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())