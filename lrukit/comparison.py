"""Side-by-side comparison of the two LRU cache implementations."""

from __future__ import annotations

import argparse
import functools
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, TextIO, Tuple, Union

from lrukit.demo import _format_keys
from lrukit.lru import Cache
from lrukit.mapcache import SyncMapCache

__all__ = ["main", "show_implementation", "compare_performance"]

_MISSING = object()
_PERFORMANCE_CAPACITY = 100

AnyCache = Union[Cache, SyncMapCache]


def show_implementation(title: str, cache: AnyCache, out: Optional[TextIO] = None) -> None:
    """Run the basic put/get/evict sequence on ``cache`` and report it."""
    say = functools.partial(print, file=sys.stdout if out is None else out)

    say(title)
    for key, colour in (("apple", "red"), ("banana", "yellow"), ("cherry", "red")):
        cache.put(key, colour)
    say(f"   Keys: {_format_keys(cache.keys())}")

    value = cache.get("apple", _MISSING)
    if value is not _MISSING:
        say(f"   Get apple: {value}")
    say(f"   Keys after accessing apple: {_format_keys(cache.keys())}")

    cache.put("date", "brown")
    say(f"   Keys after adding date: {_format_keys(cache.keys())}")


def _hammer(cache: AnyCache, worker_id: int, operations: int) -> None:
    for j in range(operations):
        if j % 3 == 0:
            cache.put(worker_id * operations + j, j)
        else:
            cache.get(worker_id * 100 + j % 100)


def _time_workers(cache: AnyCache, workers: int, operations: int) -> float:
    start = time.perf_counter()
    with ThreadPoolExecutor(max_workers=max(1, workers)) as pool:
        futures = [pool.submit(_hammer, cache, worker_id, operations) for worker_id in range(workers)]
        for future in futures:
            future.result()
    return time.perf_counter() - start


def compare_performance(
    out: Optional[TextIO] = None, workers: int = 50, operations: int = 1000
) -> Tuple[int, int]:
    """Time a concurrent workload on both caches.

    Returns the final sizes of the single-lock cache and the SyncMapCache.
    """
    say = functools.partial(print, file=sys.stdout if out is None else out)
    say("3. Performance Comparison (Concurrent Access):")

    caches = {
        "Single-lock": Cache(_PERFORMANCE_CAPACITY),
        "SyncMapCache": SyncMapCache(_PERFORMANCE_CAPACITY),
    }
    durations = {name: _time_workers(cache, workers, operations) for name, cache in caches.items()}
    for name, duration in durations.items():
        say(f"   {name} implementation: {duration * 1000:.3f}ms")

    lock_time, map_time = durations["Single-lock"], durations["SyncMapCache"]
    if lock_time < map_time:
        winner, fast, slow = "Single-lock", lock_time, map_time
    else:
        winner, fast, slow = "SyncMapCache", map_time, lock_time
    gain = (slow - fast) / slow * 100 if slow else 0.0
    say(f"   {winner} is {gain:.1f}% faster")

    sizes = (len(caches["Single-lock"]), len(caches["SyncMapCache"]))
    say(f"\n   Final cache sizes - Cache: {sizes[0]}, SyncMapCache: {sizes[1]}")
    return sizes


def main(argv: Optional[List[str]] = None) -> int:
    """Compare both cache implementations, writing to standard output."""
    parser = argparse.ArgumentParser(description="Compare the LRU cache implementations.")
    parser.add_argument("--workers", type=int, default=50, help="number of concurrent workers")
    parser.add_argument("--operations", type=int, default=1000, help="operations per worker")
    args = parser.parse_args(argv)

    out = sys.stdout
    print("=== LRU Cache Implementation Comparison ===\n", file=out)
    for title, factory in (
        ("1. Single-lock Implementation:", Cache),
        ("2. SyncMapCache Implementation:", SyncMapCache),
    ):
        show_implementation(title, factory(3), out)
        print(file=out)
    compare_performance(out, args.workers, args.operations)
    return 0


if __name__ == "__main__":
    sys.exit(main())