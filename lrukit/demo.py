"""Walk-through of the basic LRU cache operations."""

from __future__ import annotations

import argparse
import functools
import sys
from typing import Any, Callable, Iterable, List, Optional, TextIO

from lrukit.lru import Cache

__all__ = ["main", "demo_lru_behavior"]

_MISSING = object()


def _format_keys(keys: Iterable[Any]) -> str:
    return "[" + " ".join(str(key) for key in keys) + "]"


def _report(say: Callable[[str], None], label: str, value: Any) -> None:
    if value is not _MISSING:
        say(f"{label}: {value}")


def _walkthrough(out: TextIO) -> None:
    say = functools.partial(print, file=out)
    cache = Cache(3)

    say("=== LRU Cache Demo ===")

    say("\n1. Adding key-value pairs:")
    for key, value in (("apple", "苹果"), ("banana", "香蕉"), ("cherry", "樱桃")):
        cache.put(key, value)
    say(f"Cache size: {len(cache)}/{cache.capacity}")
    say(f"Cache keys: {_format_keys(cache.keys())}")

    say("\n2. Getting values:")
    _report(say, "apple", cache.get("apple", _MISSING))
    say(f"Key order after accessing apple: {_format_keys(cache.keys())}")

    say("\n3. Adding new key to trigger eviction:")
    cache.put("date", "枣子")
    say(f"Keys after adding date: {_format_keys(cache.keys())}")
    if cache.get("banana", _MISSING) is _MISSING:
        say("banana has been evicted")

    say("\n4. Updating existing key:")
    cache.put("apple", "红苹果")
    _report(say, "Updated apple", cache.get("apple", _MISSING))

    say("\n5. Using Peek method:")
    say(f"Key order before Peek: {_format_keys(cache.keys())}")
    _report(say, "Peek cherry", cache.peek("cherry", _MISSING))
    say(f"Key order after Peek: {_format_keys(cache.keys())}")

    say("\n6. Checking key existence:")
    for fruit in ("apple", "banana"):
        say(f"Contains {fruit}: {str(cache.contains(fruit)).lower()}")

    say("\n7. Removing key:")
    if cache.remove("date"):
        say("date has been removed")
    say(f"Keys after removal: {_format_keys(cache.keys())}")
    say(f"Cache size: {len(cache)}/{cache.capacity}")

    say("\n8. Clearing cache:")
    cache.clear()
    say(f"Cache size after clear: {len(cache)}/{cache.capacity}")
    say(f"Cache keys: {_format_keys(cache.keys())}")

    say("\n=== LRU Algorithm Features Demo ===")
    demo_lru_behavior(out)


def demo_lru_behavior(out: Optional[TextIO] = None) -> List[Any]:
    """Show eviction order on a three-entry cache; return the final keys."""
    say = functools.partial(print, file=sys.stdout if out is None else out)

    cache = Cache(3)
    say("Create cache with capacity 3")

    for key, value in ((1, "one"), (2, "two"), (3, "three")):
        cache.put(key, value)
    say(f"After adding 1,2,3: {_format_keys(cache.keys())}")

    steps = ((1, 4, "four", 2), (3, 5, "five", 1))
    for accessed, added, value, evicted in steps:
        cache.get(accessed)
        say(f"After accessing {accessed}: {_format_keys(cache.keys())}")
        cache.put(added, value)
        say(f"After adding {added}: {_format_keys(cache.keys())}")
        if evicted not in cache:
            say(f"Element {evicted} has been evicted (LRU policy)")

    return cache.keys()


def main(argv: Optional[List[str]] = None) -> int:
    """Run the LRU cache walk-through, writing to standard output."""
    parser = argparse.ArgumentParser(description="Demonstrate the LRU cache.")
    parser.parse_args(argv)
    _walkthrough(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())