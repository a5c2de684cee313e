# lrukit

Least-recently-used caches for Python that are safe to share between threads.

Two implementations with the same interface:

- `lrukit.lru.Cache`: one lock guards every operation.
- `lrukit.mapcache.SyncMapCache`: key lookups (`get`, `peek`, `contains`)
  read a plain dictionary without locking; only changes to the recency order
  take the lock.

Both keep at most `capacity` entries. Adding a new key to a full cache evicts
the entry that was used least recently. Updating an existing key replaces its
value and marks it most recently used.

## Installation

```
pip install lrukit
```

## Usage

```python
from lrukit.lru import Cache

cache = Cache(3)
cache.put("apple", "red")
cache.put("banana", "yellow")
cache.put("cherry", "red")

cache.get("apple")          # "red", and apple becomes most recently used
cache.keys()                # ["apple", "cherry", "banana"]

cache.put("date", "brown")  # evicts "banana"
"banana" in cache           # False
cache.contains("banana")    # False
cache.get("banana", "gone") # "gone"

cache.peek("cherry")        # "red", without changing the order
cache["apple"]              # "red"; raises KeyError for a missing key
cache.remove("date")        # True if the key was there, otherwise False
len(cache)                  # number of entries
cache.capacity              # 3 (a read-only property)
cache.clear()
```

`get` and `peek` return `default` (which defaults to `None`) when the key is
missing. `keys()` returns a list of keys from most to least recently used.
`get` and `cache[key]` mark the key most recently used; `peek`, `contains` and
`in` do not.

`SyncMapCache` from `lrukit.mapcache` is used the same way.

## Commands

```
lrukit-demo
```

Walks through put, get, eviction, update, peek, contains, remove and clear on
a cache of capacity 3, then shows the eviction order step by step. Key lists
are printed as `[apple cherry banana]`.

```
lrukit-comparison [--workers N] [--operations N]
```

Runs the same put/get/evict sequence on both implementations, then times a
concurrent workload on a cache of capacity 100 for each: `--workers` threads
(default 50), each doing `--operations` operations (default 1000), one put for
every two gets. It prints both timings, which one was faster and the final
cache sizes.

```
lrukit-concurrent-demo
```

Shares one `Cache` of capacity 100 between threads: concurrent puts from ten
writers, concurrent gets from twenty readers, then writers, readers and a
metadata reader running together. It prints the timings and cache sizes.

The same steps are available as functions: `lrukit.demo.demo_lru_behavior`,
`lrukit.comparison.show_implementation` and
`lrukit.comparison.compare_performance`, and
`lrukit.concurrent_demo.concurrent_put_demo`, `concurrent_get_demo` and
`mixed_concurrent_demo`. Each takes an optional text stream to write to.

## Tests

```
pip install "lrukit[test]"
pytest
```