from concurrent.futures import ThreadPoolExecutor

import pytest

from lrukit.lru import Cache


def _cache(capacity, *pairs):
    cache = Cache(capacity)
    for key, value in pairs:
        cache.put(key, value)
    return cache


def _parallel(*jobs):
    with ThreadPoolExecutor(max_workers=len(jobs)) as pool:
        for future in [pool.submit(job) for job in jobs]:
            future.result()


def test_basic_put_get_and_eviction():
    cache = _cache(2, ("key1", "value1"), ("key2", "value2"))
    assert [cache.get(k) for k in ("key1", "key2")] == ["value1", "value2"]
    cache.put("key3", "value3")
    assert [cache.get(k) for k in ("key1", "key2", "key3")] == [None, "value2", "value3"]


def test_update_existing_key():
    cache = _cache(2, ("key1", "value1"), ("key1", "updated_value1"))
    assert cache.get("key1") == "updated_value1"
    assert len(cache) == 1


def test_eviction_respects_access():
    cache = _cache(3, (1, "one"), (2, "two"), (3, "three"))
    cache.get(1)
    cache.put(4, "four")
    assert 2 not in cache
    assert [cache.get(k) for k in (1, 3, 4)] == ["one", "three", "four"]


def test_remove():
    cache = _cache(3, ("a", 1), ("b", 2), ("c", 3))
    assert cache.remove("b") is True
    assert cache.get("b") is None
    assert len(cache) == 2
    assert cache.remove("d") is False


def test_contains():
    cache = _cache(2, ("key1", "value1"))
    assert (cache.contains("key1"), cache.contains("key2")) == (True, False)
    assert ("key1" in cache, "key2" in cache) == (True, False)


def test_peek_does_not_change_order():
    cache = _cache(2, ("key1", "value1"), ("key2", "value2"))
    assert cache.peek("key1") == "value1"
    cache.put("key3", "value3")
    assert cache.get("key1") is None
    assert cache.keys() == ["key3", "key2"]


def test_keys_most_recent_first():
    cache = _cache(3, ("a", 1), ("b", 2), ("c", 3))
    cache.get("a")
    assert cache.keys() == ["a", "c", "b"]


def test_clear():
    cache = _cache(3, ("a", 1), ("b", 2), ("c", 3))
    cache.clear()
    assert (len(cache), cache.get("a"), cache.keys()) == (0, None, [])


def test_capacity_is_fixed():
    cache = Cache(5)
    assert cache.capacity == 5
    cache.put("key", "value")
    assert cache.capacity == 5


def test_get_default_and_getitem():
    cache = _cache(2, ("x", None))
    assert cache.get("missing", "fallback") == "fallback"
    assert cache.peek("missing", 7) == 7
    assert cache.get("x", "fallback") is None
    with pytest.raises(KeyError):
        cache["missing"]


def test_getitem_updates_order():
    cache = _cache(2, ("a", 1), ("b", 2))
    assert cache["a"] == 1
    cache.put("c", 3)
    assert cache.keys() == ["c", "a"]


def test_zero_capacity_holds_latest_only():
    assert _cache(0, ("a", 1), ("b", 2)).keys() == ["b"]


def test_concurrency_values_stay_consistent():
    cache = Cache(100)
    errors = []
    operations = 100

    def worker(worker_id):
        for j in range(operations):
            key = worker_id * operations + j
            cache.put(key, key * 2)
            value = cache.get(key, None)
            if value is not None and value != key * 2:
                errors.append((key, value))
            cache.peek(key)
            cache.contains(key)
            if j % 10 == 0:
                cache.remove(key)

    def meta():
        for i in range(operations):
            len(cache)
            cache.keys()
            if i % 20 == 0:
                cache.clear()

    _parallel(meta, *(lambda i=i: worker(i) for i in range(10)))
    assert errors == []
    assert len(cache) <= cache.capacity


def test_concurrent_put_respects_capacity():
    cache = Cache(50)

    def worker(worker_id):
        for j in range(50):
            cache.put(worker_id * 100 + j, worker_id)

    _parallel(*(lambda i=i: worker(i) for i in range(20)))
    assert len(cache) == 50
    assert len(set(cache.keys())) == 50


def test_concurrent_get():
    cache = _cache(100, *((i, i * 10) for i in range(100)))
    errors = []

    def reader():
        errors.extend((j, cache.get(j)) for j in range(100) if cache.get(j) != j * 10)

    _parallel(*([reader] * 20))
    assert errors == []
    assert len(cache) == 100