import io

import pytest

from lrukit.comparison import compare_performance, main, show_implementation
from lrukit.lru import Cache
from lrukit.mapcache import SyncMapCache


@pytest.mark.parametrize("factory", [Cache, SyncMapCache])
def test_show_implementation(factory):
    cache = factory(3)
    out = io.StringIO()
    show_implementation("My title", cache, out)
    assert cache.keys() == ["date", "apple", "cherry"]
    lines = out.getvalue().splitlines()
    assert lines == [
        "My title",
        "   Keys: [cherry banana apple]",
        "   Get apple: red",
        "   Keys after accessing apple: [apple cherry banana]",
        "   Keys after adding date: [date apple cherry]",
    ]


@pytest.mark.parametrize(
    "workers, operations, expected",
    [(0, 10, (0, 0)), (10, 300, (100, 100))],
)
def test_compare_performance_sizes(workers, operations, expected):
    out = io.StringIO()
    assert compare_performance(out, workers=workers, operations=operations) == expected
    text = out.getvalue()
    assert f"Final cache sizes - Cache: {expected[0]}, SyncMapCache: {expected[1]}" in text
    assert "% faster" in text


def test_compare_performance_small_workload_respects_capacity():
    lock_size, map_size = compare_performance(io.StringIO(), workers=4, operations=60)
    assert 0 < lock_size == map_size <= 100


def test_main_output(capsys):
    assert main(["--workers", "5", "--operations", "200"]) == 0
    text = capsys.readouterr().out
    assert text.startswith("=== LRU Cache Implementation Comparison ===")
    for heading in (
        "1. Single-lock Implementation:",
        "2. SyncMapCache Implementation:",
        "3. Performance Comparison (Concurrent Access):",
    ):
        assert heading in text


def test_main_rejects_bad_argument():
    with pytest.raises(SystemExit):
        main(["--workers", "many"])