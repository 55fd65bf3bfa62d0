import types

import pytest

from torrentclaw_mcp.core import cache as cache_mod
from torrentclaw_mcp.core.cache import ResponseCache


@pytest.fixture
def clock(monkeypatch):
    now = {"t": 1000.0}
    monkeypatch.setattr(cache_mod, "time", types.SimpleNamespace(monotonic=lambda: now["t"]))
    return now


def test_get_missing_key_returns_none():
    c = ResponseCache()
    assert c.get("nope") is None
    assert c.misses == 1


def test_set_then_get(clock):
    c = ResponseCache(ttl=60)
    c.set("a", {"x": 1})
    assert c.get("a") == {"x": 1}
    assert c.hits == 1


def test_expired_entry_is_removed_on_read(clock):
    c = ResponseCache(ttl=60)
    c.set("a", 1)
    assert c.size == 1

    clock["t"] += 60
    assert c.get("a") == 1  # exactly at expiry is still live

    clock["t"] += 0.001
    assert c.get("a") is None
    assert c.size == 0


def test_set_refreshes_ttl(clock):
    c = ResponseCache(ttl=10)
    c.set("a", 1)
    clock["t"] += 8
    c.set("a", 2)
    clock["t"] += 8
    assert c.get("a") == 2


def test_size_never_exceeds_max(clock):
    c = ResponseCache(max_size=3)
    for i in range(10):
        c.set(f"k{i}", i)
        assert c.size <= 3
    assert c.get("k9") == 9
    assert c.get("k6") is None


def test_evicts_least_recently_used(clock):
    c = ResponseCache(max_size=3)
    c.set("a", 1)
    c.set("b", 2)
    c.set("c", 3)

    # reading "a" makes "b" the coldest entry
    assert c.get("a") == 1
    c.set("d", 4)

    assert c.get("b") is None
    assert c.get("a") == 1
    assert c.get("c") == 3
    assert c.get("d") == 4


def test_set_existing_key_counts_as_use(clock):
    c = ResponseCache(max_size=2)
    c.set("a", 1)
    c.set("b", 2)
    c.set("a", 10)
    c.set("c", 3)

    assert c.get("b") is None
    assert c.get("a") == 10
    assert c.size == 2


def test_hot_key_survives_repeated_reads(clock):
    c = ResponseCache(max_size=3)
    c.set("hot", "h")
    for i in range(20):
        assert c.get("hot") == "h"
        c.set(f"cold{i}", i)
    assert c.get("hot") == "h"


def test_zero_capacity_never_stores():
    c = ResponseCache(max_size=0)
    c.set("a", 1)
    c.set("b", 2)
    assert c.size == 0
    assert c.get("a") is None


def test_clear_returns_count():
    c = ResponseCache()
    c.set("a", 1)
    c.set("b", 2)
    assert c.clear() == 2
    assert c.size == 0
    assert c.get("a") is None


def test_info(clock):
    c = ResponseCache(ttl=300, max_size=200)
    c.set("a", 1)
    c.get("a")
    c.get("b")
    assert c.info() == {"hits": 1, "misses": 1, "size": 1, "maxSize": 200, "ttlSec": 300}
