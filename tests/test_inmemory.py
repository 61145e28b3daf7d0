from flagprov.inmemory import InMemoryCache


def test_in_memory_cache_operations():
    cache = InMemoryCache()
    assert cache.add("key1", 1) is False
    assert cache.get("key1") == 1
    assert cache.remove("key1") is True
    assert cache.get("key1") is None


def test_in_memory_cache_purge():
    cache = InMemoryCache()
    cache.add("key1", 1)
    cache.add("key2", 2)
    cache.purge()
    assert cache.get("key1") is None
    assert cache.get("key2") is None
    assert len(cache) == 0


def test_add_existing_key_reports_replacement():
    cache = InMemoryCache()
    cache.add("key1", 1)
    assert cache.add("key1", 2) is True
    assert cache.get("key1") == 2


def test_remove_missing_key():
    cache = InMemoryCache()
    assert cache.remove("absent") is False


def test_no_eviction():
    cache = InMemoryCache()
    for n in range(50):
        cache.add(f"k{n}", n)
    assert len(cache) == 50
    assert cache.get("k0") == 0
    assert "k49" in cache