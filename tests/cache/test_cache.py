from vtag.cache import InMemoryCache, NoOpCache


def test_in_memory_cache_stores_immutable_copy():
    cache = InMemoryCache()
    names = ["name", "age"]
    cache.set(("tests.Student", "", ("list",)), names)
    names.append("mutated")

    assert cache.get(("tests.Student", "", ("list",))) == ("name", "age")
    assert cache.get(("tests.Student", "", ("detail",))) is None
    assert len(cache) == 1


def test_in_memory_cache_clear():
    cache = InMemoryCache()
    cache.set("key", ["a"])
    cache.clear()
    assert cache.get("key") is None
    assert len(cache) == 0


def test_noop_cache_never_stores():
    cache = NoOpCache()
    cache.set("key", ["a"])
    assert cache.get("key") is None
    assert len(cache) == 0
