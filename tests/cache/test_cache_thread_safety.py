import threading

from vtag.cache import InMemoryCache


def test_in_memory_cache_thread_safety():
    cache = InMemoryCache()
    errors: list[Exception] = []
    barrier = threading.Barrier(4)

    def worker(offset: int) -> None:
        try:
            barrier.wait()
            for idx in range(200):
                key = ("tests.Record", "", (f"label-{offset}-{idx}",))
                cache.set(key, [f"name-{idx}"])
                assert cache.get(key) == (f"name-{idx}",)
        except Exception as exc:  # pragma: no cover - failure path
            errors.append(exc)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert len(cache) == 800
