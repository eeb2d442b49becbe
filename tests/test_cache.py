# Tests for freemodule/cache.py

import threading

from rings import ZZ, GF
from freemodule import FreeModule, ParentCache, MODULE_CACHE


class TestParentCache:
    def test_factory_runs_once(self):
        cache = ParentCache()
        calls = []

        def factory():
            calls.append(1)
            return object()

        first = cache.get_or_create("k", factory)
        second = cache.get_or_create("k", factory)
        assert first is second
        assert len(calls) == 1

    def test_clear(self):
        cache = ParentCache()
        a = cache.get_or_create(1, object)
        cache.clear()
        assert len(cache) == 0
        assert 1 not in cache
        assert cache.get_or_create(1, object) is not a

    def test_concurrent_module_requests_share_instance(self):
        """Racing requests for the same (ring, rank) yield one descriptor."""
        cache = ParentCache("race")
        n_threads = 16
        barrier = threading.Barrier(n_threads)
        results = [None] * n_threads

        def worker(k):
            barrier.wait()
            results[k] = FreeModule(GF(13), 5, cache=cache)

        threads = [threading.Thread(target=worker, args=(k,)) for k in range(n_threads)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert all(r is results[0] for r in results)
        assert len(cache) == 1

    def test_default_cache_holds_modules(self):
        M = FreeModule(ZZ, 7)
        assert (ZZ, 7) in MODULE_CACHE
        assert FreeModule(ZZ, 7) is M

    def test_uncached_modules_are_not_registered(self):
        cache = ParentCache()
        FreeModule(ZZ, 2, cached=False, cache=cache)
        assert len(cache) == 0
