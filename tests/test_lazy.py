"""Test the lazily-initialized value primitive."""

import threading
import time

from mpvex_editor.utils.lazy import Lazy


def test_factory_runs_on_first_access_only():
    """Test that the factory is deferred and memoized."""
    calls = []

    def factory():
        calls.append(1)
        return {"value": 42}

    lazy = Lazy(factory)
    assert not lazy.initialized
    assert calls == []

    first = lazy.get()
    second = lazy()
    assert first is second
    assert first == {"value": 42}
    assert lazy.initialized
    assert len(calls) == 1


def test_concurrent_first_access_constructs_once():
    """Test that racing threads converge on a single construction."""
    calls = []
    calls_lock = threading.Lock()

    def slow_factory():
        with calls_lock:
            calls.append(1)
        time.sleep(0.05)
        return object()

    lazy = Lazy(slow_factory)
    barrier = threading.Barrier(16)
    results = []
    results_lock = threading.Lock()

    def worker():
        barrier.wait()
        value = lazy.get()
        with results_lock:
            results.append(value)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(calls) == 1
    assert len(results) == 16
    assert all(result is results[0] for result in results)
