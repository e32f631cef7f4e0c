"""Tests for the singleton registry."""

import threading
from unittest.mock import Mock

from patternkit.creational.singleton import SharedState, SingletonRegistry, get_singleton


class TestSingleton:
    """Test singleton acquisition."""

    def test_same_key_returns_same_reference(self):
        first = get_singleton("config")
        second = get_singleton("config")

        assert first is second
        assert isinstance(first, SharedState)

    def test_mutation_visible_through_every_reference(self):
        first = get_singleton("config")
        second = get_singleton("config")

        first.set_data({"debug": True})

        assert second.get_data() == {"debug": True}

    def test_different_keys_are_distinct(self):
        assert get_singleton("a") is not get_singleton("b")

    def test_factory_only_called_on_first_creation(self):
        factory = Mock(side_effect=lambda: object())

        first = get_singleton("custom", factory)
        second = get_singleton("custom", factory)

        assert first is second
        factory.assert_called_once_with()

    def test_registry_is_process_wide(self):
        assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()

    def test_reset_single_key(self):
        registry = SingletonRegistry.get_instance()
        before = get_singleton("a")
        kept = get_singleton("b")

        registry.reset("a")

        assert not registry.contains("a")
        assert get_singleton("a") is not before
        assert get_singleton("b") is kept

    def test_factory_may_acquire_other_singleton(self):
        inner = get_singleton("inner")
        outer = get_singleton("outer", lambda: ("wrapper", get_singleton("inner")))

        assert outer[1] is inner

    def test_concurrent_first_access_creates_one_instance(self):
        created = []
        barrier = threading.Barrier(8)
        results = []

        def factory():
            created.append(1)
            return object()

        def worker():
            barrier.wait()
            results.append(get_singleton("contended", factory))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(created) == 1
        assert all(result is results[0] for result in results)
