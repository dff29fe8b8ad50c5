import time

import pytest

from pokedex.cache import Cache

KEY = "pokemon-25"
VALUE = b'{"name": "pikachu", "id": 25}'


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_basic_operations():
    with Cache(60) as cache:
        cache.add(KEY, VALUE)
        assert cache.get(KEY) == VALUE
        assert KEY in cache


def test_missing_key_returns_none():
    with Cache(60) as cache:
        assert cache.get("absent") is None


def test_entries_expire():
    with Cache(0.2) as cache:
        cache.add(KEY, VALUE)
        time.sleep(0.45)
        assert cache.get(KEY) is None


def test_add_replaces_value():
    with Cache(60) as cache:
        cache.add(KEY, b"first")
        cache.add(KEY, b"second")
        assert cache.get(KEY) == b"second"
        assert len(cache) == 1


def test_reap_removes_only_expired(capsys):
    clock = FakeClock()
    with Cache(60, clock=clock) as cache:
        cache.add("old", b"1")
        clock.now += 30
        cache.add("new", b"2")
        clock.now += 31
        assert cache.reap() == 1
        assert cache.get("old") is None
        assert cache.get("new") == b"2"
    assert "Reaped 1 expired cache entries" in capsys.readouterr().out


def test_reap_keeps_entry_exactly_at_interval(capsys):
    clock = FakeClock()
    with Cache(60, clock=clock) as cache:
        cache.add(KEY, VALUE)
        clock.now += 60
        assert cache.reap() == 0
        assert cache.get(KEY) == VALUE
    assert capsys.readouterr().out == ""


def test_non_positive_interval_rejected():
    with pytest.raises(ValueError):
        Cache(0)