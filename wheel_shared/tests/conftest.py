import random

import pytest
import fakeredis


@pytest.fixture(scope="session")
def redis_client():
    return fakeredis.FakeStrictRedis(decode_responses=True)


@pytest.fixture(autouse=True)
def _patch_shared_redis(monkeypatch, redis_client):
    # Route every store that falls back to the shared client to the fake one
    import wheel_shared.redis_client as rc

    monkeypatch.setattr(rc, "get_redis", lambda: redis_client, raising=True)
    # Clear DB before each test for isolation
    redis_client.flushdb()
    yield
    redis_client.flushdb()


@pytest.fixture
def rng():
    return random.Random(1234)


class BrokenRedis:
    """Stand-in for an unreachable server."""

    def get(self, key):
        raise ConnectionError("redis is down")

    def set(self, key, value):
        raise ConnectionError("redis is down")


@pytest.fixture
def broken_redis():
    return BrokenRedis()
