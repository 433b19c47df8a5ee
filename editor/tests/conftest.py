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
def png_file(tmp_path):
    path = tmp_path / "bg.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nfake")
    return path
