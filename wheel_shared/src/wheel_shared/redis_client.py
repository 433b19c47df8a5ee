import os
import redis
from functools import lru_cache


def _timeout() -> float:
    return float(os.environ.get("REDIS_TIMEOUT", "0.5"))


@lru_cache(maxsize=1)
def get_redis() -> redis.Redis:
    """Return the shared client backing wheel persistence.

    REDIS_URL wins when set; otherwise REDIS_HOST/REDIS_PORT/REDIS_DB. Socket
    timeouts are short: persistence is best-effort and a missing server must
    not stall a spin.
    """
    url = os.environ.get("REDIS_URL")
    if url:
        return redis.Redis.from_url(
            url,
            decode_responses=True,
            socket_timeout=_timeout(),
            socket_connect_timeout=_timeout(),
        )
    host = os.environ.get("REDIS_HOST", "localhost")
    port = int(os.environ.get("REDIS_PORT", "6379"))
    db = int(os.environ.get("REDIS_DB", "0"))
    return redis.Redis(
        host=host,
        port=port,
        db=db,
        decode_responses=True,
        socket_timeout=_timeout(),
        socket_connect_timeout=_timeout(),
    )
