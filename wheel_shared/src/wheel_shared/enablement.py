import json
import logging
from typing import Any, Dict, Optional

from . import redis_client

logger = logging.getLogger(__name__)


class EnablementStore:
    """Per-item inclusion flags kept under a caller-supplied key.

    The value is a JSON object of label -> bool. Reads and writes are
    best-effort: storage errors and malformed payloads never reach the caller.
    """

    def __init__(self, client: Any = None):
        self._client = client

    def _redis(self):
        if self._client is not None:
            return self._client
        return redis_client.get_redis()

    def load(self, key: str) -> Optional[Dict[str, bool]]:
        try:
            raw = self._redis().get(key)
        except Exception as e:
            logger.warning("Failed to read enablement map %s: %s", key, e)
            return None
        if not raw:
            return None
        try:
            data = json.loads(raw)
        except Exception:
            logger.warning("Ignoring malformed enablement map at %s", key)
            return None
        if not isinstance(data, dict):
            return None
        return {k: v for k, v in data.items() if isinstance(v, bool)}

    def save(self, key: str, mapping: Dict[str, bool]) -> bool:
        try:
            self._redis().set(key, json.dumps(mapping, ensure_ascii=False))
        except Exception as e:
            logger.warning("Failed to save enablement map %s: %s", key, e)
            return False
        return True
