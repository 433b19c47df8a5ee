import logging

from wheel_shared import redis_client
from wheel_shared.config import WheelConfig
from wheel_shared.constants import CONFIG_KEY

logger = logging.getLogger(__name__)


def load_config(key: str = CONFIG_KEY, client=None) -> WheelConfig:
    """Return the saved wheel configuration, or defaults when missing/malformed."""
    r = client if client is not None else redis_client.get_redis()
    try:
        raw = r.get(key)
    except Exception as e:
        logger.warning("Failed to read wheel config %s: %s", key, e)
        return WheelConfig()
    if not raw:
        return WheelConfig()
    try:
        return WheelConfig.model_validate_json(raw)
    except Exception as e:
        logger.warning("Ignoring malformed wheel config at %s: %s", key, e)
        return WheelConfig()


def save_config(config: WheelConfig, key: str = CONFIG_KEY, client=None) -> bool:
    r = client if client is not None else redis_client.get_redis()
    try:
        r.set(key, config.to_json())
    except Exception as e:
        logger.warning("Failed to save wheel config %s: %s", key, e)
        return False
    return True

