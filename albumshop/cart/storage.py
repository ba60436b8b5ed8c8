"""Key-value storage backends for the cart."""
from typing import Dict, Optional, Protocol

from albumshop.errors import PersistenceError
from albumshop.logging import get_logger

logger = get_logger(__name__)


class KeyValueStorage(Protocol):
    """String storage addressed by key."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class InMemoryStorage:
    """Dict-backed storage. Lives as long as the object."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class RedisStorage:
    """Upstash Redis storage. Client errors surface as PersistenceError."""

    def __init__(self, redis=None) -> None:
        self._redis = redis  # Lazy initialization

    @property
    def redis(self):
        """Get Redis client (lazy initialization)."""
        if self._redis is None:
            from albumshop.db import get_redis
            try:
                self._redis = get_redis()
            except ValueError as e:
                raise PersistenceError(f"Redis not available: {e}") from e
        return self._redis

    def get(self, key: str) -> Optional[str]:
        try:
            value = self.redis.get(key)
        except PersistenceError:
            raise
        except Exception as e:
            logger.error(f"Failed to read {key} from Redis: {e}")
            raise PersistenceError(f"Cart storage unavailable: {e}") from e
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        try:
            self.redis.set(key, value)
        except PersistenceError:
            raise
        except Exception as e:
            logger.error(f"Failed to write {key} to Redis: {e}")
            raise PersistenceError(f"Cart storage unavailable: {e}") from e
