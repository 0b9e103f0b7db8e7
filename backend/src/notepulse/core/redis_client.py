"""Redis client for the revoked-token denylist."""

import logging
from typing import Optional

import redis.asyncio as redis

from ..config import Settings, get_settings

logger = logging.getLogger(__name__)

REVOKED_PREFIX = "revoked:"


class RedisClient:
    """Thin async Redis wrapper.

    Every call degrades to a falsy result when Redis is not connected or
    errors out, so auth keeps working (without revocation) during an outage.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.redis: Optional[redis.Redis] = None

    async def connect(self) -> None:
        """Connect to Redis."""
        try:
            self.redis = redis.from_url(
                self.settings.redis_url,
                max_connections=self.settings.redis_max_connections,
                decode_responses=True,
            )
            # Test connection
            await self.redis.ping()
            logger.info("Connected to Redis successfully")
        except Exception as e:
            logger.error(f"Failed to connect to Redis: {e}")
            self.redis = None
            raise

    async def disconnect(self) -> None:
        """Disconnect from Redis."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            logger.info("Disconnected from Redis")

    @property
    def connected(self) -> bool:
        return self.redis is not None

    async def set(self, key: str, value: str, expire: Optional[int] = None) -> bool:
        """Set value in Redis with optional expiration."""
        if not self.redis:
            return False
        try:
            if expire:
                return bool(await self.redis.setex(key, expire, value))
            return bool(await self.redis.set(key, value))
        except Exception as e:
            logger.error(f"Redis SET error for key {key}: {e}")
            return False

    async def exists(self, key: str) -> bool:
        """Check if key exists in Redis."""
        if not self.redis:
            return False
        try:
            return await self.redis.exists(key) > 0
        except Exception as e:
            logger.error(f"Redis EXISTS error for key {key}: {e}")
            return False

    async def revoke_token(self, token_jti: str, expire: int) -> bool:
        """Denylist a token id until the token would have expired anyway."""
        if expire <= 0:
            return False
        return await self.set(f"{REVOKED_PREFIX}{token_jti}", "1", expire)

    async def is_token_revoked(self, token_jti: str) -> bool:
        """Check the denylist."""
        return await self.exists(f"{REVOKED_PREFIX}{token_jti}")


# Singleton instance
_redis_client: Optional[RedisClient] = None


def get_redis_client() -> RedisClient:
    """Get Redis client singleton."""
    global _redis_client
    if _redis_client is None:
        _redis_client = RedisClient()
    return _redis_client
