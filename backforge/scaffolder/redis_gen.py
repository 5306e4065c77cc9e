"""Redis client and cache service."""

from __future__ import annotations

from backforge.config import ProjectConfig

from .base import FileGenerator


class RedisGenerator(FileGenerator):
    name = "redis"
    _FILES = {
        "redis/redis.ts.j2": "src/config/redis.ts",
        "redis/cache.service.ts.j2": "src/services/cache.service.ts",
    }

    def enabled(self, config: ProjectConfig) -> bool:
        return config.include_redis
