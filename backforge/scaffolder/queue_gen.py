"""Bull job queues, workers and the queue dashboard."""

from __future__ import annotations

from backforge.config import ProjectConfig

from .base import FileGenerator


class QueueGenerator(FileGenerator):
    """Writes ``src/queue/*`` and the ``/api/queue`` routes.

    Gated on both flags: the queues connect through the Redis settings in
    ``src/config/env.ts``, which exist only when Redis is enabled.
    """

    name = "queue"
    _FILES = {
        "queue/config.ts.j2": "src/queue/config.ts",
        "queue/workers.ts.j2": "src/queue/workers.ts",
        "queue/service.ts.j2": "src/queue/service.ts",
        "queue/dashboard.ts.j2": "src/queue/dashboard.ts",
        "queue/queue.routes.ts.j2": "src/routes/queue.routes.ts",
    }

    def enabled(self, config: ProjectConfig) -> bool:
        return config.include_redis and config.include_queue
