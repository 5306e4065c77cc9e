"""Health checks, the error taxonomy and multi-channel logging."""

from __future__ import annotations

from .base import FileGenerator


class ObservabilityGenerator(FileGenerator):
    """Writes the health controller, error handler and logger.

    Each of these files is written only here, so there is a single source
    for the symbols the rest of the tree imports from them (``AppError``
    and its subclasses, ``logger``, ``loggers``, ``accessLog``).
    """

    name = "observability"
    _FILES = {
        "observability/health.controller.ts.j2": "src/controllers/health.controller.ts",
        "observability/errorHandler.ts.j2": "src/middlewares/errorHandler.ts",
        "observability/logger.ts.j2": "src/utils/logger.ts",
    }
