"""JWT authentication vertical."""

from __future__ import annotations

from backforge.config import ProjectConfig

from .base import FileGenerator


class AuthGenerator(FileGenerator):
    """Registration, login, email verification and password reset.

    Every file here is imported only from other auth files, from
    ``src/routes/index.ts`` behind the auth route mount, or from
    auth-gated application files (guards, user factory).
    """

    name = "auth"
    _FILES = {
        "auth/auth.controller.ts.j2": "src/controllers/auth.controller.ts",
        "auth/auth.service.ts.j2": "src/services/auth.service.ts",
        "auth/email.service.ts.j2": "src/services/email.service.ts",
        "auth/user.repository.ts.j2": "src/repositories/user.repository.ts",
        "auth/auth.routes.ts.j2": "src/routes/auth.routes.ts",
        "auth/auth.validator.ts.j2": "src/validators/auth.validator.ts",
        "auth/auth.middleware.ts.j2": "src/middlewares/auth.ts",
    }

    def enabled(self, config: ProjectConfig) -> bool:
        return config.include_auth
