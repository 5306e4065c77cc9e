"""File upload vertical (local disk or S3)."""

from __future__ import annotations

from backforge.config import ProjectConfig

from .base import FileGenerator


class FileUploadGenerator(FileGenerator):
    """Upload service, controller and routes.

    The service body depends on ``file_storage``; the exported interface
    (``upload``, ``fileUploadService``, ``UploadedFile``) is the same for
    both backends, so the controller and routes are storage-agnostic.
    """

    name = "file_upload"
    _FILES = {
        "upload/fileUpload.service.ts.j2": "src/services/fileUpload.service.ts",
        "upload/fileUpload.controller.ts.j2": "src/controllers/fileUpload.controller.ts",
        "upload/fileUpload.routes.ts.j2": "src/routes/fileUpload.routes.ts",
        "upload/gitkeep.j2": "uploads/.gitkeep",
    }

    def enabled(self, config: ProjectConfig) -> bool:
        return config.include_file_upload
