"""Prisma schema generation."""

from __future__ import annotations

from .base import FileGenerator


class PrismaGenerator(FileGenerator):
    """Writes ``prisma/schema.prisma`` for the selected database provider."""

    name = "prisma"
    _FILES = {"prisma/schema.prisma.j2": "prisma/schema.prisma"}
