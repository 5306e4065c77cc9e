"""Project-root configuration files.

``package.json``, ``tsconfig.json`` and ``.prettierrc`` are JSON documents
built as Python data and serialised; the remaining files are rendered from
templates under ``templates/root/``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from backforge.config import ProjectConfig

from .base import FileGenerator
from .fragments import package_json

TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "ES2022",
        "module": "ES2022",
        "lib": ["ES2022"],
        "moduleResolution": "node",
        "outDir": "./dist",
        "rootDir": "./src",
        "strict": True,
        "esModuleInterop": True,
        "skipLibCheck": True,
        "forceConsistentCasingInFileNames": True,
        "resolveJsonModule": True,
        "experimentalDecorators": True,
        "declaration": True,
        "declarationMap": True,
        "sourceMap": True,
        "baseUrl": ".",
        "paths": {"@/*": ["src/*"]},
    },
    "include": ["src/**/*"],
    "exclude": ["node_modules", "dist", "tests"],
}

PRETTIER_CONFIG: dict[str, Any] = {
    "semi": True,
    "trailingComma": "es5",
    "singleQuote": True,
    "printWidth": 80,
    "tabWidth": 2,
    "useTabs": False,
}


class RootFilesGenerator(FileGenerator):
    """Writes package.json, compiler/linter/test configs and the README."""

    name = "root"
    _FILES = {
        "root/env.example.j2": ".env.example",
        "root/gitignore.j2": ".gitignore",
        "root/eslint.config.js.j2": "eslint.config.js",
        "root/jest.config.js.j2": "jest.config.js",
        "root/cursorrules.j2": ".cursorrules",
        "root/README.md.j2": "README.md",
    }

    async def generate(self, root: Path, config: ProjectConfig) -> list[Path]:
        written = [
            await self.renderer.write_json(root / "package.json", package_json(config)),
            await self.renderer.write_json(root / "tsconfig.json", TSCONFIG),
            await self.renderer.write_json(root / ".prettierrc", PRETTIER_CONFIG),
        ]
        written.extend(await super().generate(root, config))
        return written
