"""NestJS generator backed by the Nest CLI and npm."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from ..models import Database
from ..utils import console, run_command
from .base import GeneratorError, ProjectGenerator

DRIVER_PACKAGES: Mapping[Database, tuple[str, ...]] = MappingProxyType({
    Database.MYSQL: ("@nestjs/typeorm", "typeorm", "mysql2"),
    Database.MONGODB: ("@nestjs/mongoose", "mongoose"),
})


class NestJsGenerator(ProjectGenerator):
    """Runs ``nest new`` and installs the driver packages for the database."""

    @property
    def project_dir(self) -> Path:
        return self.config.nestjs_path

    def new_project_command(self) -> list[str]:
        return [
            "npx",
            "@nestjs/cli",
            "new",
            self.config.generators.nestjs_dir,
            "--package-manager",
            "npm",
        ]

    @staticmethod
    def install_command(database: Database) -> list[str]:
        return ["npm", "install", *DRIVER_PACKAGES[Database(database)]]

    async def generate(self, database: Database) -> Path:
        self.config.output_dir.mkdir(parents=True, exist_ok=True)

        await self._run(self.new_project_command(), cwd=self.config.output_dir)
        project_dir = self.require_project_dir()

        await self._run(self.install_command(database), cwd=project_dir)
        return project_dir

    async def _run(self, cmd: list[str], cwd: Path) -> None:
        console.print(f"  [dim]$ {' '.join(cmd)}[/dim]")
        returncode, _stdout, stderr = await run_command(
            cmd,
            cwd=cwd,
            timeout=self.config.generators.command_timeout,
            capture=False,
        )
        if returncode != 0:
            raise GeneratorError(" ".join(cmd), "command failed", returncode=returncode, detail=stderr)
