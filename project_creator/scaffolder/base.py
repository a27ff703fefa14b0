"""Common plumbing for the external project generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from ..config import Config
from ..models import Database


class GeneratorError(Exception):
    """Raised when an external generator step fails.

    Attributes:
        step: Short description of the failing step (a command line or URL).
        returncode: Process exit status or HTTP status code, if known.
        detail: Error output captured from the failing step.
    """

    def __init__(self, step: str, message: str, returncode: int | None = None, detail: str = "") -> None:
        self.step = step
        self.returncode = returncode
        self.detail = detail
        text = f"{step}: {message}"
        if returncode is not None:
            text += f" (exit status {returncode})"
        if detail:
            text += f"\n{detail}"
        super().__init__(text)


class ProjectGenerator(ABC):
    """Base class for a generator that produces one project directory."""

    def __init__(self, config: Config) -> None:
        self.config = config

    @property
    @abstractmethod
    def project_dir(self) -> Path:
        """Directory the generator is expected to create."""

    @abstractmethod
    async def generate(self, database: Database) -> Path:
        """Produce the project and return its root directory."""

    def require_project_dir(self) -> Path:
        """Return ``project_dir`` or raise if the generator did not create it."""
        if not self.project_dir.is_dir():
            raise GeneratorError(
                str(self.project_dir), "expected project directory was not created"
            )
        return self.project_dir
