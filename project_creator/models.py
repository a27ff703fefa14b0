"""Selection and result models shared by the pipeline and the configurator."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Framework(str, Enum):
    """Backend scaffold offered by the tool."""

    SPRINGBOOT = "springboot"
    NESTJS = "nestjs"


class Database(str, Enum):
    """Persistence backend the generated project is wired to."""

    MYSQL = "mysql"
    MONGODB = "mongodb"


class ProjectSelection(BaseModel):
    """The user's choices for a single run."""

    model_config = ConfigDict(frozen=True)

    framework: Framework
    database: Database


class ConfigureOutcome(str, Enum):
    """What happened to one file during configuration."""

    APPLIED = "applied"
    SKIPPED_FILE_ABSENT = "skipped: file absent"
    SKIPPED_MARKER_ABSENT = "skipped: marker absent"


class FileChange(BaseModel):
    """Outcome recorded for one file of the generated project."""

    path: Path
    outcome: ConfigureOutcome


class ConfigureReport(BaseModel):
    """Per-file outcomes of configuring one generated project."""

    selection: ProjectSelection
    project_path: Path
    changes: list[FileChange] = Field(default_factory=list)

    def record(self, path: Path, outcome: ConfigureOutcome) -> None:
        self.changes.append(FileChange(path=path, outcome=outcome))

    @property
    def applied(self) -> bool:
        """``True`` when every touched file was actually rewritten."""
        return bool(self.changes) and all(
            change.outcome is ConfigureOutcome.APPLIED for change in self.changes
        )

    def outcome_for(self, name: str) -> ConfigureOutcome | None:
        """Return the outcome recorded for the file whose name is *name*."""
        for change in self.changes:
            if change.path.name == name:
                return change.outcome
        return None
