"""Wires a generated NestJS project to the selected database.

The module snippet is appended to ``src/app.module.ts`` as plain text; the
file is neither parsed nor checked for well-formedness afterwards.
"""

from __future__ import annotations

from pathlib import Path

from ..config import Config
from ..models import ConfigureOutcome, ConfigureReport, Database, Framework, ProjectSelection
from .templates import NESTJS_MODULES, TemplateRenderer

APP_MODULE_FILE = Path("src") / "app.module.ts"


def append_module_config(
    project_path: Path, database: Database, renderer: TemplateRenderer
) -> ConfigureOutcome:
    module_path = project_path / APP_MODULE_FILE
    if not module_path.is_file():
        return ConfigureOutcome.SKIPPED_FILE_ABSENT

    snippet = renderer.render_snippet(NESTJS_MODULES, database)
    with module_path.open("ab") as fh:
        fh.write(snippet.encode("utf-8"))
    return ConfigureOutcome.APPLIED


def configure_nestjs(
    project_path: str | Path,
    database: Database,
    config: Config | None = None,
) -> ConfigureReport:
    """Configure the NestJS project at *project_path* for *database*."""
    project_path = Path(project_path)
    database = Database(database)
    renderer = TemplateRenderer((config or Config()).template_context())

    report = ConfigureReport(
        selection=ProjectSelection(framework=Framework.NESTJS, database=database),
        project_path=project_path,
    )
    report.record(
        project_path / APP_MODULE_FILE,
        append_module_config(project_path, database, renderer),
    )
    return report
