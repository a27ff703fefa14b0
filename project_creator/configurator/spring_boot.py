"""Wires a generated Spring Boot project to the selected database.

Two files are touched:

* ``pom.xml`` -- the driver dependency block is spliced in right before the
  first ``</dependencies>`` marker. Everything else is left byte-for-byte
  untouched.
* ``src/main/resources/application.yml`` -- replaced wholesale with the
  database config template.

A project without ``pom.xml`` is left completely untouched.
"""

from __future__ import annotations

from pathlib import Path

from ..config import Config
from ..models import ConfigureOutcome, ConfigureReport, Database, Framework, ProjectSelection
from .templates import SPRING_BOOT_CONFIGS, SPRING_BOOT_DEPENDENCIES, TemplateRenderer

DEPENDENCIES_MARKER = "</dependencies>"

POM_FILE = "pom.xml"
APPLICATION_CONFIG_FILE = Path("src") / "main" / "resources" / "application.yml"


def update_pom(project_path: Path, database: Database, renderer: TemplateRenderer) -> ConfigureOutcome:
    """Insert the dependency block for *database* into ``pom.xml``.

    Returns ``SKIPPED_FILE_ABSENT`` when there is no manifest and
    ``SKIPPED_MARKER_ABSENT`` when it has no closing dependencies marker; the
    file is not written in either case.
    """
    pom_path = project_path / POM_FILE
    if not pom_path.is_file():
        return ConfigureOutcome.SKIPPED_FILE_ABSENT

    content = pom_path.read_bytes().decode("utf-8")
    index = content.find(DEPENDENCIES_MARKER)
    if index == -1:
        return ConfigureOutcome.SKIPPED_MARKER_ABSENT

    snippet = renderer.render_snippet(SPRING_BOOT_DEPENDENCIES, database)
    updated = content[:index] + snippet + content[index:]
    pom_path.write_bytes(updated.encode("utf-8"))
    return ConfigureOutcome.APPLIED


def write_application_config(
    project_path: Path, database: Database, renderer: TemplateRenderer
) -> ConfigureOutcome:
    """Overwrite ``application.yml`` with the config template for *database*."""
    config_path = project_path / APPLICATION_CONFIG_FILE
    config_path.parent.mkdir(parents=True, exist_ok=True)
    content = renderer.render_snippet(SPRING_BOOT_CONFIGS, database)
    config_path.write_bytes(content.encode("utf-8"))
    return ConfigureOutcome.APPLIED


def configure_spring_boot(
    project_path: str | Path,
    database: Database,
    config: Config | None = None,
) -> ConfigureReport:
    """Configure the Spring Boot project at *project_path* for *database*."""
    project_path = Path(project_path)
    database = Database(database)
    renderer = TemplateRenderer((config or Config()).template_context())

    report = ConfigureReport(
        selection=ProjectSelection(framework=Framework.SPRINGBOOT, database=database),
        project_path=project_path,
    )
    pom_outcome = update_pom(project_path, database, renderer)
    report.record(project_path / POM_FILE, pom_outcome)

    # Without a manifest the whole operation is a no-op.
    if pom_outcome is ConfigureOutcome.SKIPPED_FILE_ABSENT:
        config_outcome = ConfigureOutcome.SKIPPED_FILE_ABSENT
    else:
        config_outcome = write_application_config(project_path, database, renderer)
    report.record(project_path / APPLICATION_CONFIG_FILE, config_outcome)
    return report
