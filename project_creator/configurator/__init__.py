"""Project Configurator -- rewrites a generated project's files for a database.

Quick usage::

    from project_creator.configurator import configure
    from project_creator.models import ProjectSelection

    selection = ProjectSelection(framework="springboot", database="mysql")
    report = configure(selection, "./spring-boot-project")
"""

from __future__ import annotations

from pathlib import Path

from ..config import Config
from ..models import ConfigureReport, Framework, ProjectSelection
from .nestjs import configure_nestjs
from .spring_boot import configure_spring_boot
from .templates import TemplateRenderer, TemplateTableError

_CONFIGURATORS = {
    Framework.SPRINGBOOT: configure_spring_boot,
    Framework.NESTJS: configure_nestjs,
}


def configure(
    selection: ProjectSelection,
    project_path: str | Path,
    config: Config | None = None,
) -> ConfigureReport:
    """Run the configurator matching ``selection.framework``."""
    configurator = _CONFIGURATORS[selection.framework]
    return configurator(project_path, selection.database, config)


__all__ = [
    "TemplateRenderer",
    "TemplateTableError",
    "configure",
    "configure_nestjs",
    "configure_spring_boot",
]
