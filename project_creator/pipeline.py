"""Project Creator pipeline.

Runs the two steps of a scaffold in order:

Step 1: GENERATE  -- Run the external generator for the chosen framework.
Step 2: CONFIGURE -- Rewrite the generated project's files for the database.

Usage::

    project-cli
    python -m project_creator --version
"""

from __future__ import annotations

import asyncio
import sys
import time
from collections.abc import Callable
from pathlib import Path

from rich.markup import escape

from . import __version__
from .config import Config
from .configurator import configure
from .models import ConfigureOutcome, ConfigureReport, Framework, ProjectSelection
from .prompts import collect_selection
from .scaffolder import GeneratorError, ProjectGenerator, get_generator
from .utils import (
    STEP_NAMES,
    console,
    print_error,
    print_step_header,
    print_success,
    print_summary_table,
    print_warning,
)

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class PipelineError(Exception):
    """Raised when a pipeline step fails irrecoverably."""

    def __init__(self, step: int, message: str) -> None:
        self.step = step
        super().__init__(f"Step {step} ({STEP_NAMES.get(step, '?')}): {message}")


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class Pipeline:
    """Generates a project for a selection and configures it.

    Attributes:
        config: Global configuration.
        generator_factory: Returns the generator for a framework; replaced in
            tests to avoid network and process access.
    """

    def __init__(
        self,
        config: Config,
        generator_factory: Callable[[Framework, Config], ProjectGenerator] = get_generator,
    ) -> None:
        self.config = config
        self.generator_factory = generator_factory

    async def generate(self, selection: ProjectSelection) -> Path:
        """Step 1: run the framework's generator and return the project root."""
        print_step_header(1, STEP_NAMES[1])
        generator = self.generator_factory(selection.framework, self.config)
        try:
            return await generator.generate(selection.database)
        except GeneratorError as exc:
            raise PipelineError(1, str(exc)) from exc

    def configure(self, selection: ProjectSelection, project_path: Path) -> ConfigureReport:
        """Step 2: wire the generated project to the selected database."""
        print_step_header(2, STEP_NAMES[2])
        if not project_path.is_dir():
            raise PipelineError(2, f"Project directory not found: {project_path}")

        report = configure(selection, project_path, self.config)
        for change in report.changes:
            relative = change.path.relative_to(project_path)
            if change.outcome is ConfigureOutcome.APPLIED:
                console.print(f"  [green]+[/green] {relative}")
            else:
                print_warning(f"  {relative}: {change.outcome.value}")
        return report

    async def run(self, selection: ProjectSelection) -> ConfigureReport:
        """Execute both steps for *selection*."""
        console.print(
            f"[green]Setting up {selection.framework.value} project "
            f"with {selection.database.value}...[/green]"
        )
        started = time.monotonic()

        project_path = await self.generate(selection)
        report = self.configure(selection, project_path)

        summary = {
            "Framework": selection.framework.value,
            "Database": selection.database.value,
            "Project": str(project_path),
            "Elapsed": f"{time.monotonic() - started:.1f}s",
        }
        for change in report.changes:
            summary[str(change.path.relative_to(project_path))] = change.outcome.value
        print_summary_table(summary, title="Project Summary")
        return report


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``project-cli`` and ``python -m project_creator``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="project-cli",
        description="CLI to generate Spring Boot or NestJS projects with database setup",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.parse_args(argv)

    try:
        config = Config.from_env()
    except ValueError as exc:
        print_error(f"Error: invalid configuration: {escape(str(exc))}")
        sys.exit(1)

    try:
        selection = collect_selection()
        asyncio.run(Pipeline(config).run(selection))
    except (KeyboardInterrupt, EOFError):
        console.print()
        print_error("Aborted.")
        sys.exit(130)
    except PipelineError as exc:
        print_error(f"Error: {escape(str(exc))}")
        sys.exit(1)

    print_success("Project setup complete!")


if __name__ == "__main__":
    main()
