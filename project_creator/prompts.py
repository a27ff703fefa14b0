"""Interactive selection prompts."""

from __future__ import annotations

from rich.prompt import Prompt

from .models import Database, Framework, ProjectSelection
from .utils import console


def ask_framework() -> Framework:
    answer = Prompt.ask(
        "Select the framework:",
        choices=[f.value for f in Framework],
        default=Framework.SPRINGBOOT.value,
        console=console,
    )
    return Framework(answer)


def ask_database() -> Database:
    answer = Prompt.ask(
        "Select the database:",
        choices=[d.value for d in Database],
        default=Database.MYSQL.value,
        console=console,
    )
    return Database(answer)


def collect_selection() -> ProjectSelection:
    """Ask for the framework, then the database.

    ``KeyboardInterrupt`` and ``EOFError`` from an aborted prompt propagate to
    the caller.
    """
    framework = ask_framework()
    database = ask_database()
    return ProjectSelection(framework=framework, database=database)
