"""Project Creator -- scaffold Spring Boot or NestJS projects wired to a database.

Usage::

    project-cli
    python -m project_creator --version
"""

__version__ = "1.0.0"
