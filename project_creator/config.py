"""Project Creator configuration.

Typed settings for the generators and for the connection values baked into the
database templates. All settings use Pydantic v2 models so they are validated
at construction time. The defaults reproduce a local development setup
(``localhost``, database ``mydb``).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class MySQLSettings(BaseModel):
    """Connection values written into MySQL templates."""

    host: str = Field(default="localhost")
    port: int = Field(default=3306, ge=1, le=65535)
    username: str = Field(default="root")
    password: str = Field(default="root")
    database: str = Field(default="mydb")


class MongoSettings(BaseModel):
    """Connection values written into MongoDB templates."""

    host: str = Field(default="localhost")
    port: int = Field(default=27017, ge=1, le=65535)
    database: str = Field(default="mydb")

    @property
    def uri(self) -> str:
        """Connection string, e.g. ``mongodb://localhost:27017/mydb``."""
        return f"mongodb://{self.host}:{self.port}/{self.database}"


class GeneratorSettings(BaseModel):
    """Tuning knobs for the external project generators."""

    initializr_url: str = Field(default="https://start.spring.io/starter.zip")
    spring_boot_dir: str = Field(default="spring-boot-project")
    nestjs_dir: str = Field(default="nestjs-project")
    download_timeout: int = Field(
        default=120, ge=1, description="Starter archive download timeout in seconds"
    )
    command_timeout: int = Field(
        default=900, ge=1, description="Per-command timeout for npx/npm in seconds"
    )


class Config(BaseModel):
    """Global Project Creator configuration.

    Created once by the CLI entry point and passed to the pipeline, the
    generators and the configurator.
    """

    output_dir: Path = Field(default=Path("."))
    mysql: MySQLSettings = Field(default_factory=MySQLSettings)
    mongodb: MongoSettings = Field(default_factory=MongoSettings)
    generators: GeneratorSettings = Field(default_factory=GeneratorSettings)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def spring_boot_path(self) -> Path:
        """Directory the Spring Boot starter is unpacked into."""
        return self.output_dir / self.generators.spring_boot_dir

    @property
    def nestjs_path(self) -> Path:
        """Directory the Nest CLI generates the project into."""
        return self.output_dir / self.generators.nestjs_dir

    def template_context(self) -> dict[str, Any]:
        """Variables available to the database templates."""
        return {
            "mysql": self.mysql.model_dump(),
            "mongodb": {**self.mongodb.model_dump(), "uri": self.mongodb.uri},
        }

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            PROJECT_CREATOR_OUTPUT_DIR, PROJECT_CREATOR_INITIALIZR_URL,
            PROJECT_CREATOR_DOWNLOAD_TIMEOUT, PROJECT_CREATOR_COMMAND_TIMEOUT,
            PROJECT_CREATOR_MYSQL_HOST, PROJECT_CREATOR_MYSQL_PORT,
            PROJECT_CREATOR_MYSQL_USER, PROJECT_CREATOR_MYSQL_PASSWORD,
            PROJECT_CREATOR_MYSQL_DATABASE, PROJECT_CREATOR_MONGO_HOST,
            PROJECT_CREATOR_MONGO_PORT, PROJECT_CREATOR_MONGO_DATABASE.
        """
        env = os.environ

        generator_kwargs: dict[str, Any] = {}
        if env.get("PROJECT_CREATOR_INITIALIZR_URL"):
            generator_kwargs["initializr_url"] = env["PROJECT_CREATOR_INITIALIZR_URL"]
        if env.get("PROJECT_CREATOR_DOWNLOAD_TIMEOUT"):
            generator_kwargs["download_timeout"] = int(env["PROJECT_CREATOR_DOWNLOAD_TIMEOUT"])
        if env.get("PROJECT_CREATOR_COMMAND_TIMEOUT"):
            generator_kwargs["command_timeout"] = int(env["PROJECT_CREATOR_COMMAND_TIMEOUT"])

        mysql_kwargs: dict[str, Any] = {}
        if env.get("PROJECT_CREATOR_MYSQL_HOST"):
            mysql_kwargs["host"] = env["PROJECT_CREATOR_MYSQL_HOST"]
        if env.get("PROJECT_CREATOR_MYSQL_PORT"):
            mysql_kwargs["port"] = int(env["PROJECT_CREATOR_MYSQL_PORT"])
        if env.get("PROJECT_CREATOR_MYSQL_USER"):
            mysql_kwargs["username"] = env["PROJECT_CREATOR_MYSQL_USER"]
        if env.get("PROJECT_CREATOR_MYSQL_PASSWORD"):
            mysql_kwargs["password"] = env["PROJECT_CREATOR_MYSQL_PASSWORD"]
        if env.get("PROJECT_CREATOR_MYSQL_DATABASE"):
            mysql_kwargs["database"] = env["PROJECT_CREATOR_MYSQL_DATABASE"]

        mongo_kwargs: dict[str, Any] = {}
        if env.get("PROJECT_CREATOR_MONGO_HOST"):
            mongo_kwargs["host"] = env["PROJECT_CREATOR_MONGO_HOST"]
        if env.get("PROJECT_CREATOR_MONGO_PORT"):
            mongo_kwargs["port"] = int(env["PROJECT_CREATOR_MONGO_PORT"])
        if env.get("PROJECT_CREATOR_MONGO_DATABASE"):
            mongo_kwargs["database"] = env["PROJECT_CREATOR_MONGO_DATABASE"]

        return cls(
            output_dir=Path(env.get("PROJECT_CREATOR_OUTPUT_DIR", ".")),
            mysql=MySQLSettings(**mysql_kwargs),
            mongodb=MongoSettings(**mongo_kwargs),
            generators=GeneratorSettings(**generator_kwargs),
        )
