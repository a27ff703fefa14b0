"""Database snippet tables and their Jinja2 rendering.

Each table maps every ``Database`` to the literal text injected into one kind
of generated file. Connection values are Jinja2 placeholders filled from
``Config.template_context()``; with the default settings the rendered text is
the fixed snippet for a local ``mydb`` database.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from jinja2 import Environment, StrictUndefined

from ..models import Database


class TemplateTableError(Exception):
    """Raised when a snippet table does not cover every ``Database``."""


# ---------------------------------------------------------------------------
# Spring Boot: pom.xml dependency blocks
# ---------------------------------------------------------------------------

# The trailing newline keeps ``</dependencies>`` on its own line after insertion.
SPRING_BOOT_DEPENDENCIES: Mapping[Database, str] = MappingProxyType({
    Database.MYSQL: """
    <dependency>
      <groupId>mysql</groupId>
      <artifactId>mysql-connector-java</artifactId>
      <scope>runtime</scope>
    </dependency>
""",
    Database.MONGODB: """
    <dependency>
      <groupId>org.springframework.boot</groupId>
      <artifactId>spring-boot-starter-data-mongodb</artifactId>
    </dependency>
""",
})


# ---------------------------------------------------------------------------
# Spring Boot: application.yml
# ---------------------------------------------------------------------------

SPRING_BOOT_CONFIGS: Mapping[Database, str] = MappingProxyType({
    Database.MYSQL: """
spring:
  datasource:
    url: jdbc:mysql://{{ mysql.host }}:{{ mysql.port }}/{{ mysql.database }}
    username: {{ mysql.username }}
    password: {{ mysql.password }}
  jpa:
    hibernate:
      ddl-auto: update
    show-sql: true""",
    Database.MONGODB: """
spring:
  data:
    mongodb:
      uri: {{ mongodb.uri }}""",
})


# ---------------------------------------------------------------------------
# NestJS: app.module.ts
# ---------------------------------------------------------------------------

NESTJS_MODULES: Mapping[Database, str] = MappingProxyType({
    Database.MYSQL: """
import { TypeOrmModule } from '@nestjs/typeorm';

@Module({
  imports: [
    TypeOrmModule.forRoot({
      type: 'mysql',
      host: '{{ mysql.host }}',
      port: {{ mysql.port }},
      username: '{{ mysql.username }}',
      password: '{{ mysql.password }}',
      database: '{{ mysql.database }}',
      autoLoadEntities: true,
      synchronize: true,
    }),
  ],
})""",
    Database.MONGODB: """
import { MongooseModule } from '@nestjs/mongoose';

@Module({
  imports: [
    MongooseModule.forRoot('{{ mongodb.uri }}'),
  ],
})""",
})


TEMPLATE_TABLES: dict[str, Mapping[Database, str]] = {
    "pom.xml": SPRING_BOOT_DEPENDENCIES,
    "application.yml": SPRING_BOOT_CONFIGS,
    "app.module.ts": NESTJS_MODULES,
}


def ensure_total(name: str, table: Mapping[Database, str]) -> None:
    """Raise ``TemplateTableError`` if *table* misses any ``Database``."""
    missing = [db.value for db in Database if db not in table]
    if missing:
        raise TemplateTableError(
            f"Template table {name!r} has no entry for: {', '.join(missing)}"
        )


for _name, _table in TEMPLATE_TABLES.items():
    ensure_total(_name, _table)


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders snippet templates with connection values.

    Undefined variables raise instead of rendering as empty strings, so a
    typo in a snippet cannot silently produce a broken config file.
    """

    def __init__(self, context: dict[str, Any]) -> None:
        self.context = context
        self.env = Environment(
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render_string(self, template_string: str) -> str:
        template = self.env.from_string(template_string)
        return template.render(**self.context)

    def render_snippet(self, table: Mapping[Database, str], database: Database) -> str:
        """Render the entry of *table* for *database*."""
        return self.render_string(table[Database(database)])
