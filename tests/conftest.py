"""Shared pytest fixtures for the Project Creator test suite.

Provides reusable fixtures for:
- Temporary output directories and configuration
- Generated-looking Spring Boot and NestJS project trees
- The literal snippets each database is expected to produce
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from project_creator.config import Config
from project_creator.models import Database


# ---------------------------------------------------------------------------
# Expected snippets (default connection settings)
# ---------------------------------------------------------------------------

MYSQL_DEPENDENCY = (
    "\n"
    "    <dependency>\n"
    "      <groupId>mysql</groupId>\n"
    "      <artifactId>mysql-connector-java</artifactId>\n"
    "      <scope>runtime</scope>\n"
    "    </dependency>\n"
)

MONGODB_DEPENDENCY = (
    "\n"
    "    <dependency>\n"
    "      <groupId>org.springframework.boot</groupId>\n"
    "      <artifactId>spring-boot-starter-data-mongodb</artifactId>\n"
    "    </dependency>\n"
)

MYSQL_APPLICATION_YML = (
    "\n"
    "spring:\n"
    "  datasource:\n"
    "    url: jdbc:mysql://localhost:3306/mydb\n"
    "    username: root\n"
    "    password: root\n"
    "  jpa:\n"
    "    hibernate:\n"
    "      ddl-auto: update\n"
    "    show-sql: true"
)

MONGODB_APPLICATION_YML = (
    "\n"
    "spring:\n"
    "  data:\n"
    "    mongodb:\n"
    "      uri: mongodb://localhost:27017/mydb"
)

MYSQL_APP_MODULE = (
    "\n"
    "import { TypeOrmModule } from '@nestjs/typeorm';\n"
    "\n"
    "@Module({\n"
    "  imports: [\n"
    "    TypeOrmModule.forRoot({\n"
    "      type: 'mysql',\n"
    "      host: 'localhost',\n"
    "      port: 3306,\n"
    "      username: 'root',\n"
    "      password: 'root',\n"
    "      database: 'mydb',\n"
    "      autoLoadEntities: true,\n"
    "      synchronize: true,\n"
    "    }),\n"
    "  ],\n"
    "})"
)

MONGODB_APP_MODULE = (
    "\n"
    "import { MongooseModule } from '@nestjs/mongoose';\n"
    "\n"
    "@Module({\n"
    "  imports: [\n"
    "    MongooseModule.forRoot('mongodb://localhost:27017/mydb'),\n"
    "  ],\n"
    "})"
)

EXPECTED_DEPENDENCIES = {Database.MYSQL: MYSQL_DEPENDENCY, Database.MONGODB: MONGODB_DEPENDENCY}
EXPECTED_APPLICATION_YML = {
    Database.MYSQL: MYSQL_APPLICATION_YML,
    Database.MONGODB: MONGODB_APPLICATION_YML,
}
EXPECTED_APP_MODULES = {Database.MYSQL: MYSQL_APP_MODULE, Database.MONGODB: MONGODB_APP_MODULE}


SAMPLE_POM = textwrap.dedent("""\
    <?xml version="1.0" encoding="UTF-8"?>
    <project xmlns="http://maven.apache.org/POM/4.0.0">
      <modelVersion>4.0.0</modelVersion>
      <groupId>com.example</groupId>
      <artifactId>demo</artifactId>
      <dependencies>
        <dependency>
          <groupId>org.springframework.boot</groupId>
          <artifactId>spring-boot-starter</artifactId>
        </dependency>
      </dependencies>
    </project>
""")

SAMPLE_APP_MODULE = textwrap.dedent("""\
    import { Module } from '@nestjs/common';
    import { AppController } from './app.controller';
    import { AppService } from './app.service';

    @Module({
      imports: [],
      controllers: [AppController],
      providers: [AppService],
    })
    export class AppModule {}
""")


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Default configuration writing into a temporary output directory."""
    return Config(output_dir=tmp_path)


@pytest.fixture(params=list(Database), ids=lambda db: db.value)
def database(request: pytest.FixtureRequest) -> Database:
    """Parametrises a test over every ``Database``."""
    return request.param


# ---------------------------------------------------------------------------
# Generated project trees
# ---------------------------------------------------------------------------


@pytest.fixture
def spring_project(tmp_path: Path) -> Path:
    """A minimal Spring Initializr-style project with a ``pom.xml``."""
    project = tmp_path / "spring-boot-project"
    resources = project / "src" / "main" / "resources"
    resources.mkdir(parents=True)
    (project / "pom.xml").write_text(SAMPLE_POM, encoding="utf-8")
    (resources / "application.properties").write_text(
        "spring.application.name=demo\n", encoding="utf-8"
    )
    return project


@pytest.fixture
def nest_project(tmp_path: Path) -> Path:
    """A minimal ``nest new``-style project with ``src/app.module.ts``."""
    project = tmp_path / "nestjs-project"
    (project / "src").mkdir(parents=True)
    (project / "src" / "app.module.ts").write_text(SAMPLE_APP_MODULE, encoding="utf-8")
    return project


# ---------------------------------------------------------------------------
# Sample files and expected snippets
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_pom() -> str:
    """``pom.xml`` text as produced by the starter archive."""
    return SAMPLE_POM


@pytest.fixture
def sample_app_module() -> str:
    """``src/app.module.ts`` text as produced by ``nest new``."""
    return SAMPLE_APP_MODULE


@pytest.fixture
def expected_dependencies() -> dict[Database, str]:
    """Dependency block inserted into ``pom.xml`` per database."""
    return dict(EXPECTED_DEPENDENCIES)


@pytest.fixture
def expected_application_yml() -> dict[Database, str]:
    """Full ``application.yml`` content per database."""
    return dict(EXPECTED_APPLICATION_YML)


@pytest.fixture
def expected_app_modules() -> dict[Database, str]:
    """Snippet appended to ``app.module.ts`` per database."""
    return dict(EXPECTED_APP_MODULES)
