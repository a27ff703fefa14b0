"""Tests for the NestJS configurator (append-only module wiring)."""

from __future__ import annotations

from pathlib import Path

import pytest

from project_creator.config import Config, MongoSettings
from project_creator.configurator.nestjs import APP_MODULE_FILE, configure_nestjs
from project_creator.models import ConfigureOutcome, Database, Framework

pytestmark = pytest.mark.unit


class TestAppendModuleConfig:
    def test_appends_snippet(
        self, nest_project: Path, database: Database, sample_app_module: str, expected_app_modules
    ):
        report = configure_nestjs(nest_project, database)

        content = (nest_project / APP_MODULE_FILE).read_text(encoding="utf-8")
        assert content == sample_app_module + expected_app_modules[database]
        assert report.outcome_for("app.module.ts") is ConfigureOutcome.APPLIED

    def test_length_grows_by_snippet(
        self, nest_project: Path, database: Database, expected_app_modules
    ):
        module_path = nest_project / APP_MODULE_FILE
        before = len(module_path.read_bytes())

        configure_nestjs(nest_project, database)

        after = len(module_path.read_bytes())
        assert after == before + len(expected_app_modules[database].encode("utf-8"))

    def test_mongodb_snippet_at_end(self, nest_project: Path, expected_app_modules):
        configure_nestjs(nest_project, Database.MONGODB)

        content = (nest_project / APP_MODULE_FILE).read_text(encoding="utf-8")
        assert content.endswith(expected_app_modules[Database.MONGODB])
        assert "MongooseModule.forRoot('mongodb://localhost:27017/mydb')" in content

    def test_appends_again_on_second_run(self, nest_project: Path):
        configure_nestjs(nest_project, Database.MYSQL)
        configure_nestjs(nest_project, Database.MYSQL)

        content = (nest_project / APP_MODULE_FILE).read_text(encoding="utf-8")
        assert content.count("TypeOrmModule.forRoot") == 2

    def test_missing_module_is_skipped(self, tmp_path: Path, database: Database):
        project = tmp_path / "nestjs-project"
        project.mkdir()

        report = configure_nestjs(project, database)

        assert not (project / APP_MODULE_FILE).exists()
        assert report.outcome_for("app.module.ts") is ConfigureOutcome.SKIPPED_FILE_ABSENT
        assert report.applied is False

    def test_custom_mongo_settings(self, nest_project: Path):
        config = Config(mongodb=MongoSettings(host="mongo", port=27018, database="shop"))

        configure_nestjs(nest_project, Database.MONGODB, config)

        content = (nest_project / APP_MODULE_FILE).read_text(encoding="utf-8")
        assert "MongooseModule.forRoot('mongodb://mongo:27018/shop')" in content

    def test_report_selection(self, nest_project: Path):
        report = configure_nestjs(nest_project, "mongodb")

        assert report.selection.framework is Framework.NESTJS
        assert report.selection.database is Database.MONGODB
        assert report.applied is True
