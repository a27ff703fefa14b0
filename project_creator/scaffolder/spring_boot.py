"""Spring Boot generator backed by the Spring Initializr starter archive."""

from __future__ import annotations

import asyncio
import zipfile
from pathlib import Path

import httpx

from ..config import Config
from ..models import Database
from .base import GeneratorError, ProjectGenerator

ARCHIVE_NAME = "spring-boot.zip"


class SpringBootGenerator(ProjectGenerator):
    """Downloads the starter archive and unpacks it into ``spring_boot_path``.

    The database does not influence the download; the driver is wired in later
    by the configurator.
    """

    def __init__(self, config: Config, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(config)
        self._client = client

    @property
    def project_dir(self) -> Path:
        return self.config.spring_boot_path

    @property
    def archive_path(self) -> Path:
        return self.config.output_dir / ARCHIVE_NAME

    async def generate(self, database: Database) -> Path:
        self.config.output_dir.mkdir(parents=True, exist_ok=True)

        payload = await self._download()
        await asyncio.to_thread(self.archive_path.write_bytes, payload)
        try:
            await asyncio.to_thread(_extract_archive, self.archive_path, self.project_dir)
        finally:
            self.archive_path.unlink(missing_ok=True)

        return self.require_project_dir()

    async def _download(self) -> bytes:
        url = self.config.generators.initializr_url
        if self._client is not None:
            return await _fetch(self._client, url)

        timeout = httpx.Timeout(float(self.config.generators.download_timeout), connect=10.0)
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            return await _fetch(client, url)


async def _fetch(client: httpx.AsyncClient, url: str) -> bytes:
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise GeneratorError(
            f"GET {url}", "download failed", returncode=exc.response.status_code
        ) from exc
    except httpx.HTTPError as exc:
        raise GeneratorError(f"GET {url}", f"download failed: {exc}") from exc
    return response.content


def _extract_archive(archive: Path, target: Path) -> None:
    """Unpack *archive* into *target*, keeping Unix permission bits (``mvnw``)."""
    try:
        with zipfile.ZipFile(archive) as zf:
            for info in zf.infolist():
                # extract() strips absolute and ".." parts from member names.
                extracted = Path(zf.extract(info, target))
                mode = (info.external_attr >> 16) & 0o777
                if mode and not info.is_dir():
                    extracted.chmod(mode)
    except zipfile.BadZipFile as exc:
        raise GeneratorError(f"unzip {archive.name}", f"not a valid archive: {exc}") from exc
