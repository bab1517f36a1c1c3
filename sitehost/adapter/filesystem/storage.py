"""Local filesystem site storage.

Each site gets a directory ``<root>/<username>/`` holding its landing
document. New directories are assembled under a hidden staging name next to
the final location and renamed into place, so readers never see a site
directory without its landing document.
"""

import asyncio
import os
import shutil
import tempfile
from pathlib import Path
from typing import Callable, TypeVar

import logfire

from sitehost.config import StorageSettings
from sitehost.domain.error import StorageError
from sitehost.domain.service.site_storage import SiteStorage
from sitehost.util.error import ConfigurationError

T = TypeVar("T")

INDEX_TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>{username}</title>
  </head>
  <body>
    <h1>{username}</h1>
    <p>This site was just created. Check back soon!</p>
  </body>
</html>
"""


def render_index(username: str) -> str:
    """Render the default landing document for a new site."""
    return INDEX_TEMPLATE.format(username=username)


class LocalSiteStorage(SiteStorage):
    """Site storage backed by a directory tree.

    Blocking file operations run in a worker thread. Every attempt is bounded
    by ``timeout_seconds`` and failed attempts are retried up to
    ``max_attempts`` times with a linearly growing delay.
    """

    def __init__(self, settings: StorageSettings) -> None:
        """Initialize local storage.

        Args:
            settings: Storage settings

        Raises:
            ConfigurationError: If the index filename is not a plain file name
        """
        if Path(settings.index_filename).name != settings.index_filename:
            raise ConfigurationError(
                f"storage.index_filename must be a file name, got {settings.index_filename!r}"
            )

        self.root = Path(settings.root)
        self.index_filename = settings.index_filename
        self.timeout_seconds = settings.timeout_seconds
        self.max_attempts = settings.max_attempts
        self.retry_delay_seconds = settings.retry_delay_seconds

    def site_dir(self, username: str) -> Path:
        """Directory holding a site's files."""
        return self.root / username

    def index_path(self, username: str) -> Path:
        """Path of a site's landing document."""
        return self.site_dir(username) / self.index_filename

    async def provision(self, username: str) -> None:
        """Create the site directory with its landing document."""
        with logfire.span("site_storage.provision", username=username):
            await self._run("provision", username, self._write_site, username)
            logfire.info("Site files written", path=str(self.index_path(username)))

    async def remove(self, username: str) -> None:
        """Delete the site directory."""
        with logfire.span("site_storage.remove", username=username):
            await self._run("remove", username, self._remove_site, username)
            logfire.info("Site files removed", username=username)

    async def index_exists(self, username: str) -> bool:
        """Check whether the landing document exists."""
        return await asyncio.to_thread(self.index_path(username).is_file)

    async def _run(
        self, operation: str, username: str, func: Callable[..., T], *args
    ) -> T:
        last_error: BaseException | None = None

        for attempt in range(1, self.max_attempts + 1):
            try:
                return await asyncio.wait_for(
                    asyncio.to_thread(func, *args), timeout=self.timeout_seconds
                )
            except (OSError, asyncio.TimeoutError) as e:
                last_error = e
                logfire.warn(
                    "Site storage attempt failed",
                    operation=operation,
                    username=username,
                    attempt=attempt,
                    max_attempts=self.max_attempts,
                    error=repr(e),
                )
                if attempt < self.max_attempts:
                    await asyncio.sleep(self.retry_delay_seconds * attempt)

        raise StorageError(
            username,
            f"{operation} failed after {self.max_attempts} attempts: {last_error!r}",
        ) from last_error

    def _write_site(self, username: str) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        site_dir = self.site_dir(username)
        document = render_index(username)

        if site_dir.is_dir():
            # Re-provision: swap the landing document in place
            fd, tmp_name = tempfile.mkstemp(prefix=".index-", dir=site_dir)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(document)
                os.replace(tmp_name, site_dir / self.index_filename)
            except OSError:
                Path(tmp_name).unlink(missing_ok=True)
                raise
            return

        staging = Path(tempfile.mkdtemp(prefix=f".{username}-", dir=self.root))
        try:
            (staging / self.index_filename).write_text(document, encoding="utf-8")
            staging.chmod(0o755)
            os.rename(staging, site_dir)
        except OSError:
            shutil.rmtree(staging, ignore_errors=True)
            raise

    def _remove_site(self, username: str) -> None:
        site_dir = self.site_dir(username)
        if site_dir.exists():
            shutil.rmtree(site_dir)


class MockSiteStorage(SiteStorage):
    """In-memory site storage for development and testing.

    Set ``fail`` to make every write raise ``StorageError``.
    """

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.documents: dict[str, str] = {}

    async def provision(self, username: str) -> None:
        """Store the landing document in memory."""
        if self.fail:
            raise StorageError(username, "mock storage is failing")
        self.documents[username] = render_index(username)

    async def remove(self, username: str) -> None:
        """Drop the landing document."""
        if self.fail:
            raise StorageError(username, "mock storage is failing")
        self.documents.pop(username, None)

    async def index_exists(self, username: str) -> bool:
        """Check whether a landing document is stored."""
        return username in self.documents
