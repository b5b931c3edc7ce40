"""Storage abstraction for wiki pages."""

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from flatwiki.core.errors import PageNotFoundError, PageSaveError
from flatwiki.core.models import Page

logger = logging.getLogger(__name__)


class Storage(ABC):
    """Abstract base class for page storage."""

    @abstractmethod
    async def load_page(self, title: str) -> Page:
        """Load a page by title. Raises PageNotFoundError if missing."""
        ...

    @abstractmethod
    async def save_page(self, title: str, body: bytes) -> Page:
        """Save a page, replacing any previous content.

        Raises PageSaveError if the write fails.
        """
        ...

    @abstractmethod
    async def page_exists(self, title: str) -> bool:
        """Check if a page exists."""
        ...


class FileStorage(Storage):
    """Flat-file storage implementation.

    Each page is stored as raw bytes in ``<base_path>/<Title>.txt``.
    The directory is created on the first save, not on construction.
    """

    SUFFIX = ".txt"

    def __init__(self, base_path: Path, dir_mode: int = 0o700, file_mode: int = 0o600):
        self.base_path = Path(base_path)
        self.dir_mode = dir_mode
        self.file_mode = file_mode

    def path_for(self, title: str) -> Path:
        """Get full path for a page."""
        return self.base_path / f"{title}{self.SUFFIX}"

    async def load_page(self, title: str) -> Page:
        """Load a page.

        Any read failure (missing file, name too long, data dir not a
        directory) means no content exists for ``title``.
        """
        path = self.path_for(title)
        try:
            body = path.read_bytes()
        except OSError as e:
            logger.info("error loading page %r: %s", str(path), e)
            raise PageNotFoundError(title) from e
        return Page(title=title, body=body)

    async def save_page(self, title: str, body: bytes) -> Page:
        """Save a page."""
        path = self.path_for(title)
        try:
            self._ensure_base_path()
            self._write_atomic(path, body)
        except OSError as e:
            logger.error("unable to save page to %r: %s", str(path), e)
            raise PageSaveError(f"unable to save page to {str(path)!r}: {e}") from e

        logger.info("Saved page %r (%d bytes)", title, len(body))
        return Page(title=title, body=body)

    async def page_exists(self, title: str) -> bool:
        """Check if a page exists."""
        return self.path_for(title).is_file()

    def _ensure_base_path(self) -> None:
        """Create the page directory with restrictive permissions if missing."""
        try:
            self.base_path.mkdir(mode=self.dir_mode, parents=True)
        except FileExistsError:
            # Already there, possibly created concurrently; leave its mode alone
            return
        # mkdir's mode is filtered by the umask
        os.chmod(self.base_path, self.dir_mode)
        logger.info("Created data directory %s", self.base_path)

    def _write_atomic(self, path: Path, body: bytes) -> None:
        """Write ``body`` to a temp file beside ``path``, then rename it over."""
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.stem}.", suffix=".tmp", dir=self.base_path
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(body)
            os.chmod(tmp_name, self.file_mode)
            os.replace(tmp_name, path)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise
