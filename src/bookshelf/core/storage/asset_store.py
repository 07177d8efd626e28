"""Cover image storage.

Each book owns at most one cover file. Files are stored under a single root
directory and published as ``/<image_folder>/<file name>`` paths that the
API serves as static files.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from pathlib import Path, PurePosixPath

from loguru import logger

from src.bookshelf.core.exceptions import StorageWriteError


class AssetStore(ABC):
    """Abstract interface for cover image backends."""

    @abstractmethod
    def save(self, content: bytes, original_filename: str) -> str:
        """Persist ``content`` under a fresh unique name.

        Args:
            content: Raw file bytes
            original_filename: Client-side file name; only its extension is kept

        Returns:
            Public relative path of the stored file

        Raises:
            StorageWriteError: If the file could not be written
        """

    @abstractmethod
    def delete_if_exists(self, relative_path: str | None) -> None:
        """Remove the file behind ``relative_path``.

        Empty paths and missing files are ignored.

        Raises:
            StorageWriteError: If an existing file could not be removed
        """

    @abstractmethod
    def exists(self, relative_path: str | None) -> bool:
        """Check whether ``relative_path`` points at a stored file."""


class LocalAssetStore(AssetStore):
    """Stores cover images on the local filesystem."""

    def __init__(self, root: Path | str, public_prefix: str = "/images/books") -> None:
        self._root = Path(root)
        self._public_prefix = "/" + public_prefix.strip("/")

    @property
    def root(self) -> Path:
        return self._root

    @property
    def public_prefix(self) -> str:
        return self._public_prefix

    def _ensure_root(self) -> None:
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageWriteError(
                f"Could not create storage directory {self._root}: {exc}"
            ) from exc

    @staticmethod
    def generate_name(original_filename: str) -> str:
        """Random file name keeping the extension of ``original_filename``."""
        suffix = PurePosixPath(original_filename.replace("\\", "/")).suffix.lower()
        return f"{uuid.uuid4().hex}{suffix}"

    def resolve(self, relative_path: str | None) -> Path | None:
        """Map a public path onto the file it designates.

        Returns ``None`` for empty paths and for paths outside the store.
        """
        if not relative_path or not relative_path.strip():
            return None

        path = PurePosixPath(relative_path.strip())
        prefix = PurePosixPath(self._public_prefix)
        if path.is_absolute() and path.parent != prefix:
            logger.warning("Ignoring cover path outside the image folder: {}", relative_path)
            return None

        candidate = (self._root / path.name).resolve()
        if candidate.parent != self._root.resolve():
            logger.warning("Ignoring cover path outside the image folder: {}", relative_path)
            return None
        return candidate

    def save(self, content: bytes, original_filename: str) -> str:
        self._ensure_root()
        file_name = self.generate_name(original_filename)
        full_path = self._root / file_name

        try:
            # "x" refuses to overwrite should a generated name ever repeat
            f = open(full_path, "xb")
        except OSError as exc:
            raise StorageWriteError(
                f"Could not create cover image {file_name}: {exc}", path=str(full_path)
            ) from exc

        try:
            with f:
                f.write(content)
        except OSError as exc:
            full_path.unlink(missing_ok=True)
            raise StorageWriteError(
                f"Could not write cover image {file_name}: {exc}", path=str(full_path)
            ) from exc

        public_path = f"{self._public_prefix}/{file_name}"
        logger.debug("Stored cover image {} ({} bytes)", public_path, len(content))
        return public_path

    def delete_if_exists(self, relative_path: str | None) -> None:
        full_path = self.resolve(relative_path)
        if full_path is None:
            return

        try:
            full_path.unlink()
        except FileNotFoundError:
            return
        except OSError as exc:
            raise StorageWriteError(
                f"Could not delete cover image {relative_path}: {exc}",
                path=str(full_path),
            ) from exc
        logger.debug("Deleted cover image {}", relative_path)

    def exists(self, relative_path: str | None) -> bool:
        full_path = self.resolve(relative_path)
        return full_path is not None and full_path.is_file()

    def is_writable(self) -> bool:
        """Check that the root directory exists or can be created."""
        try:
            self._ensure_root()
        except StorageWriteError:
            return False
        return self._root.is_dir()
