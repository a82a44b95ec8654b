"""Flat-File Store: the whole Taskboard document as one JSON file on disk.

Invariants:
    - load() always returns a dict with users, boards and tasks lists
    - A missing primary file is created (seeded from the mirror when one exists)
    - save() replaces the whole file via temp file + os.replace; readers never
      observe a partially written document
    - Mirror writes are best-effort: a mirror failure never fails save()
    - Every OS or JSON failure on the primary surfaces as StorageUnavailableError

Design Decisions:
    - Every call re-reads the file: no in-memory cache, so external edits and
      other processes' writes are picked up (last writer wins)
    - indent=2 JSON: the file stays human-readable and diffable
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from taskboard.core.errors import StorageUnavailableError
from taskboard.core.records import (
    empty_document, malformed_collections, normalize_document,
)

logger = logging.getLogger(__name__)


class JsonFileStore:
    """DocumentStore backed by a single JSON file, with an optional mirror copy."""

    def __init__(self, path: Path | str, mirror_path: Path | str | None = None):
        self.path = Path(path)
        self.mirror_path = Path(mirror_path) if mirror_path else None

    def load(self) -> dict:
        """Read the full document, creating the file first if needed."""
        try:
            missing = not self.path.exists()
        except OSError as e:
            logger.error(
                f"Failed to stat store: {e}", extra={"store_path": self.path},
            )
            raise StorageUnavailableError(str(e), "read")
        if missing:
            self._initialize()
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(
                f"Failed to read store: {e}", extra={"store_path": self.path},
            )
            raise StorageUnavailableError(str(e), "read")
        try:
            document = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(
                f"Store is not valid JSON: {e}", extra={"store_path": self.path},
            )
            raise StorageUnavailableError("document is not valid JSON", "read")
        if not isinstance(document, dict):
            raise StorageUnavailableError("document is not a JSON object", "read")
        return _checked(normalize_document(document), self.path)

    def save(self, document: dict) -> None:
        """Replace the whole document on disk, then refresh the mirror."""
        try:
            _atomic_write(self.path, document)
        except OSError as e:
            logger.error(
                f"Failed to write store: {e}", extra={"store_path": self.path},
            )
            raise StorageUnavailableError(str(e), "write")
        if self.mirror_path:
            self._write_mirror(document)

    def health_check(self) -> bool:
        try:
            self.load()
            return True
        except StorageUnavailableError:
            return False

    def _initialize(self) -> None:
        document = self._read_mirror() or empty_document()
        try:
            _atomic_write(self.path, document)
        except OSError as e:
            logger.error(
                f"Failed to create store: {e}", extra={"store_path": self.path},
            )
            raise StorageUnavailableError(str(e), "create")
        logger.info("Store file created", extra={"store_path": self.path})

    def _read_mirror(self) -> dict | None:
        """Mirror contents if a readable mirror exists, else None."""
        if not self.mirror_path:
            return None
        try:
            document = json.loads(self.mirror_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return None
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(
                f"Ignoring unreadable mirror: {e}",
                extra={"store_path": self.mirror_path},
            )
            return None
        if not isinstance(document, dict) or malformed_collections(document):
            return None
        logger.info(
            "Seeding store from mirror", extra={"store_path": self.mirror_path},
        )
        return normalize_document(document)

    def _write_mirror(self, document: dict) -> None:
        try:
            _atomic_write(self.mirror_path, document)
        except OSError as e:
            logger.warning(
                f"Mirror write failed: {e}",
                extra={"store_path": self.mirror_path},
            )


def _atomic_write(path: Path, document: dict) -> None:
    """Serialize to a sibling temp file and rename it over `path`."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=2, ensure_ascii=False)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def _checked(document: dict, path: Path) -> dict:
    """The document, or StorageUnavailableError if a collection is not a list."""
    bad = malformed_collections(document)
    if bad:
        logger.error(
            f"Store collections are not lists: {bad}", extra={"store_path": path},
        )
        raise StorageUnavailableError(
            f"collection {bad[0]!r} is not a list", "read",
        )
    return document
