"""Stores uploaded files under the public directory."""

from __future__ import annotations

import logging
import os
import random
import time

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)


class UploadService:
    """Write uploads to ``<public_dir>/<subdir>`` and hand back the relative path.

    Names follow ``<field>-<epoch millis>-<random>.<ext>``; there is no
    collision check beyond that.
    """

    def __init__(self, public_dir: str, subdir: str = "uploads") -> None:
        self._public_dir = public_dir
        self._subdir = subdir.strip("/") or "uploads"

    @property
    def directory(self) -> str:
        return os.path.join(self._public_dir, self._subdir)

    def make_filename(self, field: str, original_name: str | None) -> str:
        _, ext = os.path.splitext(secure_filename(original_name or ""))
        suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
        return f"{field}-{suffix}{ext.lower()}"

    def save(self, file: FileStorage | None, field: str) -> str | None:
        """Persist ``file`` and return its path relative to the public dir.

        Returns None when no file was sent.
        """

        if file is None or not file.filename:
            return None

        os.makedirs(self.directory, exist_ok=True)
        filename = self.make_filename(field, file.filename)
        file.save(os.path.join(self.directory, filename))
        logger.info("Stored upload %s for field %s", filename, field)
        return f"{self._subdir}/{filename}"

    def discard(self, stored: str | None) -> None:
        """Remove a file previously returned by `save` (no-op for None)."""

        if not stored:
            return
        path = os.path.join(self._public_dir, *stored.split("/"))
        try:
            os.remove(path)
        except FileNotFoundError:
            return
        logger.info("Discarded upload %s", stored)
