"""Search project sources for message keys that are never referenced."""

from __future__ import annotations

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Sequence

from msgbundle.config.settings import DEFAULT_INCLUDE_EXTENSIONS

logger = logging.getLogger(__name__)


def _usage_pattern(key: str) -> re.Pattern[str]:
    """Match ``key`` quoted with double or single quotes, or after a dot."""

    escaped = re.escape(key)
    return re.compile(rf'"{escaped}"|\'{escaped}\'|\.{escaped}')


class MessageSearcher:
    """Find message keys that no project file references.

    Only files whose suffix is listed in ``include_extensions`` are read.
    """

    def __init__(
        self,
        folder_path: str | Path,
        message_keys: Sequence[str],
        *,
        include_extensions: Iterable[str] = DEFAULT_INCLUDE_EXTENSIONS,
        max_workers: int = 4,
    ) -> None:
        if not folder_path:
            raise ValueError("folder_path is required")
        if message_keys is None:
            raise ValueError("message_keys are required")

        self._folder_path = Path(folder_path)
        self._message_keys = list(message_keys)
        self._include_extensions = frozenset(ext.lower() for ext in include_extensions)
        self._max_workers = max_workers
        self.found_message_keys: set[str] = set()
        self.checked_files: list[Path] = []

    def project_files(self) -> list[Path]:
        """Return the searchable files below the folder, sorted by path."""

        if not self._folder_path.is_dir():
            raise NotADirectoryError(f"Project folder does not exist: {self._folder_path}")

        return sorted(
            path
            for path in self._folder_path.rglob("*")
            if path.is_file() and path.suffix.lower() in self._include_extensions
        )

    def _keys_used_in(self, path: Path, patterns: dict[str, re.Pattern[str]]) -> set[str]:
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except OSError as error:
            logger.warning("Skipping unreadable file %s: %s", path, error)
            return set()
        return {key for key, pattern in patterns.items() if pattern.search(content)}

    def search_unused_message_keys(self) -> list[str]:
        """Return the keys not referenced anywhere, in their original order."""

        files = self.project_files()
        self.checked_files = files
        logger.info("Checking %d files in %s", len(files), self._folder_path)

        patterns = {key: _usage_pattern(key) for key in dict.fromkeys(self._message_keys)}
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            for used in executor.map(lambda path: self._keys_used_in(path, patterns), files):
                self.found_message_keys.update(used)

        unused = [
            key
            for key in dict.fromkeys(self._message_keys)
            if key not in self.found_message_keys
        ]
        logger.info("Found %d unused message keys", len(unused))
        return unused


__all__ = ["MessageSearcher"]
