"""Read and rewrite key/value message files.

Supported line shapes (``.properties`` and ``.strings`` style)::

    key=value
    key = value
    key="value"
    "key" = "value";

A trailing ``;`` terminates quoted ``.strings`` values only; in unquoted
values it is part of the text.

Lines starting with ``//``, ``#``, ``/*`` or ``*/`` are comments, as is
everything between ``/*`` and ``*/``. Blank lines and lines without ``=`` are
ignored.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Sequence

logger = logging.getLogger(__name__)

_COMMENT_PREFIXES = ("//", "#", "/*", "*/")


class MessageFileError(OSError):
    """Raised when a message file is missing or cannot be read."""


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] == '"':
        return text[1:-1]
    return text


def _entry_lines(lines: Iterable[str]) -> Iterator[tuple[str, str | None]]:
    """Yield each raw line paired with its message key (``None`` if not an entry)."""

    in_block = False
    for line in lines:
        stripped = line.strip()

        if in_block:
            if "*/" in stripped:
                in_block = False
            yield line, None
            continue

        if not stripped or stripped.startswith(_COMMENT_PREFIXES):
            if stripped.startswith("/*") and "*/" not in stripped[2:]:
                in_block = True
            yield line, None
            continue

        if "=" not in stripped:
            yield line, None
            continue

        key = _unquote(stripped.partition("=")[0].strip())
        yield line, key or None


def parse_message_value(line: str) -> str:
    """Return the value part of an entry line."""

    value = line.strip().partition("=")[2].strip()
    if value.endswith(";"):
        terminated = value[:-1].rstrip()
        if _unquote(terminated) != terminated:
            return _unquote(terminated)
    return _unquote(value)


def parse_messages(text: str) -> dict[str, str]:
    """Parse message file ``text`` into a key/value mapping.

    Later duplicates override earlier ones.
    """

    messages: dict[str, str] = {}
    for line, key in _entry_lines(text.splitlines()):
        if key is not None:
            messages[key] = parse_message_value(line)
    return messages


class MessageReader:
    """Collect or remove message keys of a single message file."""

    def __init__(self, file_path: str | Path) -> None:
        if not file_path:
            raise ValueError("file_path is required")
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def _read_lines(self) -> list[str]:
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except FileNotFoundError as error:
            raise MessageFileError(f"Message file does not exist: {self._file_path}") from error
        except (OSError, UnicodeDecodeError) as error:
            raise MessageFileError(
                f"Unable to read message file {self._file_path}: {error}"
            ) from error
        return text.splitlines(keepends=True)

    def read_message_keys(self) -> list[str]:
        """Return the message keys in file order."""

        keys = [key for _, key in _entry_lines(self._read_lines()) if key is not None]
        logger.debug("Read %d message keys from %s", len(keys), self._file_path)
        return keys

    def read_messages(self) -> dict[str, str]:
        """Return the key/value mapping defined by the file."""

        return parse_messages("".join(self._read_lines()))

    def clean_message_keys(self, unused_message_keys: Sequence[str]) -> int:
        """Rewrite the file without entries for ``unused_message_keys``.

        Comments, blank lines and all other entries are kept verbatim.
        Returns the number of bytes written.
        """

        unused = set(unused_message_keys)
        lines = self._read_lines()
        kept = [
            line
            for line, key in _entry_lines(lines)
            if key is None or key not in unused
        ]
        payload = "".join(kept).encode("utf-8")
        self._file_path.write_bytes(payload)
        logger.info(
            "Removed %d message entries from %s", len(lines) - len(kept), self._file_path
        )
        return len(payload)


__all__ = [
    "MessageFileError",
    "MessageReader",
    "parse_message_value",
    "parse_messages",
]
