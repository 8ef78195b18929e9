"""Report (and optionally remove) message keys a project never references."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Sequence

from msgbundle.config import ConfigurationError, configure_logging, load_settings
from msgbundle.messages import MessageFileError, MessageReader, MessageSearcher
from msgbundle.version import version_banner

logger = logging.getLogger(__name__)


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find message keys that are not used anywhere in a project."
    )
    parser.add_argument("message_file", type=Path, help="Message file to read keys from")
    parser.add_argument("project_dir", type=Path, help="Project folder to search")
    parser.add_argument(
        "--clean",
        action="store_true",
        help="Remove unused keys from the message file",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML settings file (defaults to ./msgbundle.yaml when present)",
    )
    parser.add_argument(
        "--fail-on-unused",
        action="store_true",
        help="Exit with an error if unused keys are found",
    )
    parser.add_argument(
        "--result",
        type=Path,
        default=None,
        help="Write the sorted unused keys as a JSON array to this file",
    )
    parser.add_argument("--version", action="version", version=version_banner())
    return parser


def write_result(path: Path, unused: Sequence[str]) -> None:
    """Persist the unused keys, sorted, as a JSON array."""

    path.write_text(json.dumps(sorted(unused), ensure_ascii=False) + "\n", encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for scanning from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ConfigurationError as error:
        print(f"error: {error}")
        return 2
    configure_logging(settings)

    logger.debug("Scanning %s for keys from %s", args.project_dir, args.message_file)
    reader = MessageReader(args.message_file)
    try:
        message_keys = reader.read_message_keys()
        print(f"Found {len(message_keys)} message keys in i18n file")
        searcher = MessageSearcher(
            args.project_dir,
            message_keys,
            include_extensions=settings.scan.include_extensions,
            max_workers=settings.scan.max_workers,
        )
        unused = searcher.search_unused_message_keys()
    except (MessageFileError, NotADirectoryError) as error:
        print(f"error: {error}")
        return 2

    print(f"Checking {len(searcher.checked_files)} files in project folder...")

    if args.result is not None:
        try:
            write_result(args.result, unused)
        except OSError as error:
            print(f"error: unable to write result file {args.result}: {error}")
            return 2
        print(f"Wrote {len(unused)} unused key(s) to {args.result}")

    if not unused:
        print("No unused message keys found.")
        return 0

    print(f"{len(unused)} unused message key(s):")
    for key in unused:
        print(f"  - {key}")

    if args.clean:
        written = reader.clean_message_keys(unused)
        print(f"Cleaned {reader.file_path} ({written} bytes written)")

    return 1 if args.fail_on_unused else 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
