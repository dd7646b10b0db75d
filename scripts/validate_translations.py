#!/usr/bin/env python3
"""Validate locale sources for duplicate keys and placeholder mismatches."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC = REPO_ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from kivilocale.config import (  # noqa: E402
    load_manifest,
    locale_directory,
    locale_source_path,
)
from kivilocale.localization import LocaleSyntaxError, load_locale_file  # noqa: E402
from kivilocale.localization.validation import validate_locale  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--manifest",
        type=Path,
        default=None,
        help="Manifest to validate instead of the configured one",
    )
    parser.add_argument(
        "--fail-on-duplicates",
        action="store_true",
        help="Exit with an error if a key is defined more than once",
    )
    args = parser.parse_args(argv)

    manifest = load_manifest(args.manifest)
    directory = locale_directory(args.manifest)

    failed = False
    for entry in manifest.locales:
        path = locale_source_path(entry, directory)
        try:
            parsed = load_locale_file(path, locale=entry.code)
        except (OSError, LocaleSyntaxError) as exc:
            print(f"[error] {entry.code}: {exc}")
            failed = True
            continue

        report = validate_locale(parsed)
        for line in report.messages():
            print(line)

        if report.placeholder_mismatches:
            failed = True
        if report.duplicates and args.fail_on_duplicates:
            failed = True

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
