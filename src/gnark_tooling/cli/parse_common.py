"""Shared CLI flags (--verbose, --layout) and their handling."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

from gnark_tooling.config import load_layout_file


def add_common_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument(
        "--layout",
        type=Path,
        default=None,
        help="YAML file overriding build layout names (lib_base_name, header_name, go_dir, ...)",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def load_layout(path: Path | None) -> dict[str, str] | None:
    """Layout from --layout, or None for defaults. Exits 1 if the file is unreadable or malformed."""
    if path is None:
        return None
    try:
        return load_layout_file(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"❌ Could not load layout {path}: {e}", file=sys.stderr)
        sys.exit(1)


def path_resolver(s: str) -> Path:
    """Resolve a path argument to absolute Path (e.g. --out-dir)."""
    return Path(s).resolve()
