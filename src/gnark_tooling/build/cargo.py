"""cargo build-script directives (``cargo:...`` lines on stdout)."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO


def print_directive(line: str, out: TextIO | None = None) -> None:
    print(line, file=out or sys.stdout)


def rerun_if_changed(path: str) -> str:
    return f"cargo:rerun-if-changed={path}"


def link_search(out_dir: Path) -> str:
    return f"cargo:rustc-link-search=native={out_dir}"


def link_lib(name: str, shared: bool) -> str:
    kind = "dylib" if shared else "static"
    return f"cargo:rustc-link-lib={kind}={name}"


def warning(message: str) -> str:
    # cargo reads one directive per line
    return "cargo:warning=" + " ".join(message.splitlines())


class CargoWarningHandler(logging.Handler):
    """Forward WARNING and above to cargo as cargo:warning= lines."""

    def __init__(self, out: TextIO | None = None) -> None:
        super().__init__(level=logging.WARNING)
        self.out = out

    def emit(self, record: logging.LogRecord) -> None:
        try:
            print_directive(warning(self.format(record)), self.out)
        except Exception:
            self.handleError(record)


@contextmanager
def cargo_warnings(out: TextIO | None = None, logger_name: str = "gnark_tooling") -> Iterator[None]:
    """Install CargoWarningHandler on the package logger for the duration of the block."""
    logger = logging.getLogger(logger_name)
    handler = CargoWarningHandler(out)
    logger.addHandler(handler)
    try:
        yield
    finally:
        logger.removeHandler(handler)
