"""Copy a bundled prebuilt/<target>/ library and header into OUT_DIR (published-crate mode)."""

from __future__ import annotations

import shutil
from pathlib import Path

from gnark_tooling.errors import BuildError


def prebuilt_dir_for(manifest_dir: Path, target: str, prebuilt_dir_name: str = "prebuilt") -> Path:
    return manifest_dir / prebuilt_dir_name / target


def copy_prebuilt(
    prebuilt_dir: Path,
    out_dir: Path,
    lib_name: str,
    header_name: str = "libgnark.h",
) -> list[Path]:
    """Copy lib_name and header_name from prebuilt_dir to out_dir. Returns the destination paths.

    Both files must exist; a missing one raises BuildError naming it.
    """
    rel = f"{prebuilt_dir.parent.name}/{prebuilt_dir.name}"
    sources = [prebuilt_dir / lib_name, prebuilt_dir / header_name]
    for src in sources:
        if not src.exists():
            msg = f"{rel}/{src.name} not found. Rebuild prebuilt libraries."
            raise BuildError(msg)

    out_dir.mkdir(parents=True, exist_ok=True)
    copied: list[Path] = []
    for src in sources:
        dst = out_dir / src.name
        try:
            shutil.copy2(src, dst)
        except OSError as e:
            msg = f"Failed to copy prebuilt {src.name}: {e}"
            raise BuildError(msg) from e
        print(f"📦 Copying {rel}/{src.name} -> {dst}")
        copied.append(dst)
    return copied
