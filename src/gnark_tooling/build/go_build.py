"""Compile libgnark from the go/ sources with cgo (development mode)."""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Iterable, Mapping
from pathlib import Path

from gnark_tooling.errors import BuildError

log = logging.getLogger(__name__)

# Strip symbols; disable inlining and bounds checks.
GO_LDFLAGS = "-ldflags=-s -w"
GO_GCFLAGS = "-gcflags=all=-l -B"


def go_build_command(build_mode: str, dest: Path) -> list[str]:
    return [
        "go",
        "build",
        f"-buildmode={build_mode}",
        GO_LDFLAGS,
        GO_GCFLAGS,
        "-o",
        str(dest),
        ".",
    ]


def go_build_env(
    go_envs: Iterable[tuple[str, str]], base: Mapping[str, str] | None = None
) -> dict[str, str]:
    """Process env + CGO_ENABLED=1 + go_envs, later entries winning."""
    env = dict(os.environ if base is None else base)
    env["CGO_ENABLED"] = "1"
    for k, v in go_envs:
        env[k] = v
    return env


def run_go_build(
    go_dir: Path,
    dest: Path,
    build_mode: str,
    go_envs: Iterable[tuple[str, str]],
) -> None:
    """Run go build in go_dir writing dest. Raises BuildError if go is missing or fails."""
    go_envs = list(go_envs)
    cmd = go_build_command(build_mode, dest)
    log.debug("Running %s in %s with %s", cmd, go_dir, go_envs)
    print(f"🔨 Building {dest.name} (-buildmode={build_mode})...")
    try:
        r = subprocess.run(cmd, cwd=str(go_dir), env=go_build_env(go_envs))
    except FileNotFoundError as e:
        msg = (
            "Go build failed. Is Go installed? "
            "Development builds of rust-gnark require Go 1.24+."
        )
        raise BuildError(msg) from e
    if r.returncode != 0:
        msg = f"Go build failed with status: {r.returncode}"
        raise BuildError(msg)
    print(f"✅ Built {dest}")
