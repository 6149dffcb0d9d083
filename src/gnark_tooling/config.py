"""Resolver inputs and build layout.

ResolverConfig carries everything the resolution engine would otherwise read
from the process environment (override string, NDK location, build machine
identity). ResolverConfig.from_env is the only place that reads os.environ.

The build layout names the files and directories the build script works with;
defaults can be overridden from a YAML file.
"""

from __future__ import annotations

import os
import platform
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

GO_ENVS_VAR = "RUST_GNARK_GO_ENVS"
NDK_HOME_VAR = "ANDROID_NDK_HOME"
NDK_ROOT_VAR = "ANDROID_NDK_ROOT"

DEFAULT_LAYOUT: dict[str, str] = {
    "lib_base_name": "libgnark",
    "header_name": "libgnark.h",
    "link_name": "gnark",
    "go_dir": "../go",
    "prebuilt_dir": "prebuilt",
    "bindings_name": "bindings.rs",
}


@dataclass(frozen=True)
class ResolverConfig:
    go_envs: str = ""
    ndk_home: str | None = None
    ndk_root: str | None = None
    host_os: str = "linux"
    host_triple: str = ""

    @property
    def ndk_dir(self) -> str | None:
        """NDK root: ANDROID_NDK_HOME wins over ANDROID_NDK_ROOT."""
        if self.ndk_home is not None:
            return self.ndk_home
        return self.ndk_root

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ResolverConfig:
        env = os.environ if environ is None else environ
        return cls(
            go_envs=env.get(GO_ENVS_VAR, ""),
            ndk_home=env.get(NDK_HOME_VAR),
            ndk_root=env.get(NDK_ROOT_VAR),
            host_os=detect_host_os(),
            host_triple=env.get("HOST") or guess_host_triple(),
        )


def detect_host_os() -> str:
    """Canonical OS name of the build machine: darwin, linux, windows, ..."""
    return platform.system().lower()


def guess_host_triple() -> str:
    """Best-effort triple for the build machine when cargo did not set HOST."""
    machine = platform.machine().lower()
    if machine in ("arm64", "aarch64"):
        machine = "aarch64"
    elif machine in ("amd64", "x86_64"):
        machine = "x86_64"
    host_os = detect_host_os()
    if host_os == "darwin":
        return f"{machine}-apple-darwin"
    if host_os == "windows":
        return f"{machine}-pc-windows-msvc"
    return f"{machine}-unknown-linux-gnu"


def resolve_layout(layout: Mapping[str, Any] | None) -> dict[str, str]:
    """Return layout dict with defaults filled. Unknown keys are ignored."""
    if layout is None:
        return dict(DEFAULT_LAYOUT)
    out = dict(DEFAULT_LAYOUT)
    out.update({k: str(v) for k, v in layout.items() if k in out})
    return out


def load_layout_file(path: Path) -> dict[str, str]:
    """Load a layout override from YAML (top-level mapping). Raises ValueError if malformed."""
    with path.open() as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        msg = f"Layout file must contain a mapping: {path}"
        raise ValueError(msg)
    return resolve_layout(data)
