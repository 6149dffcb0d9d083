"""Pytest fixtures for gnark tooling tests."""

from pathlib import Path

import pytest

from gnark_tooling.config import ResolverConfig


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """Scratch OUT_DIR for wrappers and build outputs."""
    d = tmp_path / "out"
    d.mkdir()
    return d


@pytest.fixture
def fake_ndk(tmp_path: Path) -> Path:
    """NDK root with linux-x86_64 clang for aarch64 and x86_64 Android (API 21)."""
    ndk = tmp_path / "ndk"
    bin_dir = ndk / "toolchains" / "llvm" / "prebuilt" / "linux-x86_64" / "bin"
    bin_dir.mkdir(parents=True)
    for name in ("aarch64-linux-android21-clang", "x86_64-linux-android21-clang"):
        (bin_dir / name).write_text("#!/bin/sh\n")
    return ndk


@pytest.fixture
def linux_x86_config() -> ResolverConfig:
    """No overrides, no NDK, building on an x86_64 Linux host."""
    return ResolverConfig(host_os="linux", host_triple="x86_64-unknown-linux-gnu")


@pytest.fixture
def crate_dir(tmp_path: Path) -> Path:
    """Crate manifest dir (crates/rust-gnark) with no prebuilt/ and no ../go yet."""
    d = tmp_path / "crates" / "rust-gnark"
    d.mkdir(parents=True)
    return d
