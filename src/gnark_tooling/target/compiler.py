"""Pick the C compiler (CC) cgo should use for a cross build.

Returns None wherever the default system compiler works: native builds, macOS
arm64<->x86_64 (universal clang), and targets we do not know about.
"""

from __future__ import annotations

import logging
from pathlib import Path

from gnark_tooling.config import ResolverConfig
from gnark_tooling.target.wrapper import create_apple_cc_wrapper

log = logging.getLogger(__name__)

# target -> (xcrun sdk, clang target triple); iOS 13.0 is the minimum deployment target.
APPLE_MOBILE_WRAPPERS: dict[str, tuple[str, str]] = {
    "aarch64-apple-ios": ("iphoneos", "arm64-apple-ios13.0"),
    "aarch64-apple-ios-sim": ("iphonesimulator", "arm64-apple-ios13.0-simulator"),
    "x86_64-apple-ios": ("iphonesimulator", "x86_64-apple-ios13.0-simulator"),
}

# API level 21 (Android 5.0) is the minimum supported version.
ANDROID_API_LEVEL = 21
ANDROID_CLANG_NAMES: dict[str, str] = {
    "aarch64-linux-android": f"aarch64-linux-android{ANDROID_API_LEVEL}-clang",
    "x86_64-linux-android": f"x86_64-linux-android{ANDROID_API_LEVEL}-clang",
}

LINUX_ARM64_TARGET = "aarch64-unknown-linux-gnu"
LINUX_ARM64_CROSS_CC = "aarch64-linux-gnu-gcc"


def ndk_host_tag(host_os: str) -> str:
    """NDK prebuilt directory for the build machine (not the target)."""
    return "darwin-x86_64" if host_os == "darwin" else "linux-x86_64"


def ndk_clang_path(ndk: str, host_os: str, clang_name: str) -> str:
    return f"{ndk}/toolchains/llvm/prebuilt/{ndk_host_tag(host_os)}/bin/{clang_name}"


def detect_android_cc(target: str, config: ResolverConfig) -> str | None:
    """NDK clang for an Android target, or None (with a warning) if it cannot be found."""
    ndk = config.ndk_dir
    if ndk is None:
        log.warning(
            "Android NDK not configured; set ANDROID_NDK_HOME or ANDROID_NDK_ROOT. "
            "Cross-compilation for %s may fail.",
            target,
        )
        return None

    clang_name = ANDROID_CLANG_NAMES.get(target)
    if clang_name is None:
        log.debug("No NDK clang mapping for %s; using default CC", target)
        return None

    cc = ndk_clang_path(ndk, config.host_os, clang_name)
    if Path(cc).exists():
        return cc
    log.warning(
        "Android NDK clang not found at %s. Cross-compilation may fail. "
        "Set ANDROID_NDK_HOME correctly.",
        cc,
    )
    return None


def detect_linux_arm64_cc(config: ResolverConfig) -> str | None:
    """Cross gcc on PATH when building aarch64 Linux from an x86_64 host; None on native arm64."""
    if "x86_64" in config.host_triple:
        return LINUX_ARM64_CROSS_CC
    return None


def detect_cc(target: str, out_dir: Path, config: ResolverConfig) -> str | None:
    """Return a CC override for target, synthesizing an xcrun wrapper in out_dir for iOS."""
    wrapper = APPLE_MOBILE_WRAPPERS.get(target)
    if wrapper is not None:
        sdk, clang_target = wrapper
        return create_apple_cc_wrapper(out_dir, sdk, clang_target)
    if "linux-android" in target:
        return detect_android_cc(target, config)
    if target == LINUX_ARM64_TARGET:
        return detect_linux_arm64_cc(config)
    return None
