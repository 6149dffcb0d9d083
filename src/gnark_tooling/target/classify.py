"""Map a Rust target triple to a Go platform (GOOS/GOARCH) and library build mode.

Rules are evaluated top to bottom and the first match wins. A triple that
matches no rule classifies as ``unknown``: the Go build then uses host
defaults (native build, no cross environment).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

# OS families, named by their GOOS value.
OS_IOS = "ios"
OS_DARWIN = "darwin"
OS_ANDROID = "android"
OS_LINUX = "linux"
OS_UNKNOWN = "unknown"

ARCH_ARM64 = "arm64"
ARCH_AMD64 = "amd64"

# go build -buildmode values. Go does not support c-archive on GOOS=android.
MODE_STATIC = "c-archive"
MODE_SHARED = "c-shared"

MODE_EXTENSIONS: dict[str, str] = {
    MODE_STATIC: ".a",
    MODE_SHARED: ".so",
}

DEFAULT_LIB_BASE_NAME = "libgnark"


def _contains(marker: str) -> Callable[[str], bool]:
    return lambda target: marker in target


CLASSIFICATION_RULES: list[tuple[Callable[[str], bool], str]] = [
    (_contains("apple-ios"), OS_IOS),
    (_contains("apple-darwin"), OS_DARWIN),
    (_contains("linux-android"), OS_ANDROID),
    (_contains("linux-gnu"), OS_LINUX),
]


@dataclass(frozen=True)
class PlatformClassification:
    os_family: str
    arch: str
    library_mode: str
    artifact_name: str

    @property
    def is_known(self) -> bool:
        return self.os_family != OS_UNKNOWN

    @property
    def is_shared(self) -> bool:
        return self.library_mode == MODE_SHARED


def os_family_for(target: str) -> str:
    """First matching family in CLASSIFICATION_RULES, else ``unknown``."""
    for predicate, family in CLASSIFICATION_RULES:
        if predicate(target):
            return family
    return OS_UNKNOWN


def arch_for(target: str) -> str:
    """``arm64`` for aarch64 triples; everything else is treated as x86_64."""
    return ARCH_ARM64 if target.startswith("aarch64") else ARCH_AMD64


def library_mode_for(os_family: str) -> str:
    return MODE_SHARED if os_family == OS_ANDROID else MODE_STATIC


def artifact_name_for(library_mode: str, lib_base_name: str = DEFAULT_LIB_BASE_NAME) -> str:
    """e.g. libgnark.a / libgnark.so."""
    return lib_base_name + MODE_EXTENSIONS[library_mode]


def classify_target(
    target: str, lib_base_name: str = DEFAULT_LIB_BASE_NAME
) -> PlatformClassification:
    """Classify a target triple. Never raises; unrecognized triples give family ``unknown``."""
    family = os_family_for(target)
    mode = library_mode_for(family)
    return PlatformClassification(
        os_family=family,
        arch=arch_for(target),
        library_mode=mode,
        artifact_name=artifact_name_for(mode, lib_base_name),
    )
