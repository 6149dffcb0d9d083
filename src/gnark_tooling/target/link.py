"""System libraries the final link needs for the Go runtime, per OS family."""

from __future__ import annotations

from typing import NamedTuple

from gnark_tooling.target.classify import OS_ANDROID, OS_DARWIN, OS_IOS


class LinkDirective(NamedTuple):
    kind: str
    name: str

    def cargo_spec(self) -> str:
        """Value for cargo:rustc-link-lib (``framework=Security`` or ``resolv``)."""
        return f"{self.kind}={self.name}" if self.kind else self.name


APPLE_LINK_DEPS = (
    LinkDirective("framework", "CoreFoundation"),
    LinkDirective("framework", "Security"),
    LinkDirective("", "resolv"),
)
ANDROID_LINK_DEPS = (
    LinkDirective("", "c"),
    LinkDirective("", "log"),
)
# Linux and other Unix-like targets
UNIX_LINK_DEPS = (
    LinkDirective("", "pthread"),
    LinkDirective("", "resolv"),
)


def link_platform_deps(os_family: str) -> tuple[LinkDirective, ...]:
    if os_family in (OS_DARWIN, OS_IOS):
        return APPLE_LINK_DEPS
    if os_family == OS_ANDROID:
        return ANDROID_LINK_DEPS
    return UNIX_LINK_DEPS


def platform_link_lines(os_family: str) -> list[str]:
    return [f"cargo:rustc-link-lib={d.cargo_spec()}" for d in link_platform_deps(os_family)]
