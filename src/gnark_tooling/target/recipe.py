"""Assemble the Go cross-compilation environment and build mode for a target.

Priority:
1. RUST_GNARK_GO_ENVS (explicit override, used verbatim)
2. Auto-detection: target -> GOOS/GOARCH, plus CC where the default compiler won't do
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from gnark_tooling.config import ResolverConfig
from gnark_tooling.target.classify import (
    DEFAULT_LIB_BASE_NAME,
    PlatformClassification,
    classify_target,
)
from gnark_tooling.target.compiler import detect_cc
from gnark_tooling.target.overrides import parse_go_envs

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildRecipe:
    env: tuple[tuple[str, str], ...]
    build_mode: str
    artifact_name: str

    def env_dict(self) -> dict[str, str]:
        return dict(self.env)


def detect_go_cross_env(
    target: str, out_dir: Path, config: ResolverConfig
) -> list[tuple[str, str]]:
    """Ordered (name, value) pairs to add to the go build environment.

    An override short-circuits everything else. Unknown targets get no
    variables so Go builds for the host.
    """
    manual = parse_go_envs(config.go_envs)
    if manual:
        log.debug("Using explicit Go env override for %s: %s", target, manual)
        return list(manual.items())

    classification = classify_target(target)
    if not classification.is_known:
        log.debug("Unrecognized target %s; building with host defaults", target)
        return []

    envs = [
        ("GOOS", classification.os_family),
        ("GOARCH", classification.arch),
    ]
    cc = detect_cc(target, out_dir, config)
    if cc is not None:
        envs.append(("CC", cc))
    return envs


def assemble_recipe(
    target: str,
    out_dir: Path,
    config: ResolverConfig,
    lib_base_name: str = DEFAULT_LIB_BASE_NAME,
) -> BuildRecipe:
    """Environment plus build mode and artifact name for one build of target."""
    classification: PlatformClassification = classify_target(target, lib_base_name)
    envs = detect_go_cross_env(target, out_dir, config)
    return BuildRecipe(
        env=tuple(envs),
        build_mode=classification.library_mode,
        artifact_name=classification.artifact_name,
    )
