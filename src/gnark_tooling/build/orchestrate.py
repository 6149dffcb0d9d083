"""Build-script entry: produce libgnark for TARGET in OUT_DIR, generate bindings, emit link directives.

Two modes:
1. Published crate (``prebuilt/<target>/`` exists): copy the bundled library
   and header. Consumers never need Go installed.
2. Development (``go/`` exists): compile Go from source with the cross
   environment auto-detected from the target (or RUST_GNARK_GO_ENVS).

Android targets use ``-buildmode=c-shared`` (.so) because Go does not support
c-archive on GOOS=android. All other targets use c-archive (.a).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, TextIO

from gnark_tooling.build import cargo
from gnark_tooling.build.bindings import generate_bindings
from gnark_tooling.build.go_build import run_go_build
from gnark_tooling.build.prebuilt import copy_prebuilt, prebuilt_dir_for
from gnark_tooling.config import ResolverConfig, resolve_layout
from gnark_tooling.errors import BuildError
from gnark_tooling.target.classify import classify_target
from gnark_tooling.target.link import platform_link_lines
from gnark_tooling.target.recipe import assemble_recipe

log = logging.getLogger(__name__)


def _resolve_go_dir(manifest_dir: Path, layout: dict[str, str]) -> Path:
    return manifest_dir / layout["go_dir"]


def produce_library(
    target: str,
    out_dir: Path,
    manifest_dir: Path,
    config: ResolverConfig,
    layout: dict[str, str],
) -> Path:
    """Copy or compile the library into out_dir. Returns the header path. Raises BuildError."""
    classification = classify_target(target, layout["lib_base_name"])
    lib_name = classification.artifact_name
    header = out_dir / layout["header_name"]

    prebuilt_dir = prebuilt_dir_for(manifest_dir, target, layout["prebuilt_dir"])
    go_dir = _resolve_go_dir(manifest_dir, layout)

    if prebuilt_dir.exists():
        log.debug("Using prebuilt artifacts from %s", prebuilt_dir)
        copy_prebuilt(prebuilt_dir, out_dir, lib_name, layout["header_name"])
    elif go_dir.exists():
        out_dir.mkdir(parents=True, exist_ok=True)
        recipe = assemble_recipe(target, out_dir, config, layout["lib_base_name"])
        run_go_build(go_dir, out_dir / recipe.artifact_name, recipe.build_mode, recipe.env)
    else:
        msg = (
            f"Neither {layout['prebuilt_dir']}/{target} nor {layout['go_dir']} directory found. "
            "If consuming as a crate, prebuilt libs should be bundled. "
            "If developing, ensure go/ directory exists and Go is installed."
        )
        raise BuildError(msg)
    return header


def link_lines(target: str, out_dir: Path, layout: dict[str, str]) -> list[str]:
    """cargo link directives for the built library and the Go runtime's system deps."""
    classification = classify_target(target, layout["lib_base_name"])
    return [
        cargo.link_search(out_dir),
        cargo.link_lib(layout["link_name"], classification.is_shared),
        *platform_link_lines(classification.os_family),
    ]


def _run_impl(
    target: str,
    out_dir: Path,
    manifest_dir: Path,
    config: ResolverConfig,
    layout: dict[str, str],
    out: TextIO | None,
    bindgen: str,
) -> None:
    out_dir = out_dir.resolve()
    cargo.print_directive(cargo.rerun_if_changed("go"), out)
    header = produce_library(target, out_dir, manifest_dir, config, layout)
    generate_bindings(header, out_dir / layout["bindings_name"], bindgen)
    for line in link_lines(target, out_dir, layout):
        cargo.print_directive(line, out)


def run(
    target: str,
    out_dir: Path,
    manifest_dir: Path,
    config: ResolverConfig | None = None,
    layout: dict[str, Any] | None = None,
    out: TextIO | None = None,
    bindgen: str = "bindgen",
) -> int:
    """Full build-script pass for target. Returns 0 on success, 1 on a fatal build error."""
    cfg = config or ResolverConfig.from_env()
    lay = resolve_layout(layout)
    with cargo.cargo_warnings(out):
        try:
            _run_impl(target, out_dir, manifest_dir, cfg, lay, out, bindgen)
        except BuildError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
    return 0
