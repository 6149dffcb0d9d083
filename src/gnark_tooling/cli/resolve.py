"""`gnark-tooling resolve|link|wrapper: inspect target resolution without building."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from gnark_tooling.cli.parse_common import (
    add_common_args,
    configure_logging,
    load_layout,
    path_resolver,
)
from gnark_tooling.config import ResolverConfig, resolve_layout
from gnark_tooling.errors import BuildError
from gnark_tooling.target.classify import classify_target
from gnark_tooling.target.link import link_platform_deps, platform_link_lines
from gnark_tooling.target.overrides import parse_go_envs
from gnark_tooling.target.recipe import assemble_recipe
from gnark_tooling.target.wrapper import create_apple_cc_wrapper


def describe_target(
    target: str,
    out_dir: Path,
    config: ResolverConfig,
    layout: dict[str, str],
) -> dict[str, Any]:
    """Everything resolution decides for target, as plain data (YAML-friendly)."""
    classification = classify_target(target, layout["lib_base_name"])
    recipe = assemble_recipe(target, out_dir, config, layout["lib_base_name"])
    return {
        "target": target,
        "os_family": classification.os_family,
        "arch": classification.arch,
        "build_mode": recipe.build_mode,
        "artifact_name": recipe.artifact_name,
        "env": recipe.env_dict(),
        "link": [d.cargo_spec() for d in link_platform_deps(classification.os_family)],
    }


def run_resolve_argv(argv: list[str] | None = None) -> None:
    """Resolve a target triple and print the recipe as YAML or KEY=VALUE lines."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []
    ap = argparse.ArgumentParser(description="Resolve Go cross env and build mode for a target")
    ap.add_argument("target", help="Rust target triple, e.g. aarch64-linux-android")
    ap.add_argument(
        "--out-dir",
        type=path_resolver,
        default=Path.cwd(),
        help="Scratch directory for generated CC wrappers (default: cwd)",
    )
    ap.add_argument(
        "--go-envs",
        default=None,
        help="Override string KEY=VALUE;... (default: $RUST_GNARK_GO_ENVS)",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Reject override entries without '=' instead of dropping them",
    )
    ap.add_argument("--format", choices=("yaml", "env"), default="yaml")
    add_common_args(ap)
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    config = ResolverConfig.from_env()
    if args.go_envs is not None:
        config = replace(config, go_envs=args.go_envs)
    if args.strict:
        try:
            parse_go_envs(config.go_envs, strict=True)
        except ValueError as e:
            print(f"❌ {e}", file=sys.stderr)
            sys.exit(1)

    layout = resolve_layout(load_layout(args.layout))
    try:
        info = describe_target(args.target, args.out_dir, config, layout)
    except BuildError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.format == "env":
        for k, v in info["env"].items():
            print(f"{k}={v}")
    else:
        print(yaml.safe_dump(info, default_flow_style=False, sort_keys=False), end="")
    sys.exit(0)


def run_link_argv(argv: list[str] | None = None) -> None:
    """Print the cargo:rustc-link-lib lines the Go runtime needs on target."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []
    if not argv:
        print("Usage: gnark-tooling link <target>", file=sys.stderr)
        sys.exit(1)
    classification = classify_target(argv[0])
    for line in platform_link_lines(classification.os_family):
        print(line)
    sys.exit(0)


def run_wrapper_argv(argv: list[str] | None = None) -> None:
    """Write an xcrun clang wrapper script and print its path."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []
    ap = argparse.ArgumentParser(description="Write an xcrun clang wrapper for an Apple SDK")
    ap.add_argument("sdk", help="xcrun SDK name, e.g. iphoneos or iphonesimulator")
    ap.add_argument("clang_target", help="clang target triple, e.g. arm64-apple-ios13.0")
    ap.add_argument("--out-dir", type=path_resolver, default=Path.cwd())
    args = ap.parse_args(argv)
    try:
        path = create_apple_cc_wrapper(args.out_dir, args.sdk, args.clang_target)
    except BuildError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    print(path)
    sys.exit(0)
