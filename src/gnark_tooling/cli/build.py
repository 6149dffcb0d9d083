"""`gnark-tooling build: build-script mode: copy or compile libgnark, run bindgen, print cargo directives."""

import os
import sys
from pathlib import Path

from gnark_tooling.build.orchestrate import run as run_build
from gnark_tooling.cli.parse_common import add_common_args, configure_logging, load_layout


def run_build_argv(argv: list[str] | None = None) -> None:
    """Parse argv and run the build. Target and paths default to cargo's TARGET, OUT_DIR, CARGO_MANIFEST_DIR."""
    import argparse

    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []  # skip 'gnark-tooling build'
    ap = argparse.ArgumentParser(description="Build libgnark for a Rust target (cargo build script)")
    ap.add_argument(
        "--target",
        default=os.environ.get("TARGET"),
        help="Rust target triple (default: $TARGET)",
    )
    ap.add_argument(
        "--out-dir",
        type=Path,
        default=os.environ.get("OUT_DIR"),
        help="Output directory for library, header, bindings (default: $OUT_DIR)",
    )
    ap.add_argument(
        "--manifest-dir",
        type=Path,
        default=os.environ.get("CARGO_MANIFEST_DIR"),
        help="Crate directory containing prebuilt/ (default: $CARGO_MANIFEST_DIR)",
    )
    ap.add_argument("--bindgen", default="bindgen", help="bindgen executable (default: bindgen)")
    add_common_args(ap)
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    missing = [
        name
        for name, value in (
            ("TARGET", args.target),
            ("OUT_DIR", args.out_dir),
            ("CARGO_MANIFEST_DIR", args.manifest_dir),
        )
        if not value
    ]
    if missing:
        print(f"❌ {', '.join(missing)} not set (pass the option or run from cargo)", file=sys.stderr)
        sys.exit(1)

    layout = load_layout(args.layout)
    rc = run_build(
        args.target,
        Path(args.out_dir),
        Path(args.manifest_dir),
        layout=layout,
        bindgen=args.bindgen,
    )
    sys.exit(rc)
