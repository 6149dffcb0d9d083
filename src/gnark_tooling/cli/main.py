"""Main CLI entry point for gnark tooling."""

import sys

from gnark_tooling.cli import build as build_cli
from gnark_tooling.cli import resolve as resolve_cli


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print("Usage: gnark-tooling <command> [args...]", file=sys.stderr)
        print("Commands:", file=sys.stderr)
        print(
            "  build                      - Copy or compile libgnark, run bindgen, print cargo directives",
            file=sys.stderr,
        )
        print(
            "  resolve <target>           - Show Go env, CC, build mode and link deps for a target",
            file=sys.stderr,
        )
        print(
            "  link <target>              - Print cargo:rustc-link-lib lines for a target",
            file=sys.stderr,
        )
        print(
            "  wrapper <sdk> <clang-tgt>  - Write an xcrun clang wrapper script",
            file=sys.stderr,
        )
        sys.exit(1)

    command = sys.argv[1]

    if command == "build":
        build_cli.run_build_argv()
    elif command == "resolve":
        resolve_cli.run_resolve_argv()
    elif command == "link":
        resolve_cli.run_link_argv()
    elif command == "wrapper":
        resolve_cli.run_wrapper_argv()
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
