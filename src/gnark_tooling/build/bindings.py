"""Generate Rust FFI bindings from libgnark.h with the bindgen CLI."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from gnark_tooling.errors import BuildError

log = logging.getLogger(__name__)


def bindgen_command(header: Path, output: Path, bindgen: str = "bindgen") -> list[str]:
    return [bindgen, str(header), "-o", str(output)]


def generate_bindings(header: Path, output: Path, bindgen: str = "bindgen") -> Path:
    """Run bindgen on header, writing output. Returns output. Raises BuildError on failure."""
    if not header.exists():
        msg = f"Header not found: {header}"
        raise BuildError(msg)
    cmd = bindgen_command(header, output, bindgen)
    log.debug("Running %s", cmd)
    try:
        r = subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError as e:
        msg = f"{bindgen} not found in PATH; install it with `cargo install bindgen-cli`"
        raise BuildError(msg) from e
    if r.returncode != 0:
        msg = f"Failed to generate Rust bindings from {header.name}: {r.stderr or r.stdout}"
        raise BuildError(msg)
    print(f"✅ Wrote {output}")
    return output
