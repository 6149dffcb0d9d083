"""Write xcrun clang wrapper scripts used as CC for Apple mobile targets.

``xcrun -sdk <sdk> clang -target <triple>`` resolves the SDK sysroot when the
compiler runs, so the script is the whole toolchain setup. Script names are
unique per SDK so several iOS variants can build in one OUT_DIR.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from gnark_tooling.errors import BuildError

log = logging.getLogger(__name__)

WRAPPER_MODE = 0o755


def _has_permission_bits() -> bool:
    return os.name == "posix"


def wrapper_script_name(sdk: str) -> str:
    return f"cc_wrapper_{sdk}.sh"


def wrapper_script_content(sdk: str, clang_target: str) -> str:
    return f'#!/bin/sh\nexec xcrun -sdk {sdk} clang -target {clang_target} "$@"\n'


def create_apple_cc_wrapper(out_dir: Path, sdk: str, clang_target: str) -> str:
    """Write out_dir/cc_wrapper_<sdk>.sh and make it executable. Returns its absolute path.

    Raises BuildError if the script cannot be written or chmodded.
    """
    script_name = wrapper_script_name(sdk)
    script_path = Path(out_dir).resolve() / script_name
    try:
        script_path.write_text(wrapper_script_content(sdk, clang_target))
    except OSError as e:
        msg = f"Failed to write CC wrapper {script_name}: {e}"
        raise BuildError(msg) from e

    if _has_permission_bits():
        try:
            script_path.chmod(WRAPPER_MODE)
        except OSError as e:
            msg = f"Failed to chmod CC wrapper {script_name}: {e}"
            raise BuildError(msg) from e

    log.debug("Wrote CC wrapper %s (sdk=%s, target=%s)", script_path, sdk, clang_target)
    return str(script_path)
