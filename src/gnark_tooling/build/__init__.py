"""libgnark build steps: prebuilt copy, go build, bindgen, cargo directives."""

from .bindings import generate_bindings
from .go_build import run_go_build
from .orchestrate import link_lines, produce_library
from .orchestrate import run as run_build
from .prebuilt import copy_prebuilt

__all__ = [
    "copy_prebuilt",
    "generate_bindings",
    "link_lines",
    "produce_library",
    "run_build",
    "run_go_build",
]
