"""Target resolution: triple -> Go env, CC (incl. xcrun wrappers), build mode, link deps."""

from .classify import (
    CLASSIFICATION_RULES,
    PlatformClassification,
    classify_target,
)
from .compiler import detect_android_cc, detect_cc
from .link import LinkDirective, link_platform_deps, platform_link_lines
from .overrides import parse_go_envs
from .recipe import BuildRecipe, assemble_recipe, detect_go_cross_env
from .wrapper import create_apple_cc_wrapper

__all__ = [
    "CLASSIFICATION_RULES",
    "BuildRecipe",
    "LinkDirective",
    "PlatformClassification",
    "assemble_recipe",
    "classify_target",
    "create_apple_cc_wrapper",
    "detect_android_cc",
    "detect_cc",
    "detect_go_cross_env",
    "link_platform_deps",
    "parse_go_envs",
    "platform_link_lines",
]
