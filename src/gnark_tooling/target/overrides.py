"""Parse explicit Go cross-compilation overrides (RUST_GNARK_GO_ENVS).

Format: ``"GOOS=ios;GOARCH=arm64;CC=/path/to/cc"``. Entries without ``=`` are
dropped unless strict parsing is requested.
"""

from __future__ import annotations

PAIR_SEPARATOR = ";"
KEY_VALUE_SEPARATOR = "="


def parse_go_envs(text: str, *, strict: bool = False) -> dict[str, str]:
    """Parse ``KEY=VALUE;KEY=VALUE`` into an ordered dict. Empty input -> {}.

    Each entry is split on its first ``=`` so values may contain ``=``.
    With strict=True a non-empty entry without ``=`` raises ValueError.
    """
    if not text:
        return {}
    out: dict[str, str] = {}
    for pair in text.split(PAIR_SEPARATOR):
        key, sep, value = pair.partition(KEY_VALUE_SEPARATOR)
        if not sep:
            if strict and pair:
                msg = f"Malformed override entry (expected KEY=VALUE): {pair!r}"
                raise ValueError(msg)
            continue
        out[key] = value
    return out
