"""Build tooling for libgnark: target resolution, Go cross builds, bindings, cargo link output."""

__version__ = "0.1.0"
