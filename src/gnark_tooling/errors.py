"""Exceptions raised by gnark_tooling."""


class BuildError(RuntimeError):
    """Unrecoverable build failure. The build script reports it and exits non-zero."""
