"""Router modules exposed for convenient imports."""

from . import commands, healthz, readyz, streets, suggest

__all__ = ["commands", "healthz", "readyz", "streets", "suggest"]
