"""Browser benchmark bundles for the packages of a stdlib-style monorepo."""
from .operations import Operations, OpsConfig
from .settings import Settings

__all__ = ["Operations", "OpsConfig", "Settings"]
