"""
Error taxonomy for benchmark bundling.

Every failure is fatal to the whole run; these exceptions bubble up to the
CLI wrapper which maps them to an exit code.
"""
from __future__ import annotations

from typing import Optional

__all__ = [
    "BenchmarkBundlesError",
    "RepositoryRootError",
    "CommandNotFoundError",
    "PackageDiscoveryError",
    "SearchError",
    "BundleError",
    "PackageFailure",
]


class BenchmarkBundlesError(Exception):
    """Base class for all benchmark bundling errors."""


class RepositoryRootError(BenchmarkBundlesError):
    """The repository root could not be determined."""


class CommandNotFoundError(BenchmarkBundlesError):
    """An external collaborator could not be launched."""

    def __init__(self, command: str, reason: str) -> None:
        super().__init__(f"unable to run '{command}': {reason}")
        self.command = command


class PackageDiscoveryError(BenchmarkBundlesError):
    """The package finder exited with a non-zero status."""

    def __init__(self, returncode: int, detail: str = "") -> None:
        message = f"package finder exited with status {returncode}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.returncode = returncode


class SearchError(BenchmarkBundlesError):
    """Searching a package for benchmark files failed."""


class BundleError(BenchmarkBundlesError):
    """The bundler exited with a non-zero status."""

    def __init__(self, returncode: int, dest: str) -> None:
        super().__init__(f"bundler exited with status {returncode} while writing {dest}")
        self.returncode = returncode
        self.dest = dest


class PackageFailure(BenchmarkBundlesError):
    """Processing stopped at a package; carries the partial run report."""

    def __init__(self, package: str, reason: Optional[str], report=None) -> None:
        message = f"encountered an error when processing package: {package}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.package = package
        self.report = report
