"""
Settings and configuration for benchmark bundling.

Resolves the repository root once at startup and derives the fixed tool
locations from it. The resulting ``Settings`` value is passed explicitly to
every stage of the run.
"""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .commands import CommandRunner
from .errors import RepositoryRootError

__all__ = ["Settings", "locate_repo_root", "create_settings_from_env"]

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "@stdlib"
BUNDLE_FILENAME = "benchmark_bundle.js"
BENCHMARK_DIRNAME = "benchmark"
BENCHMARK_PATTERN = "benchmark*.js"


@dataclass(frozen=True)
class Settings:
    """
    Fixed filesystem locations for a single run.

    Repository layout:
        source_dir: Directory containing the namespace's packages
        find_packages_path: Script listing package directories, one per line
        bundler_path: Bundler executable (browserify)
        transform_path: Transform rewriting environment variable references (envify)
        plugin_path: Plugin enabling proxyquire in the browser (proxyquire-universal)

    Output:
        bundle_filename: Name of the bundle written for each package
        benchmark_dirname: Package subdirectory searched for benchmarks
        benchmark_pattern: Glob matched against benchmark file names
    """
    repo_root: Path
    source_dir: Path
    find_packages_path: Path
    bundler_path: Path
    transform_path: Path
    plugin_path: Path
    namespace: str = DEFAULT_NAMESPACE
    bundle_filename: str = BUNDLE_FILENAME
    benchmark_dirname: str = BENCHMARK_DIRNAME
    benchmark_pattern: str = BENCHMARK_PATTERN

    def __post_init__(self):
        """Validate settings on construction."""
        if not self.namespace:
            raise ValueError("namespace is required")
        if not re.match(r"^@?[A-Za-z0-9._-]+$", self.namespace):
            raise ValueError(f"Invalid namespace format: {self.namespace}")
        if not self.bundle_filename or "/" in self.bundle_filename:
            raise ValueError(f"Invalid bundle_filename: {self.bundle_filename!r}")

    @classmethod
    def from_repo_root(
        cls,
        repo_root: Path,
        *,
        namespace: str = DEFAULT_NAMESPACE,
        bundler_path: Optional[Path] = None,
    ) -> Settings:
        """
        Derive all tool locations from the repository root.

        Args:
            repo_root: Repository root directory
            namespace: Package namespace (``@stdlib``)
            bundler_path: Override for the bundler executable

        Returns:
            Settings with paths relative to ``repo_root``
        """
        root = Path(repo_root)
        node_modules = root / "node_modules"
        return cls(
            repo_root=root,
            source_dir=root / "lib" / "node_modules",
            find_packages_path=root / "tools" / "scripts" / "find_packages",
            bundler_path=bundler_path or node_modules / ".bin" / "browserify",
            transform_path=node_modules / "envify",
            plugin_path=node_modules / "proxyquire-universal",
            namespace=namespace,
        )


def locate_repo_root(runner: CommandRunner) -> Path:
    """
    Ask git for the top-level directory of the current repository.

    Raises:
        RepositoryRootError: If git fails or prints nothing
    """
    result = runner.run(["git", "rev-parse", "--show-toplevel"])
    root = result.stdout.strip()
    if not result.ok or not root:
        raise RepositoryRootError(
            f"unable to determine repository root (git exited with status {result.returncode})"
        )
    logger.debug(f"Repository root: {root}")
    return Path(root)


def create_settings_from_env(runner: CommandRunner) -> Settings:
    """
    Build settings from the environment.

    Environment Variables:
        - BENCHMARK_BUNDLES_REPO_ROOT (optional, skips the git query)
        - BENCHMARK_BUNDLES_NAMESPACE (default: @stdlib)
        - BENCHMARK_BUNDLES_BUNDLER (optional bundler executable override)

    Returns:
        Settings object with validated configuration

    Raises:
        RepositoryRootError: If the repository root cannot be located
        ValueError: If configuration is invalid

    Note:
        Creates a fresh Settings instance every time (no caching).
    """
    root_env = os.getenv("BENCHMARK_BUNDLES_REPO_ROOT")
    repo_root = Path(root_env) if root_env else locate_repo_root(runner)

    namespace = os.getenv("BENCHMARK_BUNDLES_NAMESPACE", DEFAULT_NAMESPACE)
    bundler_env = os.getenv("BENCHMARK_BUNDLES_BUNDLER")

    return Settings.from_repo_root(
        repo_root,
        namespace=namespace,
        bundler_path=Path(bundler_env) if bundler_env else None,
    )
