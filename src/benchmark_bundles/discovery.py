"""Package discovery via the repository's ``find_packages`` script."""
from __future__ import annotations

import logging
from typing import List

from .commands import CommandRunner
from .errors import PackageDiscoveryError
from .settings import Settings

__all__ = ["find_packages"]

logger = logging.getLogger(__name__)


def find_packages(settings: Settings, runner: CommandRunner) -> List[str]:
    """
    List package directories, in the order the finder prints them.

    Raises:
        PackageDiscoveryError: If the finder exits non-zero
    """
    result = runner.run([settings.find_packages_path])
    if not result.ok:
        raise PackageDiscoveryError(result.returncode, result.stderr.strip())

    packages = [line.strip() for line in result.stdout.splitlines() if line.strip()]
    logger.debug(f"Found {len(packages)} packages")
    return packages
