"""
Bundle creation with browserify.

Each bundle is produced by a single bundler invocation whose standard
output is redirected into the bundle file. The bundle contents are not
validated.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from .commands import CommandRunner
from .errors import BundleError
from .settings import Settings

__all__ = ["bundle_command", "create_bundle"]

logger = logging.getLogger(__name__)


def bundle_command(files: Sequence[str], settings: Settings) -> List[str]:
    """Bundler argument list: envify transform, proxyquire plugin, then the inputs."""
    return [
        str(settings.bundler_path),
        f"-t={settings.transform_path}",
        f"-p={settings.plugin_path}",
        *files,
    ]


def create_bundle(
    files: Sequence[str],
    dest_file: Path,
    settings: Settings,
    runner: CommandRunner,
) -> Path:
    """
    Bundle ``files`` into ``dest_file``.

    Args:
        files: Benchmark files, passed to the bundler in this order
        dest_file: Output file; overwritten if it exists
        settings: Tool locations
        runner: Command runner

    Returns:
        The bundle path

    Raises:
        BundleError: If the bundler exits non-zero
        ValueError: If no input files are given
    """
    if not files:
        raise ValueError("create_bundle requires at least one input file")

    result = runner.run(bundle_command(files, settings), stdout_path=dest_file)
    if not result.ok:
        if result.stderr:
            logger.error(result.stderr.strip())
        raise BundleError(result.returncode, str(dest_file))

    logger.debug(f"Wrote {dest_file} from {len(files)} files")
    return dest_file
