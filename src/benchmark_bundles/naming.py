"""Public package names derived from package directories."""
from __future__ import annotations

from pathlib import Path
from typing import Union

from .settings import Settings

__all__ = ["package_name"]


def package_name(path: Union[str, Path], settings: Settings) -> str:
    """
    Map a package directory to its public name.

    The repository root itself is the top-level package and maps to
    ``<namespace>/stdlib``. Anything else has the source directory prefix
    removed; a path outside the source directory is returned as given
    (normalized, so a trailing separator is dropped).

    Examples:
        >>> package_name("/repo", settings)
        '@stdlib/stdlib'
        >>> package_name("/repo/lib/node_modules/@stdlib/math/base/special/sin", settings)
        '@stdlib/math/base/special/sin'
    """
    path = Path(path)
    if path == settings.repo_root:
        return f"{settings.namespace}/stdlib"

    if settings.source_dir in path.parents:
        return path.relative_to(settings.source_dir).as_posix()
    return str(path)
