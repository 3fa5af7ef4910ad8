"""
Benchmark file search.

Files are found with ``find``. BSD ``find`` (macOS) needs ``-E`` for
extended regular expressions while GNU ``find`` takes
``-regextype posix-extended``; the variant is picked once at startup and
injected into ``BenchmarkSearch``.
"""
from __future__ import annotations

import logging
import platform
from pathlib import Path
from typing import List, Optional, Protocol, Union

from . import printers
from .commands import CommandRunner
from .errors import CommandNotFoundError, SearchError
from .settings import BENCHMARK_PATTERN

__all__ = [
    "SearchStrategy",
    "BsdFindStrategy",
    "GnuFindStrategy",
    "select_search_strategy",
    "BenchmarkSearch",
]

logger = logging.getLogger(__name__)


class SearchStrategy(Protocol):
    """Builds the search command for a platform."""

    name: str

    def command(self, root: str, pattern: str) -> List[str]:
        ...


class BsdFindStrategy:
    """``find`` on Darwin/BSD."""

    name = "bsd"

    def command(self, root: str, pattern: str) -> List[str]:
        return ["find", "-E", root, "-type", "f", "-name", pattern]


class GnuFindStrategy:
    """``find`` from GNU findutils."""

    name = "gnu"

    def command(self, root: str, pattern: str) -> List[str]:
        return ["find", root, "-regextype", "posix-extended", "-type", "f", "-name", pattern]


def select_search_strategy(kernel: Optional[str] = None) -> SearchStrategy:
    """
    Pick the search variant for a kernel name.

    Args:
        kernel: Kernel name as reported by ``uname -s``; detected when omitted

    Returns:
        ``BsdFindStrategy`` on Darwin, ``GnuFindStrategy`` elsewhere
    """
    if kernel is None:
        kernel = platform.system()
    strategy: SearchStrategy = BsdFindStrategy() if kernel == "Darwin" else GnuFindStrategy()
    logger.debug(f"Kernel {kernel!r}: using {strategy.name} find")
    return strategy


class BenchmarkSearch:
    """
    Recursively lists files matching the benchmark pattern.

    An empty result is not an error. The exit status of ``find`` itself is
    not inspected; only a search tool that cannot be started is a failure.
    """

    def __init__(
        self,
        *,
        strategy: SearchStrategy,
        runner: CommandRunner,
        pattern: str = BENCHMARK_PATTERN,
    ) -> None:
        self._strategy = strategy
        self._runner = runner
        self._pattern = pattern

    @property
    def strategy(self) -> SearchStrategy:
        return self._strategy

    def find(self, root: Union[str, Path]) -> List[str]:
        """
        Search ``root`` for benchmark files.

        Returns:
            Matching paths in the order ``find`` printed them

        Raises:
            SearchError: If the search tool cannot be run
        """
        printers.print_searching()
        root = str(root)
        if not Path(root).is_dir():
            logger.debug(f"Search root {root} does not exist")
            return []

        try:
            result = self._runner.run(self._strategy.command(root, self._pattern))
        except CommandNotFoundError as e:
            raise SearchError(str(e)) from e

        if not result.ok:
            logger.debug(f"find exited with status {result.returncode} for {root}: {result.stderr.strip()}")
        return result.stdout.split()
