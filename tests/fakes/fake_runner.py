"""
Fake command runner for testing.

This implementation explicitly subclasses CommandRunner to ensure interface
changes break CI immediately, preventing silent drift.
"""
from __future__ import annotations

import fnmatch
import os
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Union

from benchmark_bundles.commands import CommandResult, CommandRunner
from benchmark_bundles.errors import CommandNotFoundError

__all__ = ["FakeRunner", "fake_find", "fake_bundler"]

Handler = Callable[[List[str], Optional[Path]], CommandResult]


class FakeRunner(CommandRunner):
    """
    Records every invocation and dispatches on the program name.

    Handlers are keyed by the first argument (``str`` of the program path).
    A program without a handler behaves as if it were not installed.
    This is a test double; not for production use.
    """

    def __init__(self, handlers: Optional[Dict[str, Union[Handler, CommandResult]]] = None) -> None:
        self.handlers: Dict[str, Union[Handler, CommandResult]] = dict(handlers or {})
        self.calls: List[List[str]] = []
        self.stdout_paths: List[Optional[Path]] = []

    def run(
        self,
        args: Sequence[Union[str, Path]],
        *,
        stdout_path: Optional[Path] = None,
    ) -> CommandResult:
        argv = [str(a) for a in args]
        self.calls.append(argv)
        self.stdout_paths.append(stdout_path)

        handler = self.handlers.get(argv[0])
        if handler is None:
            raise CommandNotFoundError(argv[0], "No such file or directory")
        if isinstance(handler, CommandResult):
            result = handler
        else:
            result = handler(argv, stdout_path)

        if stdout_path is not None and not Path(stdout_path).exists():
            Path(stdout_path).write_text("")
        return result

    def calls_to(self, program: Union[str, Path]) -> List[List[str]]:
        """All recorded invocations of ``program``."""
        return [c for c in self.calls if c[0] == str(program)]


def fake_find(argv: List[str], stdout_path: Optional[Path]) -> CommandResult:
    """
    Emulate ``find <root> ... -type f -name <pattern>`` for either variant.

    Results are sorted so tests can rely on the order.
    """
    args = [a for a in argv[1:] if a != "-E"]
    root = args[0]
    pattern = args[args.index("-name") + 1]
    matches = []
    for dirpath, _dirnames, filenames in os.walk(root):
        for filename in filenames:
            if fnmatch.fnmatch(filename, pattern):
                matches.append(os.path.join(dirpath, filename))
    return CommandResult(stdout="".join(f"{m}\n" for m in sorted(matches)), returncode=0)


def fake_bundler(returncode: int = 0) -> Handler:
    """Bundler handler writing the list of inputs into the bundle file."""

    def _bundle(argv: List[str], stdout_path: Optional[Path]) -> CommandResult:
        if stdout_path is not None:
            inputs = [a for a in argv[1:] if not a.startswith("-")]
            Path(stdout_path).write_text("".join(f"// {i}\n" for i in inputs))
        return CommandResult(stdout="", returncode=returncode, stderr="" if returncode == 0 else "bundler failed")

    return _bundle
