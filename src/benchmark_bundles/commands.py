"""
External command abstraction.

All collaborators (package finder, file search, bundler, git) are invoked
through a ``CommandRunner`` so they can be replaced by fakes in tests.
Invocations are blocking and carry no timeout.
"""
from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, Union, runtime_checkable

from .errors import CommandNotFoundError

__all__ = ["CommandResult", "CommandRunner", "SubprocessRunner"]

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a single external command invocation."""
    stdout: str
    returncode: int
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@runtime_checkable
class CommandRunner(Protocol):
    """Protocol for running external commands."""

    def run(
        self,
        args: Sequence[PathLike],
        *,
        stdout_path: Optional[Path] = None,
    ) -> CommandResult:
        """
        Run a command and wait for it to finish.

        Args:
            args: Program followed by its arguments
            stdout_path: If given, standard output is written to this file
                (truncating it) instead of being captured

        Returns:
            Captured output and exit status

        Raises:
            CommandNotFoundError: If the program cannot be launched
        """
        ...


class SubprocessRunner(CommandRunner):
    """CommandRunner backed by ``subprocess.run``."""

    def run(
        self,
        args: Sequence[PathLike],
        *,
        stdout_path: Optional[Path] = None,
    ) -> CommandResult:
        argv = [str(a) for a in args]
        logger.debug(f"Running {argv}")
        if stdout_path is not None:
            # an unwritable bundle file raises OSError here, outside _launch
            with open(stdout_path, "wb") as out:
                proc = self._launch(argv, stdout=out, stderr=subprocess.PIPE)
            stdout = ""
        else:
            proc = self._launch(argv, capture_output=True)
            stdout = os.fsdecode(proc.stdout)

        stderr = proc.stderr.decode("utf-8", errors="replace") if proc.stderr else ""
        logger.debug(f"{argv[0]} exited with status {proc.returncode}")
        return CommandResult(stdout=stdout, returncode=proc.returncode, stderr=stderr)

    @staticmethod
    def _launch(argv: List[str], **kwargs) -> subprocess.CompletedProcess:
        try:
            return subprocess.run(argv, check=False, **kwargs)
        except (FileNotFoundError, PermissionError) as e:
            raise CommandNotFoundError(argv[0] if argv else "", str(e)) from e
