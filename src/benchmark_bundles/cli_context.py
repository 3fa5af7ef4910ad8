"""
CLI Context for managing run dependencies.

Holds the settings and command runner created once per CLI invocation,
avoiding global state and enabling dependency injection.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .commands import CommandRunner, SubprocessRunner
from .settings import Settings, create_settings_from_env


@dataclass
class CLIContext:
    """
    Shared context for a CLI command.

    The runner is used both to locate the repository root and to run every
    collaborator during the run.
    """
    settings: Settings
    runner: CommandRunner

    @classmethod
    def from_env(cls, runner: Optional[CommandRunner] = None) -> CLIContext:
        """
        Create CLI context from the environment.

        Args:
            runner: Command runner (a ``SubprocessRunner`` if None)

        Returns:
            CLIContext with settings resolved from git and the environment
        """
        runner = runner or SubprocessRunner()
        settings = create_settings_from_env(runner)
        return cls(settings=settings, runner=runner)
