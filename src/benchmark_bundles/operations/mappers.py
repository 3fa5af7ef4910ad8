"""
Error mapping and CLI utilities.

Provides centralized exception-to-exit-code mapping and the command wrapper
that prints the error, runs cleanup and exits.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

import typer

from .. import printers

T = TypeVar('T')

logger = logging.getLogger(__name__)


def exit_code_for(exc: BaseException) -> int:
    """
    Map exception to exit code.

    Every failure of a run, expected or not, exits with status 1.
    """
    return 1


def cleanup() -> None:
    """Release run resources. Nothing is held, so this only ends the output block."""
    printers.status()


def run_and_exit(func: Callable[[], T], on_exit: Optional[Callable[[], None]] = cleanup) -> T:
    """
    Unified error wrapper for CLI commands.

    Executes ``func``; on error prints the message, runs ``on_exit`` and
    raises ``typer.Exit`` with the mapped code. On success ``on_exit`` runs
    before the result is returned.

    Raises:
        typer.Exit: With appropriate exit code if function raises exception
    """
    try:
        result = func()
    except typer.Exit:
        raise
    except Exception as e:
        logger.debug("Run failed", exc_info=True)
        printers.print_error(str(e))
        if on_exit is not None:
            on_exit()
        raise typer.Exit(code=exit_code_for(e)) from e

    if on_exit is not None:
        on_exit()
    return result
