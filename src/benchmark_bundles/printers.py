"""
Human-readable progress output.

All status lines go to standard error; the only machine-readable signal is
the process exit code.
"""
from __future__ import annotations

import typer

from .models import RunReport


def status(message: str = "") -> None:
    """Write a single status line to stderr."""
    typer.echo(message, err=True)


def print_package_header(package: str) -> None:
    status(f"Processing package: {package}")


def print_searching() -> None:
    status("Searching for benchmark files...")


def print_creating_bundle(dest: str) -> None:
    status(f"Creating bundle: {dest}")


def print_skipped() -> None:
    status("No benchmark files found. Skipping...")


def print_package_error(package: str) -> None:
    status(f"Encountered an error when processing package: {package}")


def print_finished() -> None:
    status("Finished bundling.")


def print_error(message: str) -> None:
    status(f"Error: {message}")


def print_run_summary(report: RunReport, verbose: bool = False) -> None:
    """
    Print bundle counts and, when verbose, per-package outcomes.

    Args:
        report: Report of the completed run
        verbose: Also list every bundle written
    """
    status(f"Bundled: {len(report.bundled)}  Skipped: {len(report.skipped)}")
    if verbose:
        for outcome in report.bundled:
            status(f"  {outcome.name} -> {outcome.bundle_path}")
