"""
Benchmark Bundles CLI

Bundles every package's ``benchmark/benchmark*.js`` files into
``<output_dir>/<package name>/benchmark_bundle.js`` for running in a browser.

Exit codes: 0 on success, 1 on a missing output directory or any failure.
"""
from __future__ import annotations

import logging
from typing import Optional

import typer

from . import printers
from .cli_context import CLIContext
from .operations import Operations, OpsConfig, run_and_exit

app = typer.Typer(name="benchmark-bundles", help="Bundle package benchmarks for the browser", add_completion=False)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def bundle(
    output_dir: Optional[str] = typer.Argument(None, help="Destination directory for the bundles"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging and bundle summary"),
) -> None:
    """Create a browser bundle for every package with benchmarks."""
    if not output_dir:
        printers.print_error("must provide an output directory.")
        raise typer.Exit(code=1)

    _configure_logging(verbose)

    def _bundle() -> None:
        context = CLIContext.from_env()
        ops = Operations(context.settings, context.runner, config=OpsConfig(verbose=verbose))
        ops.bundle_all(output_dir)
        printers.status("Success!")

    run_and_exit(_bundle)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
