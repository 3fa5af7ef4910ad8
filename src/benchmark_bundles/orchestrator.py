"""
Per-package bundle orchestration.

Packages are processed one at a time, in discovery order. The run is a
fold over the package list that stops at the first failed outcome; bundles
written for earlier packages are left in place.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from . import printers
from .bundler import create_bundle
from .commands import CommandRunner
from .errors import BenchmarkBundlesError
from .models import OutcomeStatus, PackageOutcome, RunReport
from .naming import package_name
from .search import BenchmarkSearch
from .settings import Settings

__all__ = ["process_package", "bundle_packages"]

logger = logging.getLogger(__name__)


def process_package(
    package: str,
    dest: Path,
    *,
    settings: Settings,
    search: BenchmarkSearch,
    runner: CommandRunner,
) -> PackageOutcome:
    """
    Search one package for benchmarks and bundle them.

    Errors from the search or the bundler are returned as a failed outcome
    rather than raised, so the caller decides how to stop.
    """
    printers.print_package_header(package)
    name = package_name(package, settings)
    benchmark_dir = Path(package) / settings.benchmark_dirname

    try:
        try:
            files = search.find(benchmark_dir)
        except BenchmarkBundlesError as e:
            printers.print_package_error(package)
            return PackageOutcome(
                package=package, name=name, status=OutcomeStatus.FAILED, error=str(e)
            )

        if not files:
            printers.print_skipped()
            return PackageOutcome(package=package, name=name, status=OutcomeStatus.SKIPPED)

        # names outside the source tree are absolute paths; keep them under dest
        out_dir = Path(dest) / name.lstrip("/")
        bundle_path = out_dir / settings.bundle_filename
        try:
            out_dir.mkdir(parents=True, exist_ok=True)
            printers.print_creating_bundle(str(bundle_path))
            create_bundle(files, bundle_path, settings, runner)
        except (BenchmarkBundlesError, OSError) as e:
            printers.print_package_error(package)
            return PackageOutcome(
                package=package, name=name, status=OutcomeStatus.FAILED, files=files, error=str(e)
            )

        return PackageOutcome(
            package=package,
            name=name,
            status=OutcomeStatus.BUNDLED,
            files=files,
            bundle_path=str(bundle_path),
        )
    finally:
        printers.status()


def bundle_packages(
    packages: Iterable[str],
    dest: Path,
    *,
    settings: Settings,
    search: BenchmarkSearch,
    runner: CommandRunner,
) -> RunReport:
    """
    Process packages in order, stopping at the first failure.

    Returns:
        Report of every package processed; ``report.failed`` names the
        package that stopped the run, if any
    """
    outcomes = []
    for package in packages:
        outcome = process_package(package, dest, settings=settings, search=search, runner=runner)
        outcomes.append(outcome)
        if outcome.status is OutcomeStatus.FAILED:
            logger.debug(f"Stopping after failure in {package}")
            break
    else:
        printers.print_finished()

    return RunReport(outcomes=outcomes)
