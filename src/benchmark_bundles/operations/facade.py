"""
Operations Facade - Application service layer.

Sits between the CLI and the bundling stages: discovers packages, runs the
per-package fold, and turns a failed run into an exception for the central
error mapping.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .. import printers
from ..commands import CommandRunner
from ..discovery import find_packages
from ..errors import PackageFailure
from ..models import RunReport
from ..orchestrator import bundle_packages
from ..search import BenchmarkSearch, select_search_strategy
from ..settings import Settings


@dataclass(frozen=True)
class OpsConfig:
    """Configuration for the Operations facade."""
    verbose: bool = False         # Show per-bundle summary lines


class Operations:
    """
    Application service facade for the bundling run.

    Stateless apart from the injected settings, runner and search, so the
    whole run can be driven with fakes in tests.
    """

    def __init__(
        self,
        settings: Settings,
        runner: CommandRunner,
        *,
        search: Optional[BenchmarkSearch] = None,
        config: Optional[OpsConfig] = None,
    ):
        """
        Initialize Operations facade.

        Args:
            settings: Repository and tool locations
            runner: Runner used for every external command
            search: Benchmark search (platform strategy selected if None)
            config: Output configuration
        """
        self.settings = settings
        self.runner = runner
        self.cfg = config or OpsConfig()
        if search is None:
            search = BenchmarkSearch(
                strategy=select_search_strategy(),
                runner=runner,
                pattern=settings.benchmark_pattern,
            )
        self.search = search

    def bundle_all(self, dest: Union[str, Path]) -> RunReport:
        """
        Bundle the benchmarks of every package into ``dest``.

        Args:
            dest: Output directory

        Returns:
            Report of a fully successful run

        Raises:
            PackageDiscoveryError: If the package finder fails
            PackageFailure: If a package could not be searched or bundled
        """
        packages = find_packages(self.settings, self.runner)
        report = bundle_packages(
            packages,
            Path(dest),
            settings=self.settings,
            search=self.search,
            runner=self.runner,
        )

        failed = report.failed
        if failed is not None:
            raise PackageFailure(failed.package, failed.error, report=report)

        printers.print_run_summary(report, verbose=self.cfg.verbose)
        return report
