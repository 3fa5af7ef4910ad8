"""Root pytest configuration for benchmark-bundles tests."""
from __future__ import annotations

from pathlib import Path

import pytest

from benchmark_bundles.commands import CommandResult
from benchmark_bundles.search import BenchmarkSearch, GnuFindStrategy
from benchmark_bundles.settings import Settings

from .fakes.fake_runner import FakeRunner, fake_bundler, fake_find


# Keep the environment from leaking into settings
@pytest.fixture(autouse=True)
def test_env(monkeypatch):
    """Clear configuration environment variables."""
    for key in ("BENCHMARK_BUNDLES_REPO_ROOT", "BENCHMARK_BUNDLES_NAMESPACE", "BENCHMARK_BUNDLES_BUNDLER"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def repo(tmp_path) -> Path:
    """
    Small monorepo with three kinds of package.

    - the repository root, with a benchmark
    - math/base/special/sin, with two benchmarks plus non-matching files
    - string/trim, whose benchmark directory holds no matching files
    - utils/noop, without a benchmark directory
    """
    root = tmp_path / "repo"
    pkgs = root / "lib" / "node_modules" / "@stdlib"

    (root / "benchmark").mkdir(parents=True)
    (root / "benchmark" / "benchmark.js").write_text("// root\n")

    sin = pkgs / "math" / "base" / "special" / "sin"
    (sin / "benchmark" / "c").mkdir(parents=True)
    (sin / "benchmark" / "benchmark.js").write_text("// sin\n")
    (sin / "benchmark" / "benchmark.native.js").write_text("// sin native\n")
    (sin / "benchmark" / "c" / "benchmark.c").write_text("/* c */\n")
    (sin / "benchmark" / "README.md").write_text("sin\n")

    trim = pkgs / "string" / "trim"
    (trim / "benchmark").mkdir(parents=True)
    (trim / "benchmark" / "README.md").write_text("trim\n")

    (pkgs / "utils" / "noop").mkdir(parents=True)
    return root


@pytest.fixture
def settings(repo) -> Settings:
    """Standard test settings rooted at the fake repository."""
    return Settings.from_repo_root(repo)


@pytest.fixture
def packages(repo, settings):
    """Package directories in finder order."""
    base = settings.source_dir / "@stdlib"
    return [
        str(repo),
        str(base / "math" / "base" / "special" / "sin"),
        str(base / "string" / "trim"),
        str(base / "utils" / "noop"),
    ]


def finder_result(packages) -> CommandResult:
    return CommandResult(stdout="".join(f"{p}\n" for p in packages), returncode=0)


@pytest.fixture
def runner(settings, packages) -> FakeRunner:
    """Runner with a working finder, find and bundler."""
    return FakeRunner({
        str(settings.find_packages_path): finder_result(packages),
        "find": fake_find,
        str(settings.bundler_path): fake_bundler(),
    })


@pytest.fixture
def search(runner) -> BenchmarkSearch:
    return BenchmarkSearch(strategy=GnuFindStrategy(), runner=runner)
