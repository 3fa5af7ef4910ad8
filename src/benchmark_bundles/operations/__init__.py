"""
Operations package - Application service layer between CLI and the bundling stages.

This package provides the Operations facade that orchestrates a run,
centralizes error mapping, and keeps the CLI thin and testable.
"""
from .facade import Operations, OpsConfig
from .mappers import cleanup, exit_code_for, run_and_exit

__all__ = ["Operations", "OpsConfig", "cleanup", "exit_code_for", "run_and_exit"]
