"""
Data models for a bundling run.

These Pydantic models record what happened to each package so the
short-circuiting behaviour of a run can be inspected and tested.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field, model_validator


class OutcomeStatus(str, Enum):
    """Result of processing a single package."""
    BUNDLED = "bundled"
    SKIPPED = "skipped"
    FAILED = "failed"


class PackageOutcome(BaseModel):
    """Outcome of processing one package."""
    package: str = Field(..., description="Absolute package directory")
    name: str = Field(..., description="Public package name")
    status: OutcomeStatus
    files: List[str] = Field(default_factory=list, description="Benchmark files, in search order")
    bundle_path: Optional[str] = Field(default=None, description="Bundle written for the package")
    error: Optional[str] = Field(default=None, description="Failure reason")

    @model_validator(mode="after")
    def check_status_fields(self) -> PackageOutcome:
        if self.status is OutcomeStatus.BUNDLED:
            if not self.files:
                raise ValueError(f"bundled package '{self.name}' must have at least one file")
            if not self.bundle_path:
                raise ValueError(f"bundled package '{self.name}' must have a bundle_path")
        elif self.status is OutcomeStatus.FAILED and not self.error:
            raise ValueError(f"failed package '{self.name}' must have an error")
        return self


class RunReport(BaseModel):
    """
    Ordered outcomes of a run.

    A run stops at its first failed outcome, so a failure can only ever be
    the last entry.
    """
    outcomes: List[PackageOutcome] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_failure_is_last(self) -> RunReport:
        for outcome in self.outcomes[:-1]:
            if outcome.status is OutcomeStatus.FAILED:
                raise ValueError("a failed outcome must be the last one in a run")
        return self

    @computed_field
    @property
    def ok(self) -> bool:
        return self.failed is None

    @property
    def failed(self) -> Optional[PackageOutcome]:
        if self.outcomes and self.outcomes[-1].status is OutcomeStatus.FAILED:
            return self.outcomes[-1]
        return None

    @property
    def bundled(self) -> List[PackageOutcome]:
        return [o for o in self.outcomes if o.status is OutcomeStatus.BUNDLED]

    @property
    def skipped(self) -> List[PackageOutcome]:
        return [o for o in self.outcomes if o.status is OutcomeStatus.SKIPPED]
