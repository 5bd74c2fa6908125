"""
Data models for the sync orchestrator.

Defines Pydantic models for per-agent outcomes and the aggregated report.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from syncode.core.errors import ExitCode


class SyncDirection(str, Enum):
    """Direction of a sync run."""

    IMPORT = "import"  # system -> repo
    EXPORT = "export"  # repo -> system

    @property
    def label(self) -> str:
        if self == SyncDirection.IMPORT:
            return "Import (system → repo)"
        return "Export (repo → system)"


class AgentSyncOutcome(BaseModel):
    """
    Outcome of syncing one agent.

    Every selected agent produces exactly one outcome, including agents
    without an adapter and adapters that raised.
    """

    model_config = ConfigDict(frozen=True)

    agent_id: str = Field(description="Agent the outcome belongs to")
    name: str = Field(description="Display name used in progress output")
    success: bool = Field(description="Whether the agent synced")
    message: str = Field(default="", description="Adapter or error message")

    def summary(self) -> str:
        """One-line progress text, e.g. ``✓ OpenCode: Imported 12 files``."""
        icon = "✓" if self.success else "✗"
        if self.message:
            return f"{icon} {self.name}: {self.message}"
        return f"{icon} {self.name}"


class SyncReport(BaseModel):
    """
    Aggregated result of a sync run.

    Example:
        >>> report = SyncReport(direction=SyncDirection.IMPORT)
        >>> report.add(AgentSyncOutcome(agent_id="claude", name="Claude Code", success=True))
        >>> report.success_count, report.fail_count
        (1, 0)
    """

    direction: SyncDirection
    outcomes: list[AgentSyncOutcome] = Field(default_factory=list)

    started_at: datetime | None = Field(default=None)
    completed_at: datetime | None = Field(default=None)

    def add(self, outcome: AgentSyncOutcome) -> None:
        self.outcomes.append(outcome)

    @property
    def success_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.success)

    @property
    def fail_count(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.success)

    @property
    def has_failures(self) -> bool:
        return self.fail_count > 0

    @property
    def failures(self) -> list[AgentSyncOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.success]

    @property
    def exit_code(self) -> ExitCode:
        """PARTIAL_FAILURE when any agent failed, else SUCCESS."""
        return ExitCode.PARTIAL_FAILURE if self.has_failures else ExitCode.SUCCESS

    @property
    def duration_seconds(self) -> float | None:
        """Calculate run duration in seconds."""
        if self.started_at and self.completed_at:
            delta = self.completed_at - self.started_at
            return delta.total_seconds()
        return None

    def summary(self) -> str:
        """Generate a human-readable tally."""
        return f"Sync complete: {self.success_count} succeeded, {self.fail_count} failed"
