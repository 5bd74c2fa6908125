"""
Data models for the pull workflow.
"""

from pydantic import BaseModel, Field


class PullResult(BaseModel):
    """
    Result of a successful pull workflow run.

    Failures are raised as GitWorkflowError subclasses rather than returned.
    """

    success: bool = Field(default=True, description="Whether the workflow succeeded")
    branch: str | None = Field(default=None, description="Current branch")
    remote_url: str | None = Field(default=None, description="URL of the pulled remote")
    behind_count: int = Field(default=0, ge=0, description="Commits behind before the pull")
    up_to_date: bool = Field(default=False, description="True when nothing needed pulling")
    message: str = Field(default="", description="Human-readable result message")
