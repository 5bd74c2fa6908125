"""
Data models for config adapters.
"""

from pydantic import BaseModel, ConfigDict, Field


class SyncResult(BaseModel):
    """
    Result of a single adapter import or export.

    Produced exactly once per adapter invocation and never mutated.

    Example:
        >>> SyncResult.ok("Imported 3 entries")
        SyncResult(success=True, message='Imported 3 entries')
    """

    model_config = ConfigDict(frozen=True)

    success: bool = Field(description="Whether the copy succeeded")
    message: str = Field(default="", description="Human-readable result message")

    @classmethod
    def ok(cls, message: str = "") -> "SyncResult":
        """Build a successful result."""
        return cls(success=True, message=message)

    @classmethod
    def fail(cls, message: str) -> "SyncResult":
        """Build a failed result."""
        return cls(success=False, message=message)
