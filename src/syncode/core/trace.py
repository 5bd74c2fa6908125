"""
Diagnostic trace files.

When a command fails unexpectedly, a human-readable trace is written to
``<repo>/.syncode-logs/syncode-trace-<epoch-ms>.log`` so operators can
attach it to bug reports. One file per incident.
"""

from __future__ import annotations

import json
import logging
import time
import traceback
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field

from syncode.core.platform import get_platform_string

logger = logging.getLogger(__name__)

LOG_DIR_NAME = ".syncode-logs"
ISSUES_URL = "https://github.com/donnes/syncode/issues"


class TraceError(BaseModel):
    """Error details captured in a trace."""

    name: str = Field(description="Exception class name")
    message: str = Field(description="Exception message")
    stack: str | None = Field(default=None, description="Formatted traceback")
    cause: str | None = Field(default=None, description="Chained cause, if any")


class TraceRecord(BaseModel):
    """A single diagnostic incident."""

    timestamp: str
    version: str
    platform: str
    command: str | None = None
    args: list[str] = Field(default_factory=list)
    error: TraceError

    @classmethod
    def from_exception(
        cls,
        exc: BaseException,
        command: str | None = None,
        args: list[str] | None = None,
    ) -> TraceRecord:
        """Capture an exception together with the runtime environment."""
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        cause = exc.__cause__ or exc.__context__
        return cls(
            timestamp=datetime.now(timezone.utc).isoformat(),
            version=_get_version(),
            platform=get_platform_string(),
            command=command,
            args=list(args or []),
            error=TraceError(
                name=type(exc).__name__,
                message=str(exc),
                stack=stack.rstrip() or None,
                cause=_describe_cause(cause),
            ),
        )


def _get_version() -> str:
    try:
        from syncode import __version__
    except ImportError:
        return "unknown"
    return __version__


def _describe_cause(cause: BaseException | None) -> str | None:
    if cause is None:
        return None
    payload = {"name": type(cause).__name__, "message": str(cause)}
    return json.dumps(payload, indent=2)


def format_trace(record: TraceRecord) -> str:
    """Render a trace record as a human-readable text block."""
    lines = [
        "=== Syncode Error Trace ===",
        "",
        f"Timestamp: {record.timestamp}",
        f"Version: {record.version}",
        f"Platform: {record.platform}",
    ]

    if record.command:
        lines.append(f"Command: {record.command}")
    if record.args:
        lines.append(f"Arguments: {' '.join(record.args)}")

    lines += [
        "",
        "=== Error Details ===",
        f"Type: {record.error.name or 'Unknown'}",
        f"Message: {record.error.message}",
    ]

    if record.error.stack:
        lines += ["", "=== Stack Trace ===", record.error.stack]

    if record.error.cause:
        lines += ["", "=== Cause ===", record.error.cause]

    lines += ["", "=== End of Trace ===", ""]
    return "\n".join(lines)


def _unique_log_path(log_dir: Path) -> Path:
    stamp = int(time.time() * 1000)
    path = log_dir / f"syncode-trace-{stamp}.log"
    suffix = 1
    while path.exists():
        path = log_dir / f"syncode-trace-{stamp}-{suffix}.log"
        suffix += 1
    return path


def write_trace(
    exc: BaseException,
    *,
    log_dir: Path,
    command: str | None = None,
    args: list[str] | None = None,
) -> Path:
    """
    Write a trace file for an exception.

    Args:
        exc: The exception to record
        log_dir: Directory for trace files (usually ``<repo>/.syncode-logs``)
        command: Name of the failing command (e.g. 'pull')
        args: Optional command-line arguments

    Returns:
        Path of the written trace file
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    path = _unique_log_path(log_dir)
    record = TraceRecord.from_exception(exc, command=command, args=args)
    path.write_text(format_trace(record), encoding="utf-8")
    logger.debug("Wrote trace file %s", path)
    return path


def trace_hint(path: Path) -> str:
    """Message pointing the operator at a trace file."""
    return (
        f"If this issue persists, open an issue at {ISSUES_URL} "
        f"and paste the full error trace from file {path}"
    )
