"""
Agent config synchronization between the system and the repository.

Example:
    >>> from syncode.core.config import ConfigStore
    >>> from syncode.core.sync import SyncDirection, SyncService
    >>> service = SyncService(ConfigStore())
    >>> config = service.load_config()
    >>> report = service.run(config, SyncDirection.EXPORT, config.agents)
    >>> report.fail_count
    0
"""

from syncode.core.sync.models import AgentSyncOutcome, SyncDirection, SyncReport
from syncode.core.sync.service import SyncService

__all__ = [
    "AgentSyncOutcome",
    "SyncDirection",
    "SyncReport",
    "SyncService",
]
