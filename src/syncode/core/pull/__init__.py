"""
Git-aware pull workflow for the config repository.

Example:
    >>> from syncode.core.pull import PullService
    >>> result = PullService(repo_root).run()
    >>> if result.up_to_date:
    ...     print("Nothing to pull")
"""

from syncode.core.pull.models import PullResult
from syncode.core.pull.service import PullService

__all__ = ["PullResult", "PullService"]
