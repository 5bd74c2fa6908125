"""
Syncode - AI agent config sync

A CLI tool that keeps AI coding-agent configuration files in sync between
your machines and a personal git repository.
"""

__version__ = "0.4.0"

# Re-export core models for convenience
from syncode.core.config.models import GlobalConfig
from syncode.core.platform import Platform

__all__ = ["GlobalConfig", "Platform", "__version__"]
