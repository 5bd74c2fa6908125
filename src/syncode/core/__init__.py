"""Core sync engine for syncode: agents, adapters, config, sync and pull."""
