"""Translation decisions, batching and orchestration."""
