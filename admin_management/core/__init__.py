"""Core: configuration, process-wide locks, and the composition root."""
