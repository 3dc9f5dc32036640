"""Core infrastructure: configuration, logging and process-wide state."""
