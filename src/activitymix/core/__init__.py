"""Core settings, configuration and logging."""
