"""Settings storage."""
