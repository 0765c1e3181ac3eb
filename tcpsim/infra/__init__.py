"""Process environment and logging policy."""
