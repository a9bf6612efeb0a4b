"""Command line interface for subsearch."""
