"""Application layer: commands, queries, services and settings."""
