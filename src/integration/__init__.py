"""Integration layer models and repositories."""
