"""API layer: controllers and request dependencies."""
