"""Glossary domain layer: aggregates, events, value objects and repository contracts."""
