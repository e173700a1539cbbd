"""Core data model, errors and logging helpers for lintprogress."""
