"""Persistence layer: models, schemas, repositories and their helpers."""
