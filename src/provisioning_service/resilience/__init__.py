"""Resilience – pooled request channels."""
