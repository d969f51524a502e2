"""Kernel – errors, value types, messaging primitives and domain records."""
