"""Catalog files and JSON serialization."""
