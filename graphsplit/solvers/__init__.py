"""Partition solver backends."""
