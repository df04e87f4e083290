"""Core footprint functionality.

This package contains the ledger, its locking, persistence and
configuration layers.
"""
