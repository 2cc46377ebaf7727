"""Shared utilities for Connect Proxy."""
