"""Shared utilities: settings and structured logging."""
