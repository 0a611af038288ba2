"""Observability – log output for session diagnostics."""
