"""Logging setup for fnkit."""
