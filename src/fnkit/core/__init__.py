"""Shared types and configuration for fnkit."""
