"""Ambient infrastructure: settings and logging configuration."""
