"""Ambient infrastructure: logging configuration."""
