"""Command-line presentation of generated boards."""

from .main import cli, main

__all__ = ["cli", "main"]
