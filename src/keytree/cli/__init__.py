"""
CLI module for keytree.

Provides the command-line interface using Click.
"""

from keytree.cli.main import cli, main

__all__ = ["cli", "main"]
