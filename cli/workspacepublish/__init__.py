"""Workspace publish CLI.

Command-line interface for publishing workspaces to GitHub.
"""

__version__ = "0.1.0"

from cli.workspacepublish.cli import app, main

__all__ = ["__version__", "app", "main"]
