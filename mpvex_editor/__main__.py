"""
Main entry point for the mpvex editor when run as a module.

This allows you to run the editor using:
    python -m mpvex_editor

It simply imports and runs the main function from cli.py.
"""

from .cli import run_cli

if __name__ == "__main__":
    run_cli()
