#!/usr/bin/env python
"""Command-line interface for the mpvex editor."""

import asyncio

from .editor import main

def run_cli():
    """Run the mpvex editor command-line interface."""
    raise SystemExit(asyncio.run(main()))

if __name__ == "__main__":
    run_cli()
