#!/usr/bin/env python3
"""Main CLI entry point for cricviz."""

from cricviz.cli.main import app

if __name__ == '__main__':
    app()
