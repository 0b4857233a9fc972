#!/usr/bin/env python3
"""
Main entrypoint for the inRiver packager
Delegates to the unified CLI in core/cli.py
"""
from inriver_packager.core.cli import cli

if __name__ == '__main__':
    cli()
