#!/usr/bin/env python3
"""Entry point for ``python -m png_secret``."""

from png_secret.main import cli

if __name__ == "__main__":
    cli()
