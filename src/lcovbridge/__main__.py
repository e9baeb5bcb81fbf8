"""Entry point for ``python -m lcovbridge``."""

from lcovbridge.cli.main import cli

if __name__ == "__main__":
    cli()
