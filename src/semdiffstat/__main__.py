"""Allow running as ``python -m semdiffstat``."""

from semdiffstat.cli.main import cli

if __name__ == "__main__":
    cli()
