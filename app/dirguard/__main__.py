"""Allow running dirguard as ``python -m dirguard``."""

from dirguard.cli.main import app

if __name__ == "__main__":
    app()
