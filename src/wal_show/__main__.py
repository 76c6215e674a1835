"""Allow running as ``python -m wal_show``."""

from .cli import app

if __name__ == "__main__":
    app()
