"""Allow running aimax as ``python -m aimax``."""

from aimax.cli.main import app

if __name__ == "__main__":
    app()
