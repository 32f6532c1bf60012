"""Allow ``python -m union_find``."""

from union_find.cli import app

if __name__ == "__main__":
    app()
