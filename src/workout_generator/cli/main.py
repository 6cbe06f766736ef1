"""
CLI entry point using Typer.

Provides commands for workout generation:
- generate: Generate a workout and print it (or JSON)
- explain: Show how each exercise was selected
- pool: Show the ranked candidate pool
"""

from .app import app
from .commands import generation  # noqa: F401  (registers commands on app)

__all__ = ["app"]


if __name__ == "__main__":
    app()
