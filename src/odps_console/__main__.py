"""Console CLI bootstrap."""

from odps_console.cli import app

if __name__ == "__main__":
    app()
