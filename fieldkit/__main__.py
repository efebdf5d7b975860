"""Entry point for `python -m fieldkit`."""

from .FieldKit import app

if __name__ == "__main__":
    app()
