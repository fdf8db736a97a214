"""Two-week bulletin and upcoming events digest built from pasted calendar text."""

__version__ = "1.4.0"
