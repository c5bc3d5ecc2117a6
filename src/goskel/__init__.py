"""goskel: turn a Go web template checkout into a freshly named project."""

__version__ = "0.1.0"
