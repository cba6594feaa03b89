"""goforge -- scaffold production-ready Go web projects."""

__version__ = "0.1.0"
