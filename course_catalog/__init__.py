"""Course catalog and enrollment backend."""

__version__ = "0.1.0"
