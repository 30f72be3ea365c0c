"""
State Registry Organization Directory

This package provides a searchable, paginated directory of organizations
downloaded from the state property registry and cached in Redis.
"""

__version__ = "0.1.0"
__description__ = "Cached, searchable directory of state registry organizations"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "DirectoryApp":
        from .main import DirectoryApp
        return DirectoryApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "DirectoryApp",
]
