"""Resolve links in local documents into absolute paths and file URLs."""

__version__ = "0.1.0"
__all__ = ["local_links", "paths", "urltext"]