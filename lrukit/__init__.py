"""Thread-safe least-recently-used caches, with demonstration commands."""

__version__ = "0.1.0"
__all__ = ["lru", "mapcache", "demo", "comparison", "concurrent_demo"]