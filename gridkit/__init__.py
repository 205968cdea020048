"""gridkit — generic data views over asynchronously fetched rows."""

__version__ = "0.1.0"
