"""In-memory column store with chunked tables, dictionary encoding and scan operators."""

__version__ = "0.1.0"