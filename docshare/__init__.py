"""docshare: document sharing presentation service over a document management backend."""

__version__ = "1.0.0"
