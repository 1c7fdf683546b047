"""In-memory task list served over HTTP."""

__version__ = "1.0.0"
