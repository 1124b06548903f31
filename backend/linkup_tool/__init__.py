"""Linkup web search exposed as an agent tool, dev server and event handler."""

__version__ = "0.1.0"
