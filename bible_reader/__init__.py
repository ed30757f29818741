"""Terminal navigator for reading the Bible verse by verse."""

__version__ = "0.1.0"
