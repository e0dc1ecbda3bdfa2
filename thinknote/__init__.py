"""ThinkNote lecture summarization backend."""

__version__ = "0.1.0"
