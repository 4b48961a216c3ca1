"""ByteSummary - summaries of engineering blog posts."""

__version__ = "0.1.0"
