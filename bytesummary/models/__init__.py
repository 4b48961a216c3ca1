"""Data models for ByteSummary."""

from .blog import BlogEntry, BlogIndexEntry, CandidateArticle
from .job import JobError, JobStatus, SourceProgress
from .source import Source

__all__ = [
    "BlogEntry",
    "BlogIndexEntry",
    "CandidateArticle",
    "JobError",
    "JobStatus",
    "Source",
    "SourceProgress",
]
