"""API routers."""

from . import blogs, jobs

__all__ = ["blogs", "jobs"]
