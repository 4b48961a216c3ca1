"""Pipeline orchestration."""

from .orchestrator import BlogPipeline, build_pipeline, print_run_summary, run_with_summary, start_background_run

__all__ = [
    "BlogPipeline",
    "build_pipeline",
    "print_run_summary",
    "run_with_summary",
    "start_background_run",
]
