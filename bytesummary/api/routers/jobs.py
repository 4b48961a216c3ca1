"""Refresh, job status and cache endpoints."""

from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException

from ...db import BlogStorage, JobStatusRepository
from ...db.jobs import IDLE_MESSAGE
from ...errors import StoreError
from ...pipeline import BlogPipeline, start_background_run
from ..dependencies import get_blog_storage, get_job_repository, get_pipeline

router = APIRouter(prefix="/api", tags=["jobs"])


@router.post("/refresh")
def refresh(
    background_tasks: BackgroundTasks,
    pipeline: Annotated[BlogPipeline, Depends(get_pipeline)],
):
    """Start a pipeline run and return immediately."""
    start_background_run(background_tasks, pipeline)
    return {
        "success": True,
        "message": "Blog refresh started. Check /api/job-status for progress.",
    }


@router.get("/job-status")
def job_status(jobs: Annotated[JobStatusRepository, Depends(get_job_repository)]):
    """Get the status of the latest run."""
    status = jobs.get()
    if status is None:
        return {"status": "idle", "message": IDLE_MESSAGE, "lastRun": None}
    return status.to_record()


@router.post("/clear-cache")
def clear_cache(storage: Annotated[BlogStorage, Depends(get_blog_storage)]):
    """Delete every cached blog, the index and the job status."""
    try:
        deleted = storage.clear_cache()
    except StoreError as e:
        raise HTTPException(status_code=500, detail=f"Failed to clear cache: {e}")

    return {
        "success": True,
        "message": f"Cache cleared. Deleted {deleted} blog entries.",
    }
