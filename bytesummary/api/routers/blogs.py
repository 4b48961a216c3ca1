"""Blog listing endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from ...config.constants import BLOG_SOURCES, CATEGORIES
from ...db import BlogStorage
from ..dependencies import get_blog_storage

router = APIRouter(prefix="/api/blogs", tags=["blogs"])


@router.get("")
def list_blogs(
    storage: Annotated[BlogStorage, Depends(get_blog_storage)],
    source: Annotated[str, Query(description="Source id or 'all'")] = "all",
    category: Annotated[str, Query(description="Category id or 'all'")] = "all",
    days: Annotated[int, Query(description="Only entries fetched within the last N days")] = 30,
):
    """List indexed blogs, newest first."""
    blogs = storage.list_blogs(source=source, category=category, days=days)
    return {
        "blogs": [blog.to_record() for blog in blogs],
        "total": len(blogs),
    }


@router.get("/sources")
def list_sources():
    """List the built-in sources."""
    return {"sources": [source.to_record() for source in BLOG_SOURCES]}


@router.get("/categories")
def list_categories():
    """List the category filter values."""
    return {"categories": CATEGORIES}


@router.get("/{blog_id}")
def get_blog(
    blog_id: str,
    storage: Annotated[BlogStorage, Depends(get_blog_storage)],
):
    """Get a single blog entry by id."""
    entry = storage.get_entry(blog_id)

    if entry is None:
        raise HTTPException(status_code=404, detail="Blog not found")

    return {"blog": entry.to_record()}
