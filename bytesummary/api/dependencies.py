"""Shared FastAPI dependencies.

Tests replace these through `app.dependency_overrides`.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from ..config import Config
from ..db import BlogStorage, JobStatusRepository, KeyValueStore, create_store
from ..pipeline import BlogPipeline, build_pipeline


@lru_cache
def get_config() -> Config:
    """Load configuration once per process."""
    return Config()


@lru_cache
def _store_for(config: Config) -> KeyValueStore:
    return create_store(config)


def get_store(config: Annotated[Config, Depends(get_config)]) -> KeyValueStore:
    """Dependency to get the process-wide store."""
    return _store_for(config)


def get_blog_storage(
    config: Annotated[Config, Depends(get_config)],
    store: Annotated[KeyValueStore, Depends(get_store)],
) -> BlogStorage:
    """Dependency to get blog storage."""
    settings = config.config.pipeline
    return BlogStorage(store, index_limit=settings.index_limit, ttl_days=settings.blog_ttl_days)


def get_job_repository(
    config: Annotated[Config, Depends(get_config)],
    store: Annotated[KeyValueStore, Depends(get_store)],
) -> JobStatusRepository:
    """Dependency to get the job status repository."""
    return JobStatusRepository(store, ttl_hours=config.config.pipeline.job_ttl_hours)


def get_pipeline(
    config: Annotated[Config, Depends(get_config)],
    store: Annotated[KeyValueStore, Depends(get_store)],
) -> BlogPipeline:
    """Dependency to get a pipeline bound to the shared store."""
    return build_pipeline(config, store=store)
