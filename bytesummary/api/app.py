"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .. import __version__
from ..db import close_connection_pools
from .dependencies import get_config
from .routers import blogs, jobs


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    close_connection_pools()


app = FastAPI(
    title="ByteSummary API",
    description="Summaries of engineering blog posts from Meta, Uber, Cloudflare, Microsoft and custom sources",
    version=__version__,
    lifespan=lifespan,
)

# Register routers
app.include_router(blogs.router)
app.include_router(jobs.router)


@app.get("/")
def root():
    """API root - returns basic info."""
    return {
        "name": "ByteSummary API",
        "version": __version__,
        "docs": "/docs",
    }


def main():
    """Run the API server."""
    import uvicorn

    server = get_config().config.server
    uvicorn.run(
        "bytesummary.api.app:app",
        host=server.host,
        port=server.port,
    )


if __name__ == "__main__":
    main()
