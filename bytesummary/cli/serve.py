"""Serve command implementation."""

from typing import Optional

import typer
import uvicorn

from ..config import Config


def serve_command(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Serve the HTTP API."""
    server = Config().config.server
    uvicorn.run(
        "bytesummary.api.app:app",
        host=host or server.host,
        port=port or server.port,
        reload=reload,
    )
