"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .cache import clear_cache_command
from .init import init_command
from .run import run_command
from .serve import serve_command
from .sources import sources_app
from .status import status_command

app = typer.Typer(
    name="bytesummary",
    help="ByteSummary - Engineering blog aggregator and summarizer",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.command("run")(run_command)
app.command("serve")(serve_command)
app.command("status")(status_command)
app.command("clear-cache")(clear_cache_command)
app.add_typer(sources_app, name="sources", help="Manage custom blog sources")


if __name__ == "__main__":
    app()
