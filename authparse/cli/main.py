import sys

import typer

from authparse.cli.commands import parse
from authparse.cli.rich import get_console
from authparse.conf import get_settings
from authparse.logging import setup_logging

app = typer.Typer(
    help="Authorization header parsing tools",
    add_completion=True,
    rich_markup_mode="rich",
)

err_console = get_console(stderr=True)

parse.register(app)


@app.callback()
def main(
    ctx: typer.Context,
):
    settings = get_settings()
    setup_logging(settings, cli_mode=True)
    ctx.obj = settings


def run():
    try:
        app()
    except Exception as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(-1)
