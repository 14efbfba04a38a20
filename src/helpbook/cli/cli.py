"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated

import typer

from helpbook.cli.commands import build_cmd, init_cmd, providers_cmd


app = typer.Typer(name="helpbook", no_args_is_help=True, help="Compile Markdown content into a help book bundle")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log per-file detail")] = False,
    ):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="build")(build_cmd)
app.command(name="init")(init_cmd)
app.command(name="providers")(providers_cmd)
