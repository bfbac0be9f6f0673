import logging

import typer

from unreal_index.cli.query import query_app
from unreal_index.cli.serve import serve_app

app = typer.Typer(
    name="unreal-index",
    help="Unreal Index CLI: query classes, hierarchies and references in Unreal C++ sources.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(query_app, name="query")
app.add_typer(serve_app, name="serve")


@app.callback()
def _configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    app()
