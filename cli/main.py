"""strip-tags CLI -- strip tags from HTML, optionally from areas identified by CSS selectors.

Example usage:

    cat input.html | strip-tags > output.txt

To run against just specific areas identified by CSS selectors:

    cat input.html | strip-tags .entry .footer > output.txt
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from cli.input import read_input
from extraction import __version__, strip_tags
from extraction.logs import configure_logging
from extraction.settings import settings
from parsing.errors import StripError

app = typer.Typer(
    name="strip-tags",
    help="Strip tags from HTML, optionally from areas identified by CSS selectors.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"strip-tags, version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    selectors: Optional[List[str]] = typer.Argument(
        None, help="CSS selectors to target specific elements."
    ),
    remove: Optional[List[str]] = typer.Option(
        None, "--remove", "-r", help="Remove content in these selectors."
    ),
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Input file (defaults to stdin).",
    ),
    minify: bool = typer.Option(
        False, "--minify", "-m", help="Minify whitespace (also removes blank lines)."
    ),
    keep_tag: Optional[List[str]] = typer.Option(
        None, "--keep-tag", "-t", help="Keep these <tags>; bundle names like 'hs' work too."
    ),
    all_attrs: bool = typer.Option(
        False, "--all-attrs", help="Include all attributes on kept tags."
    ),
    first: bool = typer.Option(
        False, "--first", help="First element matching the selectors."
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Strip tags from HTML read from a file or standard input."""
    configure_logging(settings.log_level or "WARNING")

    html = read_input(input_path)
    try:
        result = strip_tags(
            html,
            selectors=selectors,
            removes=remove,
            minify=minify,
            remove_blank_lines=minify,
            first=first,
            keep_tags=keep_tag,
            all_attrs=all_attrs,
        )
    except StripError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(result)


if __name__ == "__main__":
    app()
