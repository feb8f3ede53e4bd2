"""
Installed Versions Command-Line Interface.

Provides the ``installed-versions`` entry point, a stand-in for the package
manager's ``show`` command used when generating expected package lists:

- ``installed-versions``                          — list every package from the default fixture
- ``installed-versions DATA_FILE``                — list every package from DATA_FILE
- ``installed-versions DATA_FILE vendor/package`` — print one package's version

Each line is printed as ``<name> => <version>``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from installed_versions.core.dependencies import create_registry
from installed_versions.exceptions import RegistryError

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="installed-versions",
    add_completion=False,
)


@app.command()
def show(
    data_file: Annotated[
        Optional[Path],
        typer.Argument(help="Installed-package data file (JSON or YAML). Defaults to the bundled fixture."),
    ] = None,
    package: Annotated[
        Optional[str],
        typer.Argument(help="Print only this package's version."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
) -> None:
    """Print installed packages as '<name> => <version>' lines."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    # Registry failures are reported once, as the "Error:" line below.
    logging.getLogger("installed_versions").setLevel(logging.DEBUG if verbose else logging.CRITICAL)

    registry = create_registry(data_file)
    try:
        if package:
            version = registry.get_version(package)
            typer.echo(f"{package} => {version}")
        else:
            for name, display_version in registry.show():
                typer.echo(f"{name} => {display_version}")
    except RegistryError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
