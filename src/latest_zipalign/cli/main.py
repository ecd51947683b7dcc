"""Root CLI application for latest-zipalign."""

import os
from typing import Final

import typer

from latest_zipalign.core.locator import DEFAULT_TOOL
from latest_zipalign.exceptions import LatestZipalignError
from latest_zipalign.utils.android_sdk import get_android_home, get_latest_tool
from latest_zipalign.utils.output import console

VERBOSE_ENV_VAR: Final[str] = "LATEST_ZIPALIGN_VERBOSE"

app = typer.Typer(
    name="latest-zipalign",
    help="Print the path of the newest zipalign in $ANDROID_HOME/build-tools.",
    add_completion=False,
)


def _verbose_enabled() -> bool:
    return os.environ.get(VERBOSE_ENV_VAR, "").strip().lower() in ("1", "true", "yes")


# Arguments are not used; extra ones are ignored rather than rejected
@app.command(context_settings={"ignore_unknown_options": True, "allow_extra_args": True})
def main() -> None:
    """Locate the newest zipalign and print its path.

    Reads ANDROID_HOME and searches build-tools/<version>/ for zipalign.
    Exits 1 with a one-line diagnostic when nothing can be found.
    Set LATEST_ZIPALIGN_VERBOSE=1 to trace candidates on stderr.
    """
    console.set_verbose(_verbose_enabled())

    try:
        # Checked before anything is read from disk
        android_home = get_android_home()
        console.print_debug(f"searching {android_home} for {DEFAULT_TOOL}")

        path = get_latest_tool(DEFAULT_TOOL, android_home)

    except LatestZipalignError as e:
        console.print_error(str(e))
        raise typer.Exit(1) from None

    typer.echo(str(path))


if __name__ == "__main__":
    app()
